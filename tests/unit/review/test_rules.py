import pytest
from types import SimpleNamespace

from reliability_review.core.exceptions import MalformedResourceError
from reliability_review.modules.review.domain.rules import (
    MultiLocationSlaTable,
    SkuSlaTable,
    enum_text,
    evaluate_locations,
    evaluate_sku,
    follows_naming_convention,
    parse_location,
    require_field,
)

TABLE = MultiLocationSlaTable(
    baseline="99.99%",
    zone_redundant="99.995%",
    multi_region_zone_redundant="99.999%",
)
TIER_ORDER = ["99.99%", "99.995%", "99.999%"]


class TestEvaluateLocations:
    def test_single_location_without_zones_keeps_baseline(self):
        result = evaluate_locations([False], TABLE)
        assert result.sla == "99.99%"
        assert result.availability_zones is False

    def test_no_locations_keeps_baseline(self):
        result = evaluate_locations([], TABLE)
        assert result.sla == "99.99%"
        assert result.availability_zones is False

    def test_two_zone_redundant_locations_reach_top_tier(self):
        result = evaluate_locations([True, True], TABLE)
        assert result.sla == "99.999%"
        assert result.availability_zones is True

    def test_single_zone_redundant_location_stays_on_middle_tier(self):
        result = evaluate_locations([True], TABLE)
        assert result.sla == "99.995%"
        assert result.availability_zones is True

    @pytest.mark.parametrize(
        "flags",
        [
            [True, True, False],
            [False, True, True],
            [True, False],
            [False, False, True],
        ],
    )
    def test_any_location_without_zones_caps_at_middle_tier(self, flags):
        result = evaluate_locations(flags, TABLE)
        assert result.sla == "99.995%"
        assert result.availability_zones is True

    def test_accepts_generators(self):
        result = evaluate_locations((flag for flag in [True, True, True]), TABLE)
        assert result.sla == "99.999%"

    @pytest.mark.parametrize(
        "none_flags,some_flags,all_flags",
        [
            ([False], [True, False], [True, True]),
            ([False, False, False], [False, False, True], [True, True, True]),
        ],
    )
    def test_tiers_are_monotonic(self, none_flags, some_flags, all_flags):
        none_tier = TIER_ORDER.index(evaluate_locations(none_flags, TABLE).sla)
        some_tier = TIER_ORDER.index(evaluate_locations(some_flags, TABLE).sla)
        all_tier = TIER_ORDER.index(evaluate_locations(all_flags, TABLE).sla)
        assert none_tier < some_tier <= all_tier


class TestEvaluateSku:
    def test_premium_sku_enables_zones_with_fixed_sla(self):
        result = evaluate_sku("Premium_P1", SkuSlaTable(sla="99.9%"))
        assert result.availability_zones is True
        assert result.sla == "99.9%"

    def test_free_sku_has_no_zones(self):
        result = evaluate_sku("Free_F1", SkuSlaTable(sla="99.9%"))
        assert result.availability_zones is False
        assert result.sla == "99.9%"

    def test_marker_match_is_case_sensitive(self):
        assert evaluate_sku("premium_p1", SkuSlaTable(sla="99.9%")).availability_zones is False

    def test_zone_sla_applies_only_when_zones_configured(self):
        table = SkuSlaTable(sla="99.9%", zone_sla="99.95%")
        assert evaluate_sku("Premium", table, zones_configured=True).sla == "99.95%"
        unpinned = evaluate_sku("Premium", table, zones_configured=False)
        assert unpinned.sla == "99.9%"
        assert unpinned.availability_zones is False


class TestNamingConvention:
    def test_exact_prefix_matches(self):
        assert follows_naming_convention("cosmos-db1", "cosmos") is True

    def test_prefix_is_case_sensitive(self):
        assert follows_naming_convention("Cosmos-db1", "cosmos") is False

    def test_prefix_must_be_at_start(self):
        assert follows_naming_convention("db-cosmos", "cosmos") is False


class TestHelpers:
    def test_parse_location_normalizes_display_names(self):
        assert parse_location("West Europe") == "westeurope"
        assert parse_location("eastus") == "eastus"

    def test_parse_location_keeps_zone_suffix(self):
        assert parse_location("East US 2(1)") == "eastus2(1)"

    def test_enum_text_unwraps_enum_values(self):
        offer = SimpleNamespace(value="Standard")
        assert enum_text(offer) == "Standard"
        assert enum_text("Standard") == "Standard"

    def test_require_field_raises_for_missing_value(self):
        resource = SimpleNamespace(id="/subscriptions/x/res", name=None)
        with pytest.raises(MalformedResourceError) as exc_info:
            require_field(resource, "name")
        assert exc_info.value.code == "malformed_resource"
        assert exc_info.value.details == {"field": "name", "resource_id": "/subscriptions/x/res"}
