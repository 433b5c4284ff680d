"""
Reliability Rule Evaluation

Pure functions shared by the service analyzers:
- SLA tier derivation for multi-location (per-region zone redundancy) services
- SLA tier derivation for services that expose zone support through their SKU
- Naming convention and location normalization helpers
"""
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from reliability_review.core.exceptions import MalformedResourceError


@dataclass(frozen=True)
class Reliability:
    sla: str
    availability_zones: bool


@dataclass(frozen=True)
class MultiLocationSlaTable:
    """SLA tiers for services replicated across regions, lowest first."""

    baseline: str
    zone_redundant: str
    multi_region_zone_redundant: str


@dataclass(frozen=True)
class SkuSlaTable:
    """SLA for services whose zone support is a SKU capability."""

    sla: str
    zone_sku_marker: str = "Premium"
    # Published tier when zones are in use; None keeps `sla`
    zone_sla: Optional[str] = None


def evaluate_locations(
    zone_redundant_flags: Iterable[bool], table: MultiLocationSlaTable
) -> Reliability:
    """
    Derive the SLA tier from the zone redundancy of every deployment location.

    Any zone-redundant location lifts the tier to `table.zone_redundant`.
    The top tier requires two or more locations, all of them zone redundant;
    a single zone-redundant location, or any mix, stays on the middle tier.
    """
    sla = table.baseline
    availability_zones = False
    zone_gap = False
    location_count = 0

    for zone_redundant in zone_redundant_flags:
        location_count += 1
        if zone_redundant:
            availability_zones = True
            sla = table.zone_redundant
        else:
            zone_gap = True

    if availability_zones and location_count >= 2 and not zone_gap:
        sla = table.multi_region_zone_redundant

    return Reliability(sla=sla, availability_zones=availability_zones)


def evaluate_sku(
    sku: str, table: SkuSlaTable, zones_configured: bool = True
) -> Reliability:
    """Zone support follows the SKU; some services also need zones configured."""
    availability_zones = table.zone_sku_marker in sku and zones_configured
    sla = table.sla
    if availability_zones and table.zone_sla:
        sla = table.zone_sla
    return Reliability(sla=sla, availability_zones=availability_zones)


def follows_naming_convention(name: str, prefix: str) -> bool:
    # Exact, case-sensitive prefix match
    return name.startswith(prefix)


def parse_location(location: str) -> str:
    """'West Europe' -> 'westeurope'."""
    return location.replace(" ", "").lower()


def enum_text(value: Any) -> str:
    """Azure SDK enums are str subclasses; render their wire value."""
    return str(getattr(value, "value", value))


def require_field(resource: Any, field_name: str) -> Any:
    """Fetch an attribute a well-formed descriptor always carries."""
    value = getattr(resource, field_name, None)
    if value is None:
        raise MalformedResourceError(
            f"Resource descriptor is missing '{field_name}'",
            details={
                "field": field_name,
                "resource_id": getattr(resource, "id", None),
            },
        )
    return value
