"""
Azure Cache for Redis Analyzer.

Only Premium caches can be pinned to availability zones, and only those with
zones actually configured earn the higher SLA.
"""
from typing import Any

from azure.mgmt.redis import RedisManagementClient

from reliability_review.modules.review.domain.analyzer import ServiceAnalyzer
from reliability_review.modules.review.domain.models import ReviewContext
from reliability_review.modules.review.domain.registry import registry
from reliability_review.modules.review.domain.rules import (
    Reliability,
    SkuSlaTable,
    enum_text,
    evaluate_sku,
    require_field,
)
from reliability_review.shared.adapters.azure import AzurePagedLister, azure_request_options

REDIS_SLA = SkuSlaTable(sla="99.9%", zone_sku_marker="Premium", zone_sla="99.95%")


@registry.register("azure")
class RedisAnalyzer(ServiceAnalyzer):
    service_key = "redis"
    display_name = "Redis"
    naming_prefix = "redis"

    @classmethod
    def build_lister(cls, context: ReviewContext) -> AzurePagedLister:
        client = RedisManagementClient(context.credential, context.subscription_id)
        return AzurePagedLister(client.redis.list_by_resource_group, **azure_request_options())

    def get_sku(self, resource: Any) -> str:
        return enum_text(require_field(require_field(resource, "sku"), "name"))

    def evaluate(self, resource: Any) -> Reliability:
        zones = getattr(resource, "zones", None) or []
        return evaluate_sku(
            self.get_sku(resource), REDIS_SLA, zones_configured=len(zones) > 0
        )
