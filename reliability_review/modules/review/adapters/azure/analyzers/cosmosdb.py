"""
Azure Cosmos DB Analyzer.

Cosmos DB accounts replicate across regions; the SLA follows the zone
redundancy of every configured location.
"""
from typing import Any

from azure.mgmt.cosmosdb import CosmosDBManagementClient

from reliability_review.modules.review.domain.analyzer import ServiceAnalyzer
from reliability_review.modules.review.domain.models import ReviewContext
from reliability_review.modules.review.domain.registry import registry
from reliability_review.modules.review.domain.rules import (
    MultiLocationSlaTable,
    Reliability,
    enum_text,
    evaluate_locations,
    require_field,
)
from reliability_review.shared.adapters.azure import AzurePagedLister, azure_request_options

COSMOSDB_SLA = MultiLocationSlaTable(
    baseline="99.99%",
    zone_redundant="99.995%",
    multi_region_zone_redundant="99.999%",
)


@registry.register("azure")
class CosmosDBAnalyzer(ServiceAnalyzer):
    """Reliability review of Cosmos DB database accounts."""

    service_key = "cosmosdb"
    display_name = "CosmosDB Databases"
    naming_prefix = "cosmos"

    @classmethod
    def build_lister(cls, context: ReviewContext) -> AzurePagedLister:
        client = CosmosDBManagementClient(context.credential, context.subscription_id)
        return AzurePagedLister(client.database_accounts.list_by_resource_group, **azure_request_options())

    def get_sku(self, resource: Any) -> str:
        return enum_text(require_field(resource, "database_account_offer_type"))

    def evaluate(self, resource: Any) -> Reliability:
        locations = getattr(resource, "locations", None) or []
        return evaluate_locations(
            (bool(require_field(location, "is_zone_redundant")) for location in locations),
            COSMOSDB_SLA,
        )
