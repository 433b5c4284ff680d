from typing import Any

from azure.mgmt.servicebus import ServiceBusManagementClient

from reliability_review.modules.review.domain.analyzer import ServiceAnalyzer
from reliability_review.modules.review.domain.models import ReviewContext
from reliability_review.modules.review.domain.registry import registry
from reliability_review.modules.review.domain.rules import (
    Reliability,
    enum_text,
    require_field,
)
from reliability_review.shared.adapters.azure import AzurePagedLister, azure_request_options

SERVICEBUS_SLA = "99.9%"
SERVICEBUS_PREMIUM_SLA = "99.95%"


@registry.register("azure")
class ServiceBusAnalyzer(ServiceAnalyzer):
    """
    Azure Service Bus namespaces.

    Zone redundancy is a per-namespace flag (Premium only); the SLA is set
    by the tier alone.
    """

    service_key = "servicebus"
    display_name = "Service Bus"
    naming_prefix = "sb"

    @classmethod
    def build_lister(cls, context: ReviewContext) -> AzurePagedLister:
        client = ServiceBusManagementClient(context.credential, context.subscription_id)
        return AzurePagedLister(client.namespaces.list_by_resource_group, **azure_request_options())

    def get_sku(self, resource: Any) -> str:
        return enum_text(require_field(require_field(resource, "sku"), "name"))

    def evaluate(self, resource: Any) -> Reliability:
        sla = SERVICEBUS_SLA
        if "Premium" in self.get_sku(resource):
            sla = SERVICEBUS_PREMIUM_SLA
        return Reliability(
            sla=sla,
            availability_zones=bool(getattr(resource, "zone_redundant", False)),
        )
