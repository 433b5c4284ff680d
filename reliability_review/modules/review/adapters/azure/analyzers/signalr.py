from typing import Any

from azure.mgmt.signalr import SignalRManagementClient

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

SIGNALR_SLA = SkuSlaTable(sla="99.9%", zone_sku_marker="Premium")


@registry.register("azure")
class SignalRAnalyzer(ServiceAnalyzer):
    """Azure SignalR Service: zone support comes with the Premium SKU."""

    service_key = "signalr"
    display_name = "SignalR"
    naming_prefix = "sigr"

    @classmethod
    def build_lister(cls, context: ReviewContext) -> AzurePagedLister:
        client = SignalRManagementClient(context.credential, context.subscription_id)
        return AzurePagedLister(client.signal_r.list_by_resource_group, **azure_request_options())

    def get_sku(self, resource: Any) -> str:
        return enum_text(require_field(require_field(resource, "sku"), "name"))

    def evaluate(self, resource: Any) -> Reliability:
        return evaluate_sku(self.get_sku(resource), SIGNALR_SLA)
