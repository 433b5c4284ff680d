from typing import Any

from azure.mgmt.webpubsub import WebPubSubManagementClient

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

WEBPUBSUB_SLA = SkuSlaTable(sla="99.9%", zone_sku_marker="Premium")


@registry.register("azure")
class WebPubSubAnalyzer(ServiceAnalyzer):
    service_key = "webpubsub"
    display_name = "Web PubSub"
    naming_prefix = "wps"

    @classmethod
    def build_lister(cls, context: ReviewContext) -> AzurePagedLister:
        client = WebPubSubManagementClient(context.credential, context.subscription_id)
        return AzurePagedLister(client.web_pub_sub.list_by_resource_group, **azure_request_options())

    def get_sku(self, resource: Any) -> str:
        return enum_text(require_field(require_field(resource, "sku"), "name"))

    def evaluate(self, resource: Any) -> Reliability:
        return evaluate_sku(self.get_sku(resource), WEBPUBSUB_SLA)
