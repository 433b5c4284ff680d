from abc import ABC, abstractmethod
from typing import Any, List
import structlog

from reliability_review.modules.review.domain.models import AdvisoryRecord, ReviewContext
from reliability_review.modules.review.domain.ports import (
    DiagnosticsSettingsChecker,
    ResourceLister,
)
from reliability_review.modules.review.domain.rules import (
    Reliability,
    follows_naming_convention,
    parse_location,
    require_field,
)

logger = structlog.get_logger()


class ServiceAnalyzer(ABC):
    """
    Abstract base class for per-service reliability analyzers.

    Each analyzer reviews one resource type: it lists the resources of a
    resource group through its ResourceLister, looks up diagnostic settings
    for each one and maps every descriptor to exactly one AdvisoryRecord
    using the service's own rule table.

    Analyzers hold only read-only state set at construction, so separate
    instances may review different resource groups concurrently.
    """

    # Registry key, e.g. "cosmosdb"
    service_key: str = ""
    # Human-readable name used in progress logs
    display_name: str = ""
    # Expected resource name prefix
    naming_prefix: str = ""

    def __init__(
        self,
        context: ReviewContext,
        lister: ResourceLister,
        diagnostics: DiagnosticsSettingsChecker,
    ):
        self.context = context
        self.lister = lister
        self.diagnostics = diagnostics

    @classmethod
    @abstractmethod
    def build_lister(cls, context: ReviewContext) -> ResourceLister:
        """Production lister backed by the provider's management client."""
        raise NotImplementedError

    @abstractmethod
    def get_sku(self, resource: Any) -> str:
        raise NotImplementedError

    @abstractmethod
    def evaluate(self, resource: Any) -> Reliability:
        """Derive the SLA tier and zone usage of a single resource."""
        raise NotImplementedError

    def review(self, resource_group: str) -> List[AdvisoryRecord]:
        """
        Review every resource of this service type in a resource group.

        Errors from the lister or the diagnostics checker propagate as-is;
        no partial result is ever returned.
        """
        logger.info(
            "analyzing_resource_group",
            service=self.display_name or self.service_key,
            resource_group=resource_group,
        )

        resources = self.lister.list_resources(resource_group)
        results: List[AdvisoryRecord] = []
        for resource in resources:
            has_diagnostics = self.diagnostics.has_diagnostics(
                require_field(resource, "id")
            )
            results.append(self._to_record(resource_group, resource, has_diagnostics))
        return results

    def _to_record(
        self, resource_group: str, resource: Any, has_diagnostics: bool
    ) -> AdvisoryRecord:
        name = require_field(resource, "name")
        reliability = self.evaluate(resource)
        return AdvisoryRecord(
            subscription_id=self.context.subscription_id,
            resource_group=resource_group,
            service_name=name,
            resource_type=require_field(resource, "type"),
            location=parse_location(require_field(resource, "location")),
            sku=self.get_sku(resource),
            sla=reliability.sla,
            availability_zones=reliability.availability_zones,
            private_endpoints=self._has_private_endpoints(resource),
            diagnostic_settings=has_diagnostics,
            caf_naming=follows_naming_convention(name, self.naming_prefix),
        )

    @staticmethod
    def _has_private_endpoints(resource: Any) -> bool:
        connections = getattr(resource, "private_endpoint_connections", None) or []
        return len(connections) > 0
