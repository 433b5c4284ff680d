from typing import List, Optional, Sequence
import structlog

from reliability_review.modules.review.domain.analyzer import ServiceAnalyzer
from reliability_review.modules.review.domain.models import ReviewContext
from reliability_review.modules.review.domain.ports import DiagnosticsSettingsChecker
from reliability_review.modules.review.domain.registry import registry
from reliability_review.shared.adapters.azure import build_diagnostics_checker
from reliability_review.shared.core.config import get_settings

# Import Azure analyzers to trigger registration
import reliability_review.modules.review.adapters.azure.analyzers  # noqa

logger = structlog.get_logger()


class AnalyzerFactory:
    """
    Builds production analyzers for a subscription.

    Every analyzer gets its own lister from `build_lister`; all of them share
    one diagnostics checker.
    """

    @staticmethod
    def get_analyzers(
        context: ReviewContext,
        provider: str = "azure",
        service_keys: Optional[Sequence[str]] = None,
        diagnostics: Optional[DiagnosticsSettingsChecker] = None,
    ) -> List[ServiceAnalyzer]:
        if service_keys is None:
            configured = get_settings().ENABLED_ANALYZERS
            if configured:
                analyzer_classes = [registry.get(provider, key) for key in configured]
            else:
                analyzer_classes = registry.get_analyzers_for_provider(provider)
        else:
            analyzer_classes = [registry.get(provider, key) for key in service_keys]

        checker = diagnostics or build_diagnostics_checker(context)
        analyzers: List[ServiceAnalyzer] = [
            analyzer_cls(context, analyzer_cls.build_lister(context), checker)
            for analyzer_cls in analyzer_classes
        ]
        logger.info(
            "analyzers_built",
            provider=provider,
            subscription_id=context.subscription_id,
            services=[a.service_key for a in analyzers],
        )
        return analyzers
