"""
Programmatic entry point for a reliability review.

Configures logging, builds the enabled analyzers for the subscription and
reviews each resource group in turn.
"""
from typing import Iterable, Optional, Sequence
import structlog

from reliability_review.modules.review.domain.factory import AnalyzerFactory
from reliability_review.modules.review.domain.models import ReviewContext, ReviewReport
from reliability_review.modules.review.domain.service import ReviewService
from reliability_review.shared.core.logging import setup_logging

__all__ = ["run_review"]


def run_review(
    context: ReviewContext,
    resource_groups: Iterable[str],
    service_keys: Optional[Sequence[str]] = None,
) -> ReviewReport:
    setup_logging()
    structlog.contextvars.bind_contextvars(subscription_id=context.subscription_id)
    try:
        analyzers = AnalyzerFactory.get_analyzers(context, service_keys=service_keys)
        return ReviewService(analyzers).review_resource_groups(resource_groups)
    finally:
        structlog.contextvars.unbind_contextvars("subscription_id")
