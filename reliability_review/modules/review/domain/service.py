from typing import Iterable, Sequence
import structlog

from reliability_review.modules.review.domain.analyzer import ServiceAnalyzer
from reliability_review.modules.review.domain.models import AnalyzerFailure, ReviewReport

logger = structlog.get_logger()


class ReviewService:
    """
    Runs every analyzer against resource groups and concatenates the results.

    A failing analyzer contributes nothing for that resource group; the
    failure is recorded and the remaining analyzers still run.
    """

    def __init__(self, analyzers: Sequence[ServiceAnalyzer]):
        self.analyzers = list(analyzers)

    def review_resource_group(self, resource_group: str) -> ReviewReport:
        report = ReviewReport()
        for analyzer in self.analyzers:
            try:
                records = analyzer.review(resource_group)
            except Exception as exc:
                logger.error(
                    "analyzer_review_failed",
                    service=analyzer.service_key,
                    resource_group=resource_group,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                report.failures.append(
                    AnalyzerFailure(
                        service_key=analyzer.service_key,
                        resource_group=resource_group,
                        error_type=type(exc).__name__,
                        error=str(exc),
                    )
                )
                continue
            report.results.extend(records)
        return report

    def review_resource_groups(self, resource_groups: Iterable[str]) -> ReviewReport:
        combined = ReviewReport()
        for resource_group in resource_groups:
            report = self.review_resource_group(resource_group)
            combined.results.extend(report.results)
            combined.failures.extend(report.failures)

        logger.info(
            "review_completed",
            resources=len(combined.results),
            failures=len(combined.failures),
        )
        return combined
