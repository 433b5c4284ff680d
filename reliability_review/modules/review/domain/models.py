"""
Review data types.

AdvisoryRecord is the normalized, per-resource output of every analyzer.
ReviewContext carries the read-only configuration an analyzer is built with.
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class ReviewContext(BaseModel):
    """Subscription and credential handle shared by the analyzers of one review."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    subscription_id: str = Field(..., min_length=1)
    credential: Any


class AdvisoryRecord(BaseModel):
    """Reliability posture of a single deployed resource."""

    model_config = ConfigDict(frozen=True)

    subscription_id: str
    resource_group: str
    service_name: str
    resource_type: str
    location: str
    sku: str
    sla: str
    availability_zones: bool
    private_endpoints: bool
    diagnostic_settings: bool
    caf_naming: bool


class AnalyzerFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_key: str
    resource_group: str
    error_type: str
    error: str


class ReviewReport(BaseModel):
    """Records from every analyzer that succeeded, plus the ones that did not."""

    results: List[AdvisoryRecord] = Field(default_factory=list)
    failures: List[AnalyzerFailure] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures
