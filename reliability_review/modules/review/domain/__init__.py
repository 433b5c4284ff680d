from .analyzer import ServiceAnalyzer
from .models import AdvisoryRecord, AnalyzerFailure, ReviewContext, ReviewReport
from .ports import DiagnosticsSettingsChecker, ResourceLister
from .registry import registry as analyzers
from .service import ReviewService

__all__ = [
    "ServiceAnalyzer",
    "AdvisoryRecord",
    "AnalyzerFailure",
    "ReviewContext",
    "ReviewReport",
    "DiagnosticsSettingsChecker",
    "ResourceLister",
    "analyzers",
    "ReviewService",
]
