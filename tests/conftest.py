"""
Global pytest fixtures for the reliability review test suite.

Provides:
- Test environment settings (no retry back-off)
- Settings cache isolation
- A review context for analyzer construction
"""
import os

import pytest

# Set test environment BEFORE any app imports
os.environ["DEBUG"] = "false"
os.environ["AZURE_RETRY_MAX_ATTEMPTS"] = "3"
os.environ["AZURE_RETRY_MIN_WAIT"] = "0"
os.environ["AZURE_RETRY_MAX_WAIT"] = "0"
os.environ.pop("ENABLED_ANALYZERS", None)
os.environ.pop("AZURE_REQUEST_TIMEOUT", None)

from reliability_review.modules.review.domain.models import ReviewContext  # noqa: E402
from reliability_review.shared.core.config import get_settings  # noqa: E402
from tests.utils import SUBSCRIPTION_ID  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def review_context() -> ReviewContext:
    return ReviewContext(subscription_id=SUBSCRIPTION_ID, credential=object())
