"""
Azure collaborators for the service analyzers.

- AzurePagedLister drains a management-client `list_by_resource_group` pager.
- AzureDiagnosticsSettings checks Azure Monitor for attached diagnostic settings.

Transient transport failures are retried here with exponential backoff.
Anything else, and the last error once retries run out, propagates unchanged.
"""
from typing import Any, Callable, Dict, Iterable, List, TypeVar
import structlog
import tenacity
from azure.core.exceptions import ServiceRequestError, ServiceResponseError
from azure.mgmt.monitor import MonitorManagementClient

from reliability_review.modules.review.domain.models import ReviewContext
from reliability_review.shared.core.config import get_settings

logger = structlog.get_logger()

T = TypeVar("T")

TRANSIENT_AZURE_ERRORS = (ServiceRequestError, ServiceResponseError)


def _log_retry(retry_state: tenacity.RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "azure_call_retrying",
        operation=getattr(retry_state.fn, "__qualname__", str(retry_state.fn)),
        attempt=retry_state.attempt_number,
        error=str(error),
    )


def build_azure_retrying() -> tenacity.Retrying:
    settings = get_settings()
    return tenacity.Retrying(
        retry=tenacity.retry_if_exception_type(TRANSIENT_AZURE_ERRORS),
        wait=tenacity.wait_exponential(
            multiplier=1,
            min=settings.AZURE_RETRY_MIN_WAIT,
            max=settings.AZURE_RETRY_MAX_WAIT,
        ),
        stop=tenacity.stop_after_attempt(settings.AZURE_RETRY_MAX_ATTEMPTS),
        before_sleep=_log_retry,
        reraise=True,
    )


def call_with_azure_retry(operation: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    return build_azure_retrying()(operation, *args, **kwargs)


def azure_request_options() -> Dict[str, Any]:
    """Per-call SDK keyword arguments derived from settings."""
    settings = get_settings()
    if settings.AZURE_REQUEST_TIMEOUT is None:
        return {}
    return {"timeout": settings.AZURE_REQUEST_TIMEOUT}


class AzurePagedLister:
    """
    ResourceLister over an Azure SDK pager.

    `list_operation` is a bound `list_by_resource_group` method. The returned
    ItemPaged fetches follow-up pages lazily, so the whole drain is retried
    as a unit. `request_options` (for example `timeout`) are passed to every
    call of the operation.
    """

    def __init__(self, list_operation: Callable[..., Iterable[Any]], **request_options: Any):
        self._list_operation = list_operation
        self._request_options = request_options

    def _drain(self, resource_group: str) -> List[Any]:
        return list(self._list_operation(resource_group, **self._request_options))

    def list_resources(self, resource_group: str) -> List[Any]:
        return call_with_azure_retry(self._drain, resource_group)


class AzureDiagnosticsSettings:
    """DiagnosticsSettingsChecker backed by Azure Monitor."""

    def __init__(self, monitor_client: MonitorManagementClient, **request_options: Any):
        self._client = monitor_client
        self._request_options = request_options

    def _any_setting(self, resource_id: str) -> bool:
        settings = self._client.diagnostic_settings.list(
            resource_uri=resource_id, **self._request_options
        )
        return any(True for _ in settings)

    def has_diagnostics(self, resource_id: str) -> bool:
        return call_with_azure_retry(self._any_setting, resource_id)


def build_diagnostics_checker(context: ReviewContext) -> AzureDiagnosticsSettings:
    return AzureDiagnosticsSettings(
        MonitorManagementClient(context.credential, context.subscription_id),
        **azure_request_options(),
    )
