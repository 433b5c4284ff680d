from typing import Any, List, Protocol, runtime_checkable


@runtime_checkable
class ResourceLister(Protocol):
    """
    Fetches every instance of one service type in a resource group.

    Implementations follow pagination until exhausted before returning.
    Order is provider-defined but stable for a single call.
    """

    def list_resources(self, resource_group: str) -> List[Any]:
        ...


@runtime_checkable
class DiagnosticsSettingsChecker(Protocol):
    """Reports whether any diagnostic setting is attached to a resource."""

    def has_diagnostics(self, resource_id: str) -> bool:
        ...
