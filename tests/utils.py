from types import SimpleNamespace
from typing import Any, Dict, List, Optional

SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000001"


class StaticLister:
    """ResourceLister returning canned descriptors per resource group."""

    def __init__(self, resources: Optional[Dict[str, List[Any]]] = None, error: Optional[Exception] = None):
        self.resources = resources or {}
        self.error = error
        self.calls: List[str] = []

    def list_resources(self, resource_group: str) -> List[Any]:
        self.calls.append(resource_group)
        if self.error is not None:
            raise self.error
        return list(self.resources.get(resource_group, []))


class StaticDiagnostics:
    """DiagnosticsSettingsChecker answering from a set of resource ids."""

    def __init__(self, enabled: Optional[set] = None, failing: Optional[Dict[str, Exception]] = None):
        self.enabled = enabled or set()
        self.failing = failing or {}
        self.calls: List[str] = []

    def has_diagnostics(self, resource_id: str) -> bool:
        self.calls.append(resource_id)
        if resource_id in self.failing:
            raise self.failing[resource_id]
        return resource_id in self.enabled


def resource_id(provider_type: str, name: str, resource_group: str = "rg-prod") -> str:
    return (
        f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/{resource_group}"
        f"/providers/{provider_type}/{name}"
    )


def cosmos_account(
    name: str = "cosmos-orders",
    zone_flags: Optional[List[bool]] = None,
    private_endpoints: int = 0,
    location: str = "West Europe",
) -> SimpleNamespace:
    """Stand-in for azure.mgmt.cosmosdb DatabaseAccountGetResults."""
    flags = [False] if zone_flags is None else zone_flags
    return SimpleNamespace(
        id=resource_id("Microsoft.DocumentDB/databaseAccounts", name),
        name=name,
        type="Microsoft.DocumentDB/databaseAccounts",
        location=location,
        database_account_offer_type="Standard",
        locations=[
            SimpleNamespace(location_name=f"region-{i}", is_zone_redundant=flag, failover_priority=i)
            for i, flag in enumerate(flags)
        ],
        private_endpoint_connections=[SimpleNamespace(id=f"pec-{i}") for i in range(private_endpoints)],
    )


def sku_resource(
    provider_type: str,
    name: str,
    sku: str,
    location: str = "eastus",
    private_endpoints: int = 0,
    **extra: Any,
) -> SimpleNamespace:
    """Stand-in for SDK resources that carry a `sku.name`."""
    return SimpleNamespace(
        id=resource_id(provider_type, name),
        name=name,
        type=provider_type,
        location=location,
        sku=SimpleNamespace(name=sku),
        private_endpoint_connections=[SimpleNamespace(id=f"pec-{i}") for i in range(private_endpoints)],
        **extra,
    )
