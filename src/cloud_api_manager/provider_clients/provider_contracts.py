"""Provider capability contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from cloud_api_manager.asset_loading.asset_models import AssetDefinition, AssetKind

ProviderResponse = Any


class ProviderError(Exception):
    """Raised when a provider call fails (transport, auth, or remote error)."""

    def __init__(self, action: str, detail: str, *, status_code: int | None = None) -> None:
        self.action = action
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"{action} failed because: {detail}")


@dataclass(frozen=True)
class SearchResponse:
    """Candidate assets returned by a name search, in provider order."""

    kind: AssetKind
    entries: tuple[Mapping[str, Any], ...]


class AssetProvider(Protocol):
    """Capability surface every API-management provider implements."""

    def find_assets_by_name(self, kind: AssetKind, name: str) -> SearchResponse: ...

    def create(self, kind: AssetKind, definition: AssetDefinition) -> ProviderResponse: ...

    def update_by_id(
        self, kind: AssetKind, remote_id: str, definition: AssetDefinition
    ) -> ProviderResponse: ...

    def delete_by_id(self, kind: AssetKind, remote_id: str) -> ProviderResponse: ...
