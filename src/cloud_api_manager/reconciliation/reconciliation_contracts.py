"""Reconciliation entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cloud_api_manager.asset_loading.asset_models import AssetKind, Operation
from cloud_api_manager.provider_clients.provider_contracts import ProviderResponse


class OperationFailedError(Exception):
    """Raised when an operation fails after it started; wraps the original error."""

    def __init__(self, operation: Operation, cause: Exception) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation.value} operation failed because: {cause}")


@dataclass(frozen=True)
class ReconciliationRequest:
    """Input contract for one reconciliation."""

    file_path: Path | str
    operation: Operation | str
    kind: AssetKind | str


@dataclass(frozen=True)
class ReconciliationOutcome:
    """Output contract for one successful reconciliation."""

    operation: Operation
    kind: AssetKind
    asset_name: str
    remote_id: str | None
    provider_response: ProviderResponse
