"""Asset reconciliation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from types import TracebackType

from cloud_api_manager.asset_loading.asset_models import AssetDefinition, AssetKind, Operation
from cloud_api_manager.asset_loading.asset_reader import AssetLoadError, load_asset_definition
from cloud_api_manager.asset_resolution.asset_resolver import AssetResolver
from cloud_api_manager.asset_resolution.resolution_outcomes import (
    AssetAlreadyExistsError,
    AssetFound,
    AssetNotFoundError,
    ResolutionError,
)
from cloud_api_manager.configuration.loader import ConfigurationError
from cloud_api_manager.configuration.runtime_settings import ManagerSettings
from cloud_api_manager.provider_clients.provider_contracts import AssetProvider, ProviderError
from cloud_api_manager.provider_clients.provider_registry import (
    PROVIDER_FACTORIES,
    ProviderFactory,
    create_provider,
    unknown_provider_message,
)

from .reconciliation_contracts import (
    OperationFailedError,
    ReconciliationOutcome,
    ReconciliationRequest,
)

_LOGGER = logging.getLogger(__name__)

AssetLoader = Callable[[Path | str, AssetKind], AssetDefinition]

MISSING_AUTHORISATION_MESSAGE = "authorisation cannot be undefined, null or empty"


class CloudApiManagerController:
    """Creates, updates or deletes one dashboard asset identified by its name.

    The credential and provider identifier are validated on construction so a
    misconfigured controller never reaches the network.
    """

    def __init__(
        self,
        settings: ManagerSettings,
        *,
        provider: AssetProvider | None = None,
        provider_factories: Mapping[str, ProviderFactory] | None = None,
        asset_loader: AssetLoader | None = None,
    ) -> None:
        _LOGGER.info("initialising new CloudApiManagerController")
        registry = PROVIDER_FACTORIES if provider_factories is None else provider_factories
        problems: list[str] = []
        if not settings.authorisation or not settings.authorisation.strip():
            problems.append(MISSING_AUTHORISATION_MESSAGE)
        if settings.provider not in registry:
            problems.append(unknown_provider_message(settings.provider))
        if problems:
            message = "; ".join(problems)
            _LOGGER.error(message)
            raise ConfigurationError(message)

        self._owns_provider = provider is None
        self._provider = provider or create_provider(settings, registry)
        self._resolver = AssetResolver(self._provider)
        self._load_asset = asset_loader or load_asset_definition
        self._handlers: dict[Operation, Callable[[AssetDefinition], ReconciliationOutcome]] = {
            Operation.CREATE: self._create,
            Operation.UPDATE: self._update,
            Operation.DELETE: self._delete,
        }
        _LOGGER.info("successfully initialised new CloudApiManagerController")

    def __enter__(self) -> CloudApiManagerController:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release the provider client when this controller created it."""
        close_provider = getattr(self._provider, "close", None)
        if self._owns_provider and callable(close_provider):
            close_provider()

    def execute_request(self, request: ReconciliationRequest) -> ReconciliationOutcome:
        return self.execute(request.file_path, request.operation, request.kind)

    def execute(
        self,
        file_path: Path | str,
        operation: Operation | str,
        kind: AssetKind | str,
    ) -> ReconciliationOutcome:
        """Apply `operation` to the `kind` asset defined in `file_path`.

        Raises:
          ValidationError: If the operation or kind is not recognised. Nothing
            is read or sent in that case.
          OperationFailedError: If loading, resolving or the provider call
            fails. The original error is available as `cause`.
        """
        resolved_operation = Operation.parse(operation)
        resolved_kind = AssetKind.parse(kind)
        handler = self._handlers[resolved_operation]
        try:
            definition = self._load_asset(file_path, resolved_kind)
            return handler(definition)
        except (AssetLoadError, ResolutionError, ProviderError) as exc:
            failure = OperationFailedError(resolved_operation, exc)
            _LOGGER.error(".%s: %s", resolved_operation.value, failure)
            raise failure from exc

    def _create(self, definition: AssetDefinition) -> ReconciliationOutcome:
        resolution = self._resolver.resolve(definition)
        if isinstance(resolution, AssetFound):
            raise AssetAlreadyExistsError(definition.name, resolution.remote_id)
        _LOGGER.info(
            ".create: asset with name %s does not exist, proceeding with creation",
            definition.name,
        )
        response = self._provider.create(definition.kind, definition)
        return self._outcome(Operation.CREATE, definition, None, response)

    def _update(self, definition: AssetDefinition) -> ReconciliationOutcome:
        remote_id = self._require_existing(Operation.UPDATE, definition)
        response = self._provider.update_by_id(definition.kind, remote_id, definition)
        return self._outcome(Operation.UPDATE, definition, remote_id, response)

    def _delete(self, definition: AssetDefinition) -> ReconciliationOutcome:
        remote_id = self._require_existing(Operation.DELETE, definition)
        response = self._provider.delete_by_id(definition.kind, remote_id)
        return self._outcome(Operation.DELETE, definition, remote_id, response)

    def _require_existing(self, operation: Operation, definition: AssetDefinition) -> str:
        resolution = self._resolver.resolve(definition)
        if not isinstance(resolution, AssetFound):
            _LOGGER.info(
                ".%s: asset with name %s does not exist, terminating %s",
                operation.value,
                definition.name,
                operation.value,
            )
            raise AssetNotFoundError(definition.name)
        _LOGGER.info(
            ".%s: asset with name %s already exists, proceeding with %s",
            operation.value,
            definition.name,
            operation.value,
        )
        return resolution.remote_id

    @staticmethod
    def _outcome(
        operation: Operation,
        definition: AssetDefinition,
        remote_id: str | None,
        response: object,
    ) -> ReconciliationOutcome:
        return ReconciliationOutcome(
            operation=operation,
            kind=definition.kind,
            asset_name=definition.name,
            remote_id=remote_id,
            provider_response=response,
        )
