"""Name-based asset resolution service."""

from __future__ import annotations

import logging

from cloud_api_manager.asset_loading.asset_models import (
    AssetDefinition,
    AssetKind,
    asset_name_of,
    remote_id_of,
)
from cloud_api_manager.provider_clients.provider_contracts import AssetProvider, ProviderError

from .resolution_outcomes import AmbiguousAssetError, AssetFound, AssetNotFound, ResolutionResult

_LOGGER = logging.getLogger(__name__)


class AssetResolver:  # pylint: disable=too-few-public-methods
    """Looks up the dashboard identifier of an asset definition by its name."""

    def __init__(self, provider: AssetProvider) -> None:
        self._provider = provider

    def resolve(self, definition: AssetDefinition) -> ResolutionResult:
        """Return the current remote state of `definition`.

        Only candidates whose name equals the definition name exactly are
        considered, for every asset kind.

        Raises:
          AmbiguousAssetError: If more than one candidate matches exactly.
          ProviderError: If the search fails or a match carries no identifier.
        """
        return resolve_asset(self._provider, definition.kind, definition)


def resolve_asset(
    provider: AssetProvider, kind: AssetKind, definition: AssetDefinition
) -> ResolutionResult:
    """Functional form of `AssetResolver.resolve` with an explicit kind."""
    desired_name = asset_name_of(kind, definition.document) or ""
    _LOGGER.info("checking if %s asset with name %s exists", kind.value, desired_name)
    search_response = provider.find_assets_by_name(kind, desired_name)

    matches = [
        entry for entry in search_response.entries if asset_name_of(kind, entry) == desired_name
    ]
    if not matches:
        _LOGGER.info("no %s asset named %s in the provider", kind.value, desired_name)
        return AssetNotFound(name=desired_name)
    if len(matches) > 1:
        raise AmbiguousAssetError(
            desired_name, tuple(remote_id_of(kind, entry) for entry in matches)
        )

    remote_id = remote_id_of(kind, matches[0])
    if remote_id is None:
        raise ProviderError(
            f"search {kind.value}",
            f"the match for asset name {desired_name} carries no identifier",
        )
    _LOGGER.info("systemId for asset with name %s is %s", desired_name, remote_id)
    return AssetFound(remote_id=remote_id)
