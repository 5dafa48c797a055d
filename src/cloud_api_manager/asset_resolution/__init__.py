"""Asset resolution exports."""

from .asset_resolver import AssetResolver, resolve_asset
from .resolution_outcomes import (
    AmbiguousAssetError,
    AssetAlreadyExistsError,
    AssetFound,
    AssetNotFound,
    AssetNotFoundError,
    ResolutionError,
    ResolutionResult,
)

__all__ = [
    "AssetResolver",
    "resolve_asset",
    "AssetFound",
    "AssetNotFound",
    "ResolutionResult",
    "ResolutionError",
    "AssetNotFoundError",
    "AssetAlreadyExistsError",
    "AmbiguousAssetError",
]
