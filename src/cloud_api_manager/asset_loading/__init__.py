"""Asset loading exports."""

from .asset_models import (
    AssetDefinition,
    AssetKind,
    Operation,
    ValidationError,
    asset_name_of,
    remote_id_of,
)
from .asset_reader import AssetLoadError, load_asset_definition

__all__ = [
    "AssetDefinition",
    "AssetKind",
    "Operation",
    "ValidationError",
    "asset_name_of",
    "remote_id_of",
    "AssetLoadError",
    "load_asset_definition",
]
