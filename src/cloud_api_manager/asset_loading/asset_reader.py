"""Asset definition file reader."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from .asset_models import AssetDefinition, AssetKind

_LOGGER = logging.getLogger(__name__)


class AssetLoadError(Exception):
    """Raised when an asset definition file cannot be read or parsed."""


def load_asset_definition(file_path: Path | str, kind: AssetKind) -> AssetDefinition:
    """Read the JSON asset at `file_path` and return it as a definition of `kind`.

    Raises:
      AssetLoadError: If the file is missing, unreadable, not a JSON object, or
        lacks a non-empty name for the requested kind.
    """
    path = Path(file_path)
    if not path.is_file():
        raise AssetLoadError(f"Asset file not found: {path}")

    _LOGGER.info("About to parse supplied file at: %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AssetLoadError(f"Failed to read asset file {path}: {exc}") from exc

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AssetLoadError(f"Failure parsing the file at {path} because of {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise AssetLoadError(f"Asset file {path} must contain a JSON object.")

    try:
        return AssetDefinition.from_document(kind, parsed, source_path=path.resolve())
    except ValueError as exc:
        raise AssetLoadError(f"Asset file {path} is not a valid {kind.value}: {exc}") from exc
