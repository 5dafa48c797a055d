"""Asset domain entities."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class ValidationError(Exception):
    """Raised when a requested operation or asset kind is not recognised."""


class AssetKind(str, Enum):
    """Kinds of assets managed on the dashboard."""

    API = "api"
    POLICY = "policy"

    @classmethod
    def parse(cls, value: AssetKind | str) -> AssetKind:
        try:
            return cls(value)
        except ValueError as exc:
            raise ValidationError(f"The specified type, {value}, is not valid.") from exc


class Operation(str, Enum):
    """Operations that can be applied to an asset."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: Operation | str) -> Operation:
        try:
            return cls(value)
        except ValueError as exc:
            raise ValidationError(f"The specified operation, {value}, is not valid.") from exc


# Paths are shared by definition documents and provider search entries.
_NAME_PATHS: dict[AssetKind, tuple[str, ...]] = {
    AssetKind.API: ("api_definition", "name"),
    AssetKind.POLICY: ("name",),
}
_REMOTE_ID_PATHS: dict[AssetKind, tuple[str, ...]] = {
    AssetKind.API: ("api_definition", "id"),
    AssetKind.POLICY: ("_id",),
}


def asset_name_of(kind: AssetKind, document: Mapping[str, Any]) -> str | None:
    """Return the human-readable name stored in `document` for `kind`, if any."""
    value = _read_path(document, _NAME_PATHS[kind])
    return value if isinstance(value, str) else None


def remote_id_of(kind: AssetKind, document: Mapping[str, Any]) -> str | None:
    """Return the dashboard identifier stored in `document` for `kind`, if any."""
    value = _read_path(document, _REMOTE_ID_PATHS[kind])
    return value if isinstance(value, str) and value else None


def name_field_label(kind: AssetKind) -> str:
    return ".".join(_NAME_PATHS[kind])


def _read_path(document: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    current: Any = document
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


@dataclass(frozen=True)
class AssetDefinition:
    """Parsed asset document together with the kind it was loaded as.

    The document is copied on construction, so later changes to the caller's
    mapping do not reach the definition or its name.
    """

    kind: AssetKind
    document: dict[str, Any]
    source_path: Path | None = None
    name: str = field(init=False)

    def __post_init__(self) -> None:
        name = asset_name_of(self.kind, self.document)
        if name is None or not name.strip():
            raise ValueError(f"{name_field_label(self.kind)} must be a non-empty string.")
        object.__setattr__(self, "document", copy.deepcopy(dict(self.document)))
        object.__setattr__(self, "name", name)

    @classmethod
    def from_document(
        cls,
        kind: AssetKind | str,
        document: Any,
        source_path: Path | None = None,
    ) -> AssetDefinition:
        """Build a definition from an already parsed document.

        Raises:
          ValidationError: If `kind` is not a known asset kind.
          ValueError: If `document` is not a mapping or has no name for `kind`.
        """
        asset_kind = AssetKind.parse(kind)
        if not isinstance(document, Mapping):
            raise ValueError("Asset document must be a JSON object.")
        return cls(kind=asset_kind, document=dict(document), source_path=source_path)
