"""Asset resolution outcomes and precondition errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AssetFound:
    """The dashboard holds exactly one asset with the requested name."""

    remote_id: str


@dataclass(frozen=True)
class AssetNotFound:
    """The dashboard holds no asset with the requested name."""

    name: str


ResolutionResult = AssetFound | AssetNotFound


class ResolutionError(Exception):
    """Base class for asset existence precondition failures."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class AssetNotFoundError(ResolutionError):
    """Raised when an operation requires an existing asset but none was found."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"the asset with name {name} does not exist in the provider")


class AssetAlreadyExistsError(ResolutionError):
    """Raised when creating an asset whose name is already taken."""

    def __init__(self, name: str, remote_id: str) -> None:
        self.remote_id = remote_id
        super().__init__(name, f"an asset with name {name} already exists")


class AmbiguousAssetError(ResolutionError):
    """Raised when several remote assets share the requested name."""

    def __init__(self, name: str, remote_ids: tuple[str | None, ...]) -> None:
        self.remote_ids = remote_ids
        listed = ", ".join(str(remote_id) for remote_id in remote_ids)
        super().__init__(
            name,
            f"{len(remote_ids)} assets with name {name} exist in the provider ({listed}),"
            " expected at most one",
        )
