"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_PROVIDER = "tyk"
DEFAULT_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class ManagerSettings:
    """Provider connectivity settings for one invocation."""

    provider: str = DEFAULT_PROVIDER
    authorisation: str | None = None
    base_url: str | None = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    source_path: Path | None = None

    def __repr__(self) -> str:
        masked = "***" if self.authorisation else None
        return (
            f"ManagerSettings(provider={self.provider!r}, authorisation={masked!r}, "
            f"base_url={self.base_url!r}, timeout_seconds={self.timeout_seconds!r}, "
            f"source_path={self.source_path!r})"
        )
