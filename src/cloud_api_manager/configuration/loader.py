"""Settings loader service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DEFAULT_PROVIDER, DEFAULT_TIMEOUT_SECONDS, ManagerSettings

REQUIRED_PLACEHOLDER = "<REQUIRED>"
OPTIONAL_PLACEHOLDER = "<OPTIONAL>"


class ConfigurationError(Exception):
    """Raised when settings are missing or invalid."""


def load_settings(
    config_path: Path | str | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> ManagerSettings:
    """Build settings from an optional YAML file, then apply non-empty overrides.

    Overrides use the `ManagerSettings` field names and typically come from
    command line options or their environment variables.
    """
    settings = _load_settings_file(Path(config_path)) if config_path else ManagerSettings()
    applied = {key: value for key, value in (overrides or {}).items() if value is not None}
    unknown = sorted(set(applied) - {"provider", "authorisation", "base_url", "timeout_seconds"})
    if unknown:
        raise ConfigurationError(f"Unknown settings override(s): {', '.join(unknown)}")
    if "timeout_seconds" in applied:
        applied["timeout_seconds"] = _require_positive_int(
            applied["timeout_seconds"], "timeout_seconds"
        )
    for key in ("provider", "authorisation", "base_url"):
        if key in applied:
            applied[key] = _optional_string(applied[key], key)
    settings = replace(settings, **applied)
    _reject_required_placeholders(settings)
    return settings


def _load_settings_file(path: Path) -> ManagerSettings:
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    section = parsed.get("provider") or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError("Settings section 'provider' must be a mapping.")

    provider = _optional_string(section.get("name"), "provider.name") or DEFAULT_PROVIDER
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "provider.timeout_seconds"
    )
    return ManagerSettings(
        provider=provider,
        authorisation=_optional_string(section.get("authorisation"), "provider.authorisation"),
        base_url=_optional_string(section.get("base_url"), "provider.base_url"),
        timeout_seconds=timeout_seconds,
        source_path=path.resolve(),
    )


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == OPTIONAL_PLACEHOLDER:
        return None
    return stripped or None


def _reject_required_placeholders(settings: ManagerSettings) -> None:
    unfilled = [
        field_name
        for field_name in ("provider", "authorisation", "base_url")
        if getattr(settings, field_name) == REQUIRED_PLACEHOLDER
    ]
    if unfilled:
        raise ConfigurationError(
            f"Replace the {REQUIRED_PLACEHOLDER} placeholder for: {', '.join(unfilled)}"
        )


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
