"""Configuration domain exports."""

from .loader import ConfigurationError, load_settings
from .runtime_settings import DEFAULT_PROVIDER, DEFAULT_TIMEOUT_SECONDS, ManagerSettings
from .settings_scaffold_builder import (
    DEFAULT_SETTINGS_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)

__all__ = [
    "ManagerSettings",
    "DEFAULT_PROVIDER",
    "DEFAULT_TIMEOUT_SECONDS",
    "ConfigurationError",
    "load_settings",
    "DEFAULT_SETTINGS_FILENAME",
    "build_placeholder_settings",
    "write_placeholder_settings",
]
