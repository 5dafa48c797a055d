"""Provider lookup by identifier."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from cloud_api_manager.configuration.loader import ConfigurationError
from cloud_api_manager.configuration.runtime_settings import ManagerSettings

from .provider_contracts import AssetProvider
from .tyk_dashboard import TykDashboardClient

ProviderFactory = Callable[[ManagerSettings], AssetProvider]

PROVIDER_FACTORIES: Mapping[str, ProviderFactory] = {
    "tyk": TykDashboardClient.from_settings,
}


def unknown_provider_message(provider: str | None) -> str:
    return f'the specified provider "{provider}" is not configured in this package'


def create_provider(
    settings: ManagerSettings,
    factories: Mapping[str, ProviderFactory] | None = None,
) -> AssetProvider:
    """Instantiate the provider registered under `settings.provider`."""
    registry = PROVIDER_FACTORIES if factories is None else factories
    factory = registry.get(settings.provider or "")
    if factory is None:
        raise ConfigurationError(unknown_provider_message(settings.provider))
    return factory(settings)
