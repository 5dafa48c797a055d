"""Provider client exports."""

from .provider_contracts import AssetProvider, ProviderError, ProviderResponse, SearchResponse
from .provider_registry import (
    PROVIDER_FACTORIES,
    ProviderFactory,
    create_provider,
    unknown_provider_message,
)
from .tyk_dashboard import DEFAULT_TYK_BASE_URL, TykDashboardClient

__all__ = [
    "AssetProvider",
    "ProviderError",
    "ProviderResponse",
    "SearchResponse",
    "PROVIDER_FACTORIES",
    "ProviderFactory",
    "create_provider",
    "unknown_provider_message",
    "DEFAULT_TYK_BASE_URL",
    "TykDashboardClient",
]
