"""Provider registry tests."""

from __future__ import annotations

import pytest
from cloud_api_manager.configuration.loader import ConfigurationError
from cloud_api_manager.configuration.runtime_settings import ManagerSettings
from cloud_api_manager.provider_clients.provider_registry import create_provider
from cloud_api_manager.provider_clients.tyk_dashboard import TykDashboardClient


def test_create_provider_builds_tyk_client() -> None:
    provider = create_provider(
        ManagerSettings(provider="tyk", authorisation="token", base_url="http://dash.local")
    )

    assert isinstance(provider, TykDashboardClient)
    assert provider.base_url == "http://dash.local"


def test_create_provider_rejects_unknown_identifier() -> None:
    with pytest.raises(ConfigurationError) as error:
        create_provider(ManagerSettings(provider="kong", authorisation="token"))

    assert str(error.value) == 'the specified provider "kong" is not configured in this package'


def test_create_provider_uses_supplied_factories() -> None:
    sentinel = object()

    provider = create_provider(
        ManagerSettings(provider="kong", authorisation="token"),
        factories={"kong": lambda settings: sentinel},
    )

    assert provider is sentinel
