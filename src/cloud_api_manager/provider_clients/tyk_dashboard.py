"""Tyk dashboard client service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests

from cloud_api_manager.asset_loading.asset_models import AssetDefinition, AssetKind
from cloud_api_manager.configuration.runtime_settings import (
    DEFAULT_TIMEOUT_SECONDS,
    ManagerSettings,
)

from .provider_contracts import ProviderError, ProviderResponse, SearchResponse

_LOGGER = logging.getLogger(__name__)

DEFAULT_TYK_BASE_URL = "https://admin.cloud.tyk.io"

_COLLECTION_PATHS = {
    AssetKind.API: "/api/apis",
    AssetKind.POLICY: "/api/portal/policies",
}
# Search bodies list candidates under a kind-specific key.
_SEARCH_RESULT_KEYS = {
    AssetKind.API: "apis",
    AssetKind.POLICY: "Data",
}


class TykDashboardClient:
    """Provider implementation backed by the Tyk dashboard REST API."""

    def __init__(
        self,
        authorisation: str,
        base_url: str | None = None,
        *,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = (base_url or DEFAULT_TYK_BASE_URL).rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": authorisation,
                "Accept": "application/json",
                "User-Agent": "cloud-api-manager",
            }
        )

    @classmethod
    def from_settings(cls, settings: ManagerSettings) -> TykDashboardClient:
        return cls(
            settings.authorisation or "",
            settings.base_url,
            timeout_seconds=settings.timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def find_assets_by_name(self, kind: AssetKind, name: str) -> SearchResponse:
        action = f"tyk dashboard search {kind.value}"
        body = self._request(
            "GET", f"{_COLLECTION_PATHS[kind]}/search", action, params={"q": name}
        )
        if not isinstance(body, Mapping):
            raise ProviderError(action, "search response is not a JSON object")
        entries = body.get(_SEARCH_RESULT_KEYS[kind]) or []
        if not isinstance(entries, list):
            raise ProviderError(
                action, f"search response field '{_SEARCH_RESULT_KEYS[kind]}' is not a list"
            )
        _LOGGER.info("%s search result(s) for asset name: %s", len(entries), name)
        return SearchResponse(
            kind=kind,
            entries=tuple(entry for entry in entries if isinstance(entry, Mapping)),
        )

    def create(self, kind: AssetKind, definition: AssetDefinition) -> ProviderResponse:
        return self._request(
            "POST",
            _COLLECTION_PATHS[kind],
            f"tyk dashboard create {kind.value}",
            payload=definition.document,
        )

    def update_by_id(
        self, kind: AssetKind, remote_id: str, definition: AssetDefinition
    ) -> ProviderResponse:
        return self._request(
            "PUT",
            f"{_COLLECTION_PATHS[kind]}/{remote_id}",
            f"tyk dashboard update {kind.value}",
            payload=definition.document,
        )

    def delete_by_id(self, kind: AssetKind, remote_id: str) -> ProviderResponse:
        return self._request(
            "DELETE",
            f"{_COLLECTION_PATHS[kind]}/{remote_id}",
            f"tyk dashboard delete {kind.value}",
        )

    def close(self) -> None:
        self._session.close()

    def _request(
        self,
        method: str,
        path: str,
        action: str,
        *,
        params: Mapping[str, str] | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> ProviderResponse:
        url = f"{self._base_url}{path}"
        _LOGGER.debug("%s: %s %s", action, method, url)
        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=payload,
                timeout=self._timeout_seconds,
            )
        except requests.exceptions.Timeout as exc:
            raise ProviderError(
                action, f"request to {url} timed out after {self._timeout_seconds}s"
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise ProviderError(action, f"request to {url} could not be completed: {exc}") from exc

        if not response.ok:
            detail = f"dashboard responded with status {response.status_code}"
            if response.reason:
                detail = f"{detail} ({response.reason})"
            raise ProviderError(action, detail, status_code=response.status_code)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(
                action,
                f"response body is not valid JSON (status {response.status_code})",
                status_code=response.status_code,
            ) from exc
