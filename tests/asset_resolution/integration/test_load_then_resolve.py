"""Loading a definition file and resolving it against an echoing provider."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from cloud_api_manager.asset_loading import AssetKind, asset_name_of, load_asset_definition
from cloud_api_manager.asset_resolution import AssetFound, AssetResolver
from cloud_api_manager.provider_clients import SearchResponse

_FIXTURE_IDS = {
    AssetKind.API: "5e2a9f0c1f6a4b0001a8c3d1",
    AssetKind.POLICY: "5e2aa1b21f6a4b0001a8c3d2",
}


class EchoProvider:
    """Answers every search with one stored asset carrying the queried name."""

    def find_assets_by_name(self, kind: AssetKind, name: str) -> SearchResponse:
        if kind is AssetKind.API:
            entry = {"api_definition": {"name": name, "id": _FIXTURE_IDS[kind]}}
        else:
            entry = {"name": name, "_id": _FIXTURE_IDS[kind]}
        return SearchResponse(kind=kind, entries=(entry,))

    def create(self, kind, definition):  # pragma: no cover
        raise AssertionError("not expected")

    def update_by_id(self, kind, remote_id, definition):  # pragma: no cover
        raise AssertionError("not expected")

    def delete_by_id(self, kind, remote_id):  # pragma: no cover
        raise AssertionError("not expected")


@pytest.mark.parametrize(
    ("kind", "document"),
    [
        (AssetKind.API, {"api_definition": {"name": "Tyk Test API", "active": True}}),
        (AssetKind.POLICY, {"name": "Sample policy", "rate": 1000, "per": 60}),
    ],
)
def test_loaded_definition_resolves_to_fixture_id(
    tmp_path: Path, kind: AssetKind, document: dict
) -> None:
    asset_path = tmp_path / f"{kind.value}.json"
    asset_path.write_text(json.dumps(document), encoding="utf-8")

    definition = load_asset_definition(asset_path, kind)
    result = AssetResolver(EchoProvider()).resolve(definition)

    assert result == AssetFound(remote_id=_FIXTURE_IDS[kind])
    assert asset_name_of(kind, document) == definition.name
