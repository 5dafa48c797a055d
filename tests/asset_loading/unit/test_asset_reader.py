"""Asset file reader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from cloud_api_manager.asset_loading.asset_models import AssetKind
from cloud_api_manager.asset_loading.asset_reader import AssetLoadError, load_asset_definition


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_api_definition(tmp_path: Path) -> None:
    document = {
        "api_definition": {
            "name": "orders",
            "proxy": {"listen_path": "/orders/", "target_url": "http://orders.internal"},
        }
    }
    asset_path = _write_file(tmp_path / "orders.json", json.dumps(document))

    definition = load_asset_definition(asset_path, AssetKind.API)

    assert definition.kind is AssetKind.API
    assert definition.name == "orders"
    assert definition.document == document
    assert definition.source_path == asset_path.resolve()


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(AssetLoadError, match="Asset file not found"):
        load_asset_definition(tmp_path / "absent.json", AssetKind.API)


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    asset_path = _write_file(tmp_path / "broken.json", "{not json")

    with pytest.raises(AssetLoadError, match="Failure parsing the file"):
        load_asset_definition(asset_path, AssetKind.POLICY)


def test_non_object_root_raises_load_error(tmp_path: Path) -> None:
    asset_path = _write_file(tmp_path / "list.json", "[1, 2]")

    with pytest.raises(AssetLoadError, match="must contain a JSON object"):
        load_asset_definition(asset_path, AssetKind.POLICY)


def test_definition_loaded_as_wrong_kind_fails_loudly(tmp_path: Path) -> None:
    asset_path = _write_file(tmp_path / "policy.json", json.dumps({"name": "gold"}))

    with pytest.raises(AssetLoadError, match="is not a valid api"):
        load_asset_definition(asset_path, AssetKind.API)
