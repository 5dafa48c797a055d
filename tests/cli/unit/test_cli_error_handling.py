"""CLI error-handling tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from cloud_api_manager.cli import main


def _write_asset(tmp_path: Path) -> Path:
    path = tmp_path / "api.json"
    path.write_text(json.dumps({"api_definition": {"name": "foo"}}), encoding="utf-8")
    return path


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["sync", "--operation", "create", "--type", "api"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--file-path" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_operation_choice_returns_clean_click_error(tmp_path: Path, capsys) -> None:
    exit_code = main(
        ["sync", "-f", str(_write_asset(tmp_path)), "-o", "upsert", "-t", "api"]
    )
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "upsert" in captured.err
    assert "Traceback" not in captured.err


def test_missing_authorisation_returns_configuration_error(
    tmp_path: Path, monkeypatch, capsys
) -> None:
    monkeypatch.delenv("CLOUD_APIMGT_AUTHORISATION", raising=False)
    monkeypatch.delenv("CLOUD_APIMGT_CONFIG", raising=False)

    exit_code = main(["sync", "-f", str(_write_asset(tmp_path)), "-o", "create", "-t", "api"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "authorisation cannot be undefined, null or empty" in captured.err
    assert "Traceback" not in captured.err


def test_missing_settings_file_returns_configuration_error(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "sync",
            "-f",
            str(_write_asset(tmp_path)),
            "-o",
            "create",
            "-t",
            "api",
            "-a",
            "token",
            "--config",
            str(tmp_path / "absent.yaml"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Settings file not found" in captured.err


def test_generate_config_writes_scaffold_and_refuses_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "settings.yaml"

    first_exit_code = main(["generate-config", "--output", str(output_path)])
    first = capsys.readouterr()
    second_exit_code = main(["generate-config", "--output", str(output_path)])
    second = capsys.readouterr()

    assert first_exit_code == 0
    assert first.out.strip() == str(output_path.resolve())
    assert "provider:" in output_path.read_text(encoding="utf-8")
    assert second_exit_code == 1
    assert "already exists" in second.err


def test_failure_log_names_default_provider_when_option_omitted(
    tmp_path: Path, monkeypatch, caplog
) -> None:
    for name in ("CLOUD_APIMGT_AUTHORISATION", "CLOUD_APIMGT_CONFIG", "CLOUD_APIMGT_PROVIDER"):
        monkeypatch.delenv(name, raising=False)

    with caplog.at_level(logging.ERROR, logger="cloud_api_manager"):
        exit_code = main(["sync", "-f", str(_write_asset(tmp_path)), "-o", "create", "-t", "api"])

    assert exit_code == 1
    assert "failure: create for api asset with provider tyk failed" in caplog.text
    assert "provider None" not in caplog.text
