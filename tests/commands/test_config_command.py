"""Tests for the config sub-commands."""

import json

from typer.testing import CliRunner

from tasktrack_cli.commands.config import app
from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.utils import exit_codes

runner = CliRunner()


def test_show():
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0, result.output
    assert "Task file:" in result.output
    assert "tasks.tsv.meta" in result.output
    assert "Log file:" in result.output
    assert '"format": "table"' in result.output


def test_get():
    result = runner.invoke(app, ["get", "storage.path"])
    assert result.exit_code == 0
    assert result.output.strip() == "tasks.tsv"


def test_get_unknown_key():
    result = runner.invoke(app, ["get", "storage.nope"])
    assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
    assert "not found" in result.output


def test_set_persists(tmp_path):
    result = runner.invoke(app, ["set", "output.format", "yaml"])
    assert result.exit_code == 0, result.output
    assert "Configuration 'output.format' set to 'yaml'" in result.output

    saved = json.loads((tmp_path / "config" / "config.json").read_text(encoding="utf-8"))
    assert saved["output"]["format"] == "yaml"


def test_set_invalid_value():
    result = runner.invoke(app, ["set", "output.title_width", "wide"])
    assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
    assert "Invalid value" in result.output


def test_set_unknown_key():
    result = runner.invoke(app, ["set", "output.nope", "1"])
    assert result.exit_code == exit_codes.ERROR_INVALID_ARGS


def test_reset_key_with_yes():
    get_config_service().set("storage.path", "other.tsv")
    result = runner.invoke(app, ["reset", "storage.path", "--yes"])
    assert result.exit_code == 0
    assert get_config_service().get("storage.path") == "tasks.tsv"


def test_reset_declined_keeps_config():
    get_config_service().set("output.format", "json")
    result = runner.invoke(app, ["reset"], input="n\n")
    assert result.exit_code == 1
    assert get_config_service().get("output.format") == "json"
