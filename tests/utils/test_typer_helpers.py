"""Tests for the typo-suggesting command group."""

from typer.testing import CliRunner

from tasktrack_cli.main import app
from tasktrack_cli.utils import exit_codes

runner = CliRunner()


def test_suggests_close_visible_command():
    result = runner.invoke(app, ["serach"])
    assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
    assert "no such command 'serach'" in result.output
    assert "Did you mean: search" in result.output


def test_hidden_aliases_are_not_suggested():
    result = runner.invoke(app, ["rmm"])
    assert "Did you mean: rm" not in result.output


def test_no_suggestion_falls_back_to_usage_error():
    result = runner.invoke(app, ["zzzzzz"])
    assert result.exit_code == 2
    assert "Did you mean" not in result.output
    assert "No such command" in result.output
