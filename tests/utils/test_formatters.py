"""Tests for output formatters."""

import json
from datetime import date

import yaml

from tasktrack_cli.models import Priority, Task
from tasktrack_cli.utils.ui.console import get_console, set_color
from tasktrack_cli.utils.ui.formatters import (
    format_error,
    format_output,
    format_success,
    tasks_to_dicts,
    truncate,
)


def _tasks():
    return [
        Task(id=1, title="Pay rent", due=date(2025, 9, 1), priority=Priority.HIGH, tags=["home"]),
        Task(id=2, title="Buy [milk]", done=True),
    ]


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("abc", 3) == "abc"

    def test_long_text_gets_ellipsis(self):
        assert truncate("abcdef", 4) == "abc…"
        assert len(truncate("abcdef", 4)) == 4

    def test_none(self):
        assert truncate(None, 4) == ""


def test_tasks_to_dicts():
    assert tasks_to_dicts(_tasks())[0] == {
        "id": 1,
        "title": "Pay rent",
        "due": "2025-09-01",
        "priority": "HIGH",
        "done": False,
        "tags": ["home"],
    }


def test_json_output(capsys):
    format_output(_tasks(), "json")
    data = json.loads(capsys.readouterr().out)
    assert [item["id"] for item in data] == [1, 2]
    assert data[1]["due"] is None


def test_yaml_output(capsys):
    format_output(_tasks(), "yaml")
    data = yaml.safe_load(capsys.readouterr().out)
    assert data[0]["title"] == "Pay rent"
    assert data[1]["done"] is True


def test_table_output(capsys):
    format_output(_tasks(), "table")
    out = capsys.readouterr().out
    assert "Pay rent" in out
    assert "2025-09-01" in out
    assert "HIGH" in out
    # Square brackets in user text are not treated as markup
    assert "Buy [milk]" in out


def test_table_flattens_tabs_and_newlines(capsys):
    format_output([Task(id=1, title="a\tb\nc")], "table")
    assert "a b c" in capsys.readouterr().out


def test_empty_table(capsys):
    format_output([], "table")
    assert "(no tasks)" in capsys.readouterr().out


def test_messages_escape_markup(capsys):
    format_error("tag [bold] broken")
    format_success("done [/due]")
    out = capsys.readouterr().out
    assert "Error: tag [bold] broken" in out
    assert "Success: done [/due]" in out


def test_set_color_toggles_shared_console():
    console = get_console()
    try:
        set_color(False)
        assert console.no_color is True
        set_color(True)
        assert console.no_color is False
    finally:
        set_color(True)
