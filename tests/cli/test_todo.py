"""Tests for to-do list CLI commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from ilo_config.cli import app
from ilo_config.cli.commands.todo import TODO_KEY

runner = CliRunner()


def _todo_file(config_root: Path) -> Path:
    return config_root / f"{TODO_KEY}.json"


def test_add_item(config_root: Path) -> None:
    """Add an item and persist it."""
    result = runner.invoke(app, ["todo", "add", "Finish sketch of skyeels"])

    assert result.exit_code == 0
    assert 'Added "Finish sketch of skyeels" to the todo list at position 1.' in result.stdout
    assert json.loads(_todo_file(config_root).read_text()) == [["Finish sketch of skyeels", False]]


def test_add_without_item(config_root: Path) -> None:
    """Prompt for a description and write nothing."""
    result = runner.invoke(app, ["todo", "add"])

    assert result.exit_code == 0
    assert "Please enter the description of the item" in result.stdout
    assert not config_root.exists()


def test_list_items(config_root: Path) -> None:
    """List items with their position and status."""
    runner.invoke(app, ["todo", "add", "Finish sketch of skyeels"])
    runner.invoke(app, ["todo", "add", "Get directions to the Palanaeum"])
    runner.invoke(app, ["todo", "do", "1"])

    result = runner.invoke(app, ["todo", "list"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "(DONE)   |      1 | Finish sketch of skyeels"
    assert lines[1] == "         |      2 | Get directions to the Palanaeum"


def test_list_empty_does_not_write(config_root: Path) -> None:
    """Listing an empty list leaves the disk untouched."""
    result = runner.invoke(app, ["todo", "list"])

    assert result.exit_code == 0
    assert result.stdout == ""
    assert not config_root.exists()


def test_do_item(config_root: Path) -> None:
    """Mark an item complete."""
    runner.invoke(app, ["todo", "add", "Finish sketch of skyeels"])

    result = runner.invoke(app, ["todo", "do", "1"])

    assert result.exit_code == 0
    assert 'Marked "Finish sketch of skyeels" as complete!' in result.stdout
    assert json.loads(_todo_file(config_root).read_text()) == [["Finish sketch of skyeels", True]]


def test_do_rejects_bad_index(config_root: Path) -> None:
    """Reject out-of-range and already completed items."""
    runner.invoke(app, ["todo", "add", "Finish sketch of skyeels"])
    runner.invoke(app, ["todo", "do", "1"])

    for index in ("0", "1", "2"):
        result = runner.invoke(app, ["todo", "do", index])
        assert result.exit_code == 0
        assert "Please enter the index of an incomplete item." in result.stdout


def test_do_without_index(config_root: Path) -> None:
    """Prompt for an index."""
    result = runner.invoke(app, ["todo", "do"])

    assert result.exit_code == 0
    assert "Please enter the index of the item to mark as done" in result.stdout


def test_corrupt_list_reports_error(config_root: Path) -> None:
    """A corrupt data file exits non-zero."""
    config_root.mkdir(parents=True)
    _todo_file(config_root).write_text('{"not": "a list"}')

    result = runner.invoke(app, ["todo", "list"])

    assert result.exit_code == 1
    assert "could not be parsed" in result.stdout
