"""Tests for the 'print' command."""

from unittest.mock import patch

from conftest import FEED_CSV, make_service
from typer.testing import CliRunner

from taskfeed_cli.main import app

runner = CliRunner()

FEED = ["--feed", "https://example.com/sheet.csv"]


def _invoke(args, service=None):
    service = service or make_service(FEED_CSV)
    with patch("taskfeed_cli.commands.print_command.get_task_service", return_value=service):
        return runner.invoke(app, ["print", *args])


def test_prints_all_tasks():
    result = _invoke(FEED)

    assert result.exit_code == 0, result.output
    assert "MASTER TASK SIGN-UP SHEET" in result.output
    assert "Design Bracket" in result.output
    assert "3 Spots Available" in result.output


def test_selected_tasks_only():
    result = _invoke([*FEED, "-t", "2"])

    assert result.exit_code == 0, result.output
    assert "Cut Bracket" in result.output
    assert "Mount Sensor" not in result.output


def test_unknown_task_ids_warn():
    result = _invoke([*FEED, "--task", "99"])

    assert result.exit_code == 0, result.output
    assert "Unknown task IDs skipped: 99" in result.output
    assert "No tasks found." in result.output


def test_save_text(tmp_path):
    target = tmp_path / "sheet.txt"
    result = _invoke([*FEED, "--save", str(target)])

    assert result.exit_code == 0, result.output
    assert "Sign-up sheet for 3 tasks saved" in result.output
    text = target.read_text(encoding="utf-8")
    assert "MASTER TASK SIGN-UP SHEET" in text
    assert "1. " + "_" * 40 in text
    assert "Due: Jan 14" in text


def test_save_html(tmp_path):
    target = tmp_path / "sheet.html"
    result = _invoke([*FEED, "--save", str(target)])

    assert result.exit_code == 0, result.output
    html = target.read_text(encoding="utf-8")
    assert "<html" in html.lower()
    assert "MASTER TASK SIGN-UP SHEET" in html


def test_rejects_unknown_suffix(tmp_path):
    result = _invoke([*FEED, "--save", str(tmp_path / "sheet.pdf")])

    assert result.exit_code == 2
    assert not (tmp_path / "sheet.pdf").exists()
