"""Tests for the 'feed' command group."""

from unittest.mock import patch

from conftest import FEED_CSV, make_feed_client
from typer.testing import CliRunner

from taskfeed_cli.main import app
from taskfeed_cli.models import FetchError
from taskfeed_cli.services.config_service import ConfigService

runner = CliRunner()

URL = "https://docs.example.com/sheet/pub?output=csv"


def test_set_persists_url():
    result = runner.invoke(app, ["feed", "set", URL])

    assert result.exit_code == 0, result.output
    assert "Feed URL saved" in result.output
    assert ConfigService().feed_url == URL


def test_set_rejects_invalid_url():
    result = runner.invoke(app, ["feed", "set", "not-a-url"])

    assert result.exit_code == 2
    assert "Invalid feed URL" in result.output
    assert ConfigService().feed_url == ""


def test_show_without_url():
    result = runner.invoke(app, ["feed", "show"])

    assert result.exit_code == 0
    assert "No feed URL set" in result.output


def test_show_with_url(tmp_config):
    tmp_config.set_feed_url(URL)

    result = runner.invoke(app, ["feed", "show"])

    assert result.exit_code == 0
    assert "feed.url" in result.output
    assert "docs.example.com" in result.output


def test_clear(tmp_config):
    tmp_config.set_feed_url(URL)

    result = runner.invoke(app, ["feed", "clear"])

    assert result.exit_code == 0
    assert "Feed URL cleared" in result.output
    assert ConfigService().feed_url == ""


def _check(client, *args):
    with patch("taskfeed_cli.commands.feed_command.get_feed_client", return_value=client):
        return runner.invoke(app, ["feed", "check", *args])


def test_check_reports_task_count():
    client = make_feed_client(FEED_CSV)

    result = _check(client, URL)

    assert result.exit_code == 0, result.output
    assert "Feed OK: 3 tasks, 3 with a deadline" in result.output
    client.fetch_text.assert_awaited_once_with(URL)


def test_check_uses_saved_url(tmp_config):
    tmp_config.set_feed_url(URL)
    client = make_feed_client(FEED_CSV)

    result = _check(client)

    assert result.exit_code == 0, result.output
    client.fetch_text.assert_awaited_once_with(URL)


def test_check_without_url():
    result = _check(make_feed_client(FEED_CSV))

    assert result.exit_code == 2
    assert "No feed URL set" in result.output


def test_check_fetch_failure_exit_code():
    result = _check(make_feed_client(error=FetchError("Feed not found - check the URL.")), URL)

    assert result.exit_code == 4
    assert "Feed not found" in result.output


def test_check_html_document_exit_code():
    result = _check(make_feed_client("<!DOCTYPE html><html></html>"), URL)

    assert result.exit_code == 7
