"""CLI commands (Typer runner, MockTransport-backed client)."""

from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

from feedbin.api import Feedbin
from feedbin.cli import main as cli_main

runner = CliRunner()


@pytest.fixture
def patch_open(monkeypatch: pytest.MonkeyPatch, make_client):
    def _install(handler):
        monkeypatch.setattr(cli_main, "_open", lambda: Feedbin(make_client(handler)))

    return _install


def test_subscriptions_table(patch_open) -> None:
    patch_open(
        lambda request: httpx.Response(
            200, json=[{"id": 1, "feed_id": 2, "title": "Daring", "feed_url": "https://d/feed"}]
        )
    )

    result = runner.invoke(cli_main.app, ["subscriptions"])

    assert result.exit_code == 0
    assert "Daring" in result.output


def test_unread_count(patch_open) -> None:
    patch_open(lambda request: httpx.Response(200, json=[1, 2, 3]))

    result = runner.invoke(cli_main.app, ["unread", "--limit", "2"])

    assert result.exit_code == 0
    assert "3" in result.output
    assert "1, 2" in result.output


def test_api_error_exits_with_one(patch_open) -> None:
    patch_open(lambda request: httpx.Response(401))

    result = runner.invoke(cli_main.app, ["unread"])

    assert result.exit_code == 1
    assert "unauthorized" in result.output


def test_missing_credentials_exit_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEEDBIN_EMAIL", "")
    monkeypatch.setenv("FEEDBIN_PASSWORD", "")

    result = runner.invoke(cli_main.app, ["subscriptions"])

    assert result.exit_code == 2
    assert "ConfigurationError" in result.output


def test_invalid_setting_exits_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEEDBIN_EMAIL", "reader@example.com")
    monkeypatch.setenv("FEEDBIN_PASSWORD", "hunter2")
    monkeypatch.setenv("FEEDBIN_TIMEOUT_SECONDS", "0")

    result = runner.invoke(cli_main.app, ["unread"])

    assert result.exit_code == 2
    assert "FEEDBIN_TIMEOUT_SECONDS" in result.output


def test_doctor_reports_invalid_setting_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEEDBIN_MAX_CONNECTIONS", "0")

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 2
    assert "FEEDBIN_MAX_CONNECTIONS" in result.output
