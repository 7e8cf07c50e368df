"""Configuration: credentials, endpoint resolution and the user .env file."""

from __future__ import annotations

import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from feedbin.core.config import ClientSettings, Credentials, Endpoint, load_settings, write_user_env_vars
from feedbin.core.errors import ConfigurationError
from feedbin.core.services.client import FeedbinClient

_segment = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789_-", min_size=1, max_size=12)


@pytest.mark.parametrize(
    "identifier, secret",
    [("", "secret"), ("   ", "secret"), ("me@example.com", "")],
)
def test_credentials_reject_empty_values(identifier: str, secret: str) -> None:
    with pytest.raises(ConfigurationError):
        Credentials.create(identifier, secret)


def test_credentials_do_not_leak_secret_in_repr() -> None:
    creds = Credentials.create("me@example.com", "hunter2")
    assert "hunter2" not in repr(creds)
    assert creds.basic_auth() == ("me@example.com", "hunter2")


@pytest.mark.parametrize(
    "base_url, expected",
    [
        ("https://api.feedbin.com/v2/", "https://api.feedbin.com/v2/"),
        ("https://api.feedbin.com/v2", "https://api.feedbin.com/v2/"),
        ("https://api.feedbin.com/v2//", "https://api.feedbin.com/v2/"),
        ("http://localhost:3000", "http://localhost:3000/"),
    ],
)
def test_endpoint_normalizes_single_trailing_separator(base_url: str, expected: str) -> None:
    assert Endpoint.parse(base_url).base_url == expected


@pytest.mark.parametrize("base_url", ["api.feedbin.com/v2/", "ftp://host/v2/", "/v2/", "", "https://host/v2/?x=1"])
def test_endpoint_rejects_non_absolute_urls(base_url: str) -> None:
    with pytest.raises(ConfigurationError):
        Endpoint.parse(base_url)


def test_resolve_entries_path() -> None:
    endpoint = Endpoint.parse("https://api.feedbin.com/v2/")
    assert endpoint.resolve("entries.json") == "https://api.feedbin.com/v2/entries.json"
    assert endpoint.resolve("/entries.json") == "https://api.feedbin.com/v2/entries.json"


def test_resolve_keeps_absolute_links() -> None:
    endpoint = Endpoint.parse("https://api.feedbin.com/v2/")
    link = "https://api.feedbin.com/v2/entries.json?page=2"
    assert endpoint.resolve(link) == link


@given(
    base=st.lists(_segment, min_size=0, max_size=3),
    trailing=st.booleans(),
    path=st.lists(_segment, min_size=1, max_size=4),
)
def test_resolve_round_trip_has_no_double_or_missing_separator(
    base: list[str], trailing: bool, path: list[str]
) -> None:
    base_url = "https://api.example.test/" + "/".join(base) + ("/" if trailing else "")
    endpoint = Endpoint.parse(base_url)
    relative = "/".join(path) + ".json"

    resolved = endpoint.resolve(relative)

    assert "//" not in resolved.split("://", 1)[1]
    assert endpoint.relative(resolved) == relative


def test_client_construction_fails_without_credentials() -> None:
    settings = ClientSettings(_env_file=None, email="", password=None)
    with pytest.raises(ConfigurationError):
        FeedbinClient(settings)


def test_client_construction_fails_on_relative_base_url() -> None:
    settings = ClientSettings(_env_file=None, email="a@b.c", password="x", base_url="api.feedbin.com/v2")
    with pytest.raises(ConfigurationError):
        FeedbinClient(settings)


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEEDBIN_EMAIL", "env@example.com")
    monkeypatch.setenv("FEEDBIN_PASSWORD", "from-env")
    monkeypatch.setenv("FEEDBIN_TIMEOUT_SECONDS", "7.5")

    settings = ClientSettings(_env_file=None)

    assert settings.email == "env@example.com"
    assert settings.credentials().basic_auth() == ("env@example.com", "from-env")
    assert settings.timeout_seconds == 7.5


def test_write_user_env_vars_merges_existing_values(tmp_path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"FEEDBIN_EMAIL": "old@example.com", "FEEDBIN_BASE_URL": "https://x/v2/"}, env_path)
    write_user_env_vars({"FEEDBIN_EMAIL": "new@example.com"}, env_path)

    text = env_path.read_text(encoding="utf-8")

    assert "FEEDBIN_EMAIL=new@example.com" in text
    assert "FEEDBIN_BASE_URL=https://x/v2/" in text
    assert text.startswith("# feedbin-client credentials")
    assert text.count("FEEDBIN_EMAIL=") == 1


def test_write_user_env_vars_keeps_unrelated_lines_in_place(tmp_path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("# mine\nOTHER_TOOL=1\nFEEDBIN_EMAIL=old@example.com\n", encoding="utf-8")

    write_user_env_vars({"FEEDBIN_EMAIL": "new@example.com", "FEEDBIN_PASSWORD": "s3cret"}, env_path)

    assert env_path.read_text(encoding="utf-8").splitlines() == [
        "# mine",
        "OTHER_TOOL=1",
        "FEEDBIN_EMAIL=new@example.com",
        "FEEDBIN_PASSWORD=s3cret",
    ]


def test_written_password_with_special_characters_reads_back(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FEEDBIN_EMAIL", "FEEDBIN_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    env_path = tmp_path / ".env"
    password = 'pa ss#wo"rd\\x'

    write_user_env_vars({"FEEDBIN_EMAIL": "reader@example.com", "FEEDBIN_PASSWORD": password}, env_path)
    settings = ClientSettings(_env_file=env_path)

    assert settings.credentials().basic_auth() == ("reader@example.com", password)


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
def test_user_env_file_is_owner_only(tmp_path) -> None:
    env_path = write_user_env_vars({"FEEDBIN_PASSWORD": "s3cret"}, tmp_path / ".env")

    assert env_path.stat().st_mode & 0o777 == 0o600


def test_load_settings_reports_invalid_values_as_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEEDBIN_TIMEOUT_SECONDS", "0")

    with pytest.raises(ConfigurationError, match="FEEDBIN_TIMEOUT_SECONDS"):
        load_settings(_env_file=None)
