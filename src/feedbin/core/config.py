"""Client configuration.

- `ClientSettings` centralizes env vars (pydantic-settings) so the client,
  the CLI and the tests read configuration the same way.
- `Credentials` and `Endpoint` are the validated, immutable pieces a
  `FeedbinClient` keeps for its whole lifetime.

Nothing in this module is process-wide state: every client receives its
own settings object.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Mapping
from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedbin import __version__
from feedbin.core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.feedbin.com/v2/"
APP_DIR_NAME = "feedbin-client"

_ENV_HEADER = "# feedbin-client credentials (written by `feedbin doctor setup`)"
_NEEDS_QUOTES = re.compile(r"[\s#\"'\\]")


def get_user_config_dir() -> Path:
    """`%APPDATA%`, `~/Library/Application Support` or `$XDG_CONFIG_HOME` (`~/.config`)."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _env_key(line: str) -> str | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return None
    key = stripped.split("=", 1)[0].strip()
    if key.startswith("export "):
        key = key[len("export ") :].strip()
    return key or None


def _format_env_value(value: str) -> str:
    # Passwords may contain spaces, '#' or quotes.
    if not _NEEDS_QUOTES.search(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def write_user_env_vars(values: Mapping[str, str | None], env_path: Path | None = None) -> Path:
    """Set `values` in the user .env, keeping every other line in place.

    The file holds the account password: it is replaced atomically and, on
    POSIX, readable by its owner only.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    pending = {key: value for key, value in values.items() if value is not None}

    lines = env_path.read_text(encoding="utf-8").splitlines() if env_path.exists() else [_ENV_HEADER]
    output: list[str] = []
    for line in lines:
        key = _env_key(line)
        if key is not None and key in pending:
            output.append(f"{key}={_format_env_value(pending.pop(key))}")
        else:
            output.append(line)
    output.extend(f"{key}={_format_env_value(value)}" for key, value in pending.items())

    tmp_path = env_path.with_name(env_path.name + ".tmp")
    tmp_path.write_text("\n".join(output) + "\n", encoding="utf-8")
    if os.name == "posix":
        tmp_path.chmod(0o600)
    os.replace(tmp_path, env_path)
    return env_path


class ClientSettings(BaseSettings):
    """Configuration for a `FeedbinClient`.

    Every field can be set through a `FEEDBIN_*` environment variable, the
    project `.env` or the user `.env` written by `feedbin doctor setup`.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDBIN_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    email: str | None = Field(
        default=None,
        description="Account identifier used for HTTP Basic authentication.",
    )
    password: SecretStr | None = Field(
        default=None,
        description="Account secret used for HTTP Basic authentication.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Absolute API base URL; resource paths resolve against it.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default=f"feedbin-client/{__version__}",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    max_connections: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum pooled connections.",
    )
    max_keepalive_connections: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Maximum idle keep-alive connections kept in the pool.",
    )

    def credentials(self) -> Credentials:
        secret = self.password.get_secret_value() if self.password is not None else ""
        return Credentials.create(self.email or "", secret)

    def endpoint(self) -> Endpoint:
        return Endpoint.parse(self.base_url)


def load_settings(**overrides: object) -> ClientSettings:
    """`ClientSettings(**overrides)`, with invalid values raised as `ConfigurationError`."""

    try:
        return ClientSettings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"FEEDBIN_{str(err['loc'][0]).upper()}: {err['msg']}" if err["loc"] else err["msg"]
            for err in exc.errors()
        )
        raise ConfigurationError(f"invalid configuration: {problems}") from exc


class Credentials(BaseModel):
    """Account identifier/secret pair. Both must be non-empty."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    secret: SecretStr

    @classmethod
    def create(cls, identifier: str, secret: str) -> Credentials:
        if not identifier or not identifier.strip():
            raise ConfigurationError("credentials: identifier must not be empty")
        if not secret:
            raise ConfigurationError("credentials: secret must not be empty")
        return cls(identifier=identifier, secret=SecretStr(secret))

    def basic_auth(self) -> tuple[str, str]:
        return self.identifier, self.secret.get_secret_value()


class Endpoint(BaseModel):
    """Absolute API base: scheme, host and a base path ending in a single `/`."""

    model_config = ConfigDict(frozen=True)

    scheme: str
    host: str
    base_path: str

    @field_validator("base_path")
    @classmethod
    def _single_trailing_separator(cls, value: str) -> str:
        return "/" + value.strip("/") + "/" if value.strip("/") else "/"

    @classmethod
    def parse(cls, base_url: str) -> Endpoint:
        parts = urlsplit((base_url or "").strip())
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"base URL must be absolute http(s): {base_url!r}")
        if parts.query or parts.fragment:
            raise ConfigurationError(f"base URL must not carry a query or fragment: {base_url!r}")
        return cls(scheme=parts.scheme, host=parts.netloc, base_path=parts.path or "/")

    @property
    def base_url(self) -> str:
        return urlunsplit((self.scheme, self.host, self.base_path, "", ""))

    def resolve(self, resource_path: str) -> str:
        """Join a relative resource path onto the base without doubling or dropping `/`.

        Absolute URLs (e.g. a pagination `next` link) are returned unchanged.
        """

        if urlsplit(resource_path).scheme:
            return resource_path
        return self.base_url + resource_path.lstrip("/")

    def relative(self, url: str) -> str:
        """Inverse of `resolve` for URLs under this base."""

        base = self.base_url
        if not url.startswith(base):
            raise ConfigurationError(f"{url!r} is not under {base!r}")
        return url[len(base):]
