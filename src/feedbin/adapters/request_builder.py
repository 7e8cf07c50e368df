"""Request builder: path resolution, query encoding, JSON body and auth headers.

Notes:
- List-valued query parameters are comma-joined (read filters such as
  `ids=1,2,3`). Mutation calls send ID lists in the JSON body instead; the
  two encodings are chosen per call site, never converted into each other.
- The body is serialized as given: a dict becomes a JSON object, a bare list
  becomes a JSON array. No envelope is added.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Sequence, Union
from urllib.parse import urlsplit

import httpx
from pydantic_core import to_jsonable_python

from feedbin.core.config import Credentials, Endpoint
from feedbin.core.errors import ConfigurationError

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class _Unset:
    """Marker for "no request body"; `None` is sent as JSON `null`."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

QueryValue = Union[str, int, float, bool, datetime, Sequence[Union[str, int]], None]
QueryParams = Union[Mapping[str, QueryValue], Iterable[tuple[str, QueryValue]]]


@dataclass(frozen=True)
class RequestSpec:
    """One logical call: built fresh for every request."""

    method: str
    path: str
    params: list[tuple[str, str]] = field(default_factory=list)
    body: Any = UNSET

    @property
    def has_body(self) -> bool:
        return self.body is not UNSET


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with microseconds in UTC, the precision the service expects."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _encode_query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def encode_query(params: QueryParams | None) -> list[tuple[str, str]]:
    """Normalize params into an ordered multi-map, dropping `None` values."""

    if params is None:
        return []
    items = params.items() if isinstance(params, Mapping) else params
    encoded: list[tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        encoded.append((str(key), _encode_query_value(value)))
    return encoded


def serialize_body(body: Any) -> bytes:
    """JSON-encode `body` (dicts, lists, pydantic models, datetimes) as UTF-8."""

    payload = to_jsonable_python(body, exclude_none=True)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def basic_auth_header(credentials: Credentials) -> str:
    identifier, secret = credentials.basic_auth()
    token = base64.b64encode(f"{identifier}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class RequestBuilder:
    """Turns a `RequestSpec` into an addressed, authenticated `httpx.Request`."""

    def __init__(self, endpoint: Endpoint, credentials: Credentials, *, user_agent: str | None = None) -> None:
        self._endpoint = endpoint
        self._credentials = credentials
        self._user_agent = user_agent

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    def spec(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        body: Any = UNSET,
    ) -> RequestSpec:
        return RequestSpec(method=method.upper(), path=path, params=encode_query(params), body=body)

    def build(self, spec: RequestSpec) -> httpx.Request:
        identifier, secret = self._credentials.basic_auth()
        if not identifier or not secret:
            raise ConfigurationError("credentials must not be empty")

        url = self._endpoint.resolve(spec.path)
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise ConfigurationError(f"resolved URL is not absolute: {url!r}")

        headers = {
            "Accept": "application/json",
            "Authorization": basic_auth_header(self._credentials),
        }
        if self._user_agent:
            headers["User-Agent"] = self._user_agent

        content: bytes | None = None
        if spec.has_body:
            content = serialize_body(spec.body)
            headers["Content-Type"] = JSON_CONTENT_TYPE

        # Absolute pagination links already carry their own query string.
        params = spec.params or None
        return httpx.Request(spec.method, url, params=params, content=content, headers=headers)
