"""Error taxonomy and the status-code classifier.

Invariants:
    - `classify_error` maps a status code to an `ErrorKind` through a fixed
      table; the body only contributes the human message, never the kind.
    - `APIError.retryable` is True iff kind is RateLimited/ServerFault or
      status >= 500.
    - `raw_body` is always kept so callers can re-parse special shapes
      (the HTTP 300 candidate list).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any, Mapping

import httpx


class FeedbinError(Exception):
    """Base class for every error raised by this library."""


class ConfigurationError(FeedbinError):
    """Client misconstruction: bad credentials, base URL or argument sizes."""


class TransportError(FeedbinError):
    """Connectivity failure, timeout or cancellation before a response arrived."""

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class RequestCancelledError(TransportError):
    """The caller's cancellation token fired or its deadline passed."""


class DecodeError(FeedbinError):
    """A 2xx body could not be decoded into the requested shape."""

    def __init__(self, message: str, *, raw_body: bytes = b"") -> None:
        super().__init__(message)
        self.raw_body = raw_body


class ErrorKind(str, Enum):
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    MULTIPLE_CHOICES = "multiple_choices"
    RATE_LIMITED = "rate_limited"
    SERVER_FAULT = "server_fault"
    UNKNOWN = "unknown"


_STATUS_KINDS: dict[int, ErrorKind] = {
    300: ErrorKind.MULTIPLE_CHOICES,
    400: ErrorKind.VALIDATION_FAILED,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    415: ErrorKind.UNSUPPORTED_MEDIA_TYPE,
    429: ErrorKind.RATE_LIMITED,
}

_RETRYABLE_KINDS = frozenset({ErrorKind.RATE_LIMITED, ErrorKind.SERVER_FAULT})


class APIError(FeedbinError):
    """A non-2xx response classified by status code."""

    def __init__(
        self,
        *,
        status_code: int,
        kind: ErrorKind,
        message: str,
        raw_body: bytes = b"",
        retry_after: float | None = None,
        field_errors: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(f"feedbin api error {status_code} ({kind.value}): {message}")
        self.status_code = status_code
        self.kind = kind
        self.message = message
        self.raw_body = raw_body
        self.retry_after = retry_after
        self.field_errors = field_errors or {}

    @property
    def retryable(self) -> bool:
        return self.kind in _RETRYABLE_KINDS or self.status_code >= 500


class MultipleChoicesError(APIError):
    """HTTP 300 on subscription creation: several feeds were discovered.

    `choices` holds the decoded candidates (`FeedChoice` models) in the order
    the service returned them; re-issue the call with one of their URLs.
    """

    def __init__(self, *, choices: list[Any], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.choices = choices


def kind_for_status(status_code: int) -> ErrorKind:
    kind = _STATUS_KINDS.get(status_code)
    if kind is not None:
        return kind
    if 500 <= status_code <= 599:
        return ErrorKind.SERVER_FAULT
    return ErrorKind.UNKNOWN


def is_success_status(status_code: int) -> bool:
    """2xx, plus 302 which the service uses for "already exists"."""

    return 200 <= status_code < 300 or status_code == 302


def parse_retry_after(value: str | None, *, now: datetime | None = None) -> float | None:
    """Parse `Retry-After` as delta-seconds or an HTTP-date; None when absent/invalid."""

    if not value:
        return None
    value = value.strip()
    try:
        return max(0.0, float(int(value)))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return max(0.0, (when - now).total_seconds())


def _extract_message(body: bytes) -> tuple[str | None, dict[str, list[str]]]:
    if not body:
        return None, {}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None, {}
    if not isinstance(data, dict):
        return None, {}

    for key in ("message", "error"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip(), {}

    errors = data.get("errors")
    if isinstance(errors, dict):
        field_errors: dict[str, list[str]] = {}
        parts: list[str] = []
        for field, messages in errors.items():
            if isinstance(messages, str):
                messages = [messages]
            if not isinstance(messages, list):
                continue
            texts = [str(m) for m in messages]
            field_errors[str(field)] = texts
            parts.extend(f"{field} {m}" for m in texts)
        if parts:
            return "; ".join(parts), field_errors
    if isinstance(errors, list):
        texts = [str(e) for e in errors if e]
        if texts:
            return "; ".join(texts), {}
    return None, {}


def classify_error(
    status_code: int,
    body: bytes = b"",
    *,
    reason: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> APIError:
    """Build the `APIError` for a non-success response.

    The kind depends on `status_code` alone. `message` comes from a
    structured body (`message`, `error` or joined `errors`) and otherwise
    from the reason phrase.
    """

    kind = kind_for_status(status_code)
    message, field_errors = _extract_message(body)
    if message is None:
        message = reason or httpx.codes.get_reason_phrase(status_code) or f"HTTP {status_code}"

    retry_after = None
    if kind is ErrorKind.RATE_LIMITED and headers is not None:
        retry_after = parse_retry_after(headers.get("Retry-After"))

    return APIError(
        status_code=status_code,
        kind=kind,
        message=message,
        raw_body=body,
        retry_after=retry_after,
        field_errors=field_errors,
    )
