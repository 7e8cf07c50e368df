"""Response decoder: JSON body -> caller-supplied target type.

A 204, or an empty/whitespace body on any success status, is a successful
no-op: the caller's `default` is returned untouched.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from feedbin.core.errors import DecodeError

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def is_empty_body(status_code: int, body: bytes) -> bool:
    return status_code == 204 or not body.strip()


def decode_body(body: bytes, target: Any, *, status_code: int = 200, default: Any = None) -> Any:
    """Validate `body` as `target` (a pydantic model, `list[int]`, `dict`, ...).

    `target=None` skips decoding and returns `default`.
    """

    if target is None or is_empty_body(status_code, body):
        return default
    try:
        return _adapter(target).validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            f"response body does not match {getattr(target, '__name__', target)!s}: "
            f"{exc.error_count()} validation error(s)",
            raw_body=body,
        ) from exc
