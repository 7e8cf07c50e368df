"""Bulk membership mutations and the dual-verb routes.

The service accepts a removal either as `DELETE resource.json` with a JSON
body or as `POST resource/delete.json` with the same body, and an update
either as `PATCH resource/{id}.json` or `POST resource/{id}/update.json`.
Some proxies drop DELETE bodies, so callers pick the alternate route
explicitly with `alternate=True`.

Known gap: when a proxy strips the DELETE body the service answers 200
with nothing removed. That looks exactly like success and is not detected
here; callers behind such proxies must use the alternate route.
"""

from __future__ import annotations

from typing import Any, Iterable

from feedbin.core.cancellation import CancellationToken
from feedbin.core.errors import ConfigurationError
from feedbin.core.services.client import FeedbinClient

MAX_BULK_IDS = 1000


def _strip_json(resource: str) -> str:
    resource = resource.strip("/")
    return resource[: -len(".json")] if resource.endswith(".json") else resource


def removal_route(resource: str, *, alternate: bool = False) -> tuple[str, str]:
    """`("DELETE", "x.json")` or its alternate `("POST", "x/delete.json")`."""

    base = _strip_json(resource)
    if alternate:
        return "POST", f"{base}/delete.json"
    return "DELETE", f"{base}.json"


def update_route(resource: str, *, alternate: bool = False) -> tuple[str, str]:
    """`("PATCH", "x/1.json")` or its alternate `("POST", "x/1/update.json")`."""

    base = _strip_json(resource)
    if alternate:
        return "POST", f"{base}/update.json"
    return "PATCH", f"{base}.json"


def validate_ids(ids: Iterable[int]) -> list[int]:
    """Materialize an ID set, enforcing integer IDs and the 1000-ID ceiling."""

    values = list(ids)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"entry ids must be integers, got {value!r}")
    if len(values) > MAX_BULK_IDS:
        raise ConfigurationError(
            f"at most {MAX_BULK_IDS} ids per request, got {len(values)}; split the call into batches"
        )
    return values


def _id_body(field: str | None, ids: list[int]) -> Any:
    return ids if field is None else {field: ids}


class BulkMutationHelper:
    """Adds or removes a set of IDs from a collection (unread, starred, ...).

    `field` names the wrapper key of the body (`{"unread_entries": [...]}`);
    `None` sends the bare JSON array. An empty ID set is a no-op that makes
    no request and returns `[]`.
    """

    def __init__(self, client: FeedbinClient) -> None:
        self._client = client

    def add(
        self,
        resource: str,
        ids: Iterable[int],
        *,
        field: str | None,
        cancel: CancellationToken | None = None,
    ) -> list[int]:
        values = validate_ids(ids)
        if not values:
            return []
        response = self._client.post(
            f"{_strip_json(resource)}.json",
            json=_id_body(field, values),
            target=list[int],
            default=[],
            cancel=cancel,
        )
        return response.payload

    def remove(
        self,
        resource: str,
        ids: Iterable[int],
        *,
        field: str | None,
        alternate: bool = False,
        cancel: CancellationToken | None = None,
    ) -> list[int]:
        values = validate_ids(ids)
        if not values:
            return []
        response = self.remove_with_body(
            resource,
            _id_body(field, values),
            alternate=alternate,
            target=list[int],
            default=[],
            cancel=cancel,
        )
        return response.payload

    def remove_with_body(
        self,
        resource: str,
        body: Any,
        *,
        alternate: bool = False,
        target: Any = None,
        default: Any = None,
        cancel: CancellationToken | None = None,
    ):
        """Send `body` on the DELETE route, or on the POST `/delete` route."""

        method, path = removal_route(resource, alternate=alternate)
        return self._client.request(method, path, json=body, target=target, default=default, cancel=cancel)

    def update(
        self,
        resource: str,
        body: Any,
        *,
        alternate: bool = False,
        target: Any = None,
        cancel: CancellationToken | None = None,
    ):
        method, path = update_route(resource, alternate=alternate)
        return self._client.request(method, path, json=body, target=target, cancel=cancel)
