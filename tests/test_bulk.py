"""Bulk mutation helper and the dual-verb routes."""

from __future__ import annotations

import json

import httpx
import pytest

from feedbin.core.errors import ConfigurationError
from feedbin.core.services.bulk import (
    MAX_BULK_IDS,
    BulkMutationHelper,
    removal_route,
    update_route,
    validate_ids,
)


def _recorder(status: int = 200, body=None):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        payload = body if body is not None else json.loads(request.content or b"{}").get("unread_entries", [])
        return httpx.Response(status, json=payload)

    return seen, handler


@pytest.mark.parametrize(
    "resource, alternate, expected",
    [
        ("unread_entries", False, ("DELETE", "unread_entries.json")),
        ("unread_entries", True, ("POST", "unread_entries/delete.json")),
        ("starred_entries.json", True, ("POST", "starred_entries/delete.json")),
        ("tags", False, ("DELETE", "tags.json")),
    ],
)
def test_removal_route(resource: str, alternate: bool, expected: tuple[str, str]) -> None:
    assert removal_route(resource, alternate=alternate) == expected


@pytest.mark.parametrize(
    "alternate, expected",
    [(False, ("PATCH", "subscriptions/5.json")), (True, ("POST", "subscriptions/5/update.json"))],
)
def test_update_route(alternate: bool, expected: tuple[str, str]) -> None:
    assert update_route("subscriptions/5", alternate=alternate) == expected


def test_alternate_mode_posts_same_body_to_delete_path(make_client) -> None:
    seen, handler = _recorder()
    helper = BulkMutationHelper(make_client(handler))

    helper.remove("unread_entries", [1, 2, 3], field="unread_entries")
    helper.remove("unread_entries", [1, 2, 3], field="unread_entries", alternate=True)

    delete, post = seen
    assert delete.method == "DELETE"
    assert delete.url.path == "/v2/unread_entries.json"
    assert post.method == "POST"
    assert post.url.path == "/v2/unread_entries/delete.json"
    assert json.loads(delete.content) == json.loads(post.content) == {"unread_entries": [1, 2, 3]}


def test_bare_array_body_when_no_field(make_client) -> None:
    seen, handler = _recorder(body=[7])
    helper = BulkMutationHelper(make_client(handler))

    result = helper.remove("starred_entries", [7], field=None)

    assert json.loads(seen[0].content) == [7]
    assert result == [7]


def test_zero_ids_is_a_no_op(make_client) -> None:
    seen, handler = _recorder()
    helper = BulkMutationHelper(make_client(handler))

    assert helper.remove("unread_entries", [], field="unread_entries") == []
    assert helper.add("starred_entries", iter(()), field="starred_entries") == []
    assert seen == []


def test_too_many_ids_fail_before_any_request(make_client) -> None:
    seen, handler = _recorder()
    helper = BulkMutationHelper(make_client(handler))

    with pytest.raises(ConfigurationError):
        helper.remove("unread_entries", range(MAX_BULK_IDS + 1), field="unread_entries")
    with pytest.raises(ConfigurationError):
        helper.add("unread_entries", range(MAX_BULK_IDS + 1), field="unread_entries")

    assert seen == []


def test_exactly_the_ceiling_is_accepted() -> None:
    assert len(validate_ids(range(MAX_BULK_IDS))) == MAX_BULK_IDS


@pytest.mark.parametrize("ids", [[1, "2"], [True], [1.5]])
def test_non_integer_ids_are_rejected(ids) -> None:
    with pytest.raises(ConfigurationError):
        validate_ids(ids)


def test_add_posts_wrapped_ids_and_returns_acknowledged(make_client) -> None:
    seen, handler = _recorder(body=[4, 5])
    helper = BulkMutationHelper(make_client(handler))

    result = helper.add("starred_entries", [4, 5, 6], field="starred_entries")

    assert seen[0].method == "POST"
    assert seen[0].url.path == "/v2/starred_entries.json"
    assert json.loads(seen[0].content) == {"starred_entries": [4, 5, 6]}
    assert result == [4, 5]


def test_empty_response_to_removal_is_success(make_client) -> None:
    helper = BulkMutationHelper(make_client(lambda request: httpx.Response(200)))

    assert helper.remove("unread_entries", [1], field="unread_entries") == []
