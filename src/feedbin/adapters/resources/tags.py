"""Resources: tags (rename/delete across feeds) and taggings."""

from __future__ import annotations

from feedbin.core.cancellation import CancellationToken
from feedbin.core.domain.models import Tagging
from feedbin.core.errors import ConfigurationError
from feedbin.core.services.bulk import BulkMutationHelper
from feedbin.core.services.client import FeedbinClient


def _require(value: str, name: str) -> str:
    if not value or not value.strip():
        raise ConfigurationError(f"{name} must not be empty")
    return value


class TagsResource:
    def __init__(self, client: FeedbinClient) -> None:
        self._client = client
        self._bulk = BulkMutationHelper(client)

    def rename(self, old_name: str, new_name: str, *, cancel: CancellationToken | None = None) -> list[Tagging]:
        body = {"old_name": _require(old_name, "old_name"), "new_name": _require(new_name, "new_name")}
        return self._client.post("tags.json", json=body, target=list[Tagging], default=[], cancel=cancel).payload

    def delete(
        self,
        name: str,
        *,
        alternate: bool = False,
        cancel: CancellationToken | None = None,
    ) -> list[Tagging]:
        """Remove the tag from every feed; returns the remaining taggings."""

        return self._bulk.remove_with_body(
            "tags",
            {"name": _require(name, "name")},
            alternate=alternate,
            target=list[Tagging],
            default=[],
            cancel=cancel,
        ).payload


class TaggingsResource:
    def __init__(self, client: FeedbinClient) -> None:
        self._client = client

    def list(self, *, cancel: CancellationToken | None = None) -> list[Tagging]:
        return self._client.get("taggings.json", target=list[Tagging], default=[], cancel=cancel).payload

    def get(self, tagging_id: int, *, cancel: CancellationToken | None = None) -> Tagging:
        return self._client.get(f"taggings/{tagging_id}.json", target=Tagging, cancel=cancel).payload

    def create(self, feed_id: int, name: str, *, cancel: CancellationToken | None = None) -> Tagging:
        body = {"feed_id": feed_id, "name": _require(name, "name")}
        return self._client.post("taggings.json", json=body, target=Tagging, cancel=cancel).payload

    def delete(self, tagging_id: int, *, cancel: CancellationToken | None = None) -> None:
        self._client.delete(f"taggings/{tagging_id}.json", cancel=cancel)
