"""Resource: saved searches."""

from __future__ import annotations

from typing import Any

from feedbin.core.cancellation import CancellationToken
from feedbin.core.domain.models import Entry, SavedSearch
from feedbin.core.domain.options import SavedSearchQuery
from feedbin.core.errors import ConfigurationError
from feedbin.core.services.bulk import BulkMutationHelper
from feedbin.core.services.client import FeedbinClient


class SavedSearchesResource:
    def __init__(self, client: FeedbinClient) -> None:
        self._client = client
        self._bulk = BulkMutationHelper(client)

    def list(self, *, cancel: CancellationToken | None = None) -> list[SavedSearch]:
        return self._client.get("saved_searches.json", target=list[SavedSearch], default=[], cancel=cancel).payload

    def get(
        self,
        search_id: int,
        query: SavedSearchQuery | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> list[int] | list[Entry]:
        """Matching entry IDs, or full entries with `include_entries=True`."""

        target = list[Entry] if query is not None and query.include_entries else list[int]
        params = query.to_params() if query else None
        return self._client.get(
            f"saved_searches/{search_id}.json", params=params, target=target, default=[], cancel=cancel
        ).payload

    def create(self, name: str, query: str, *, cancel: CancellationToken | None = None) -> SavedSearch:
        return self._client.post(
            "saved_searches.json", json={"name": name, "query": query}, target=SavedSearch, cancel=cancel
        ).payload

    def update(
        self,
        search_id: int,
        *,
        name: str | None = None,
        query: str | None = None,
        alternate: bool = False,
        cancel: CancellationToken | None = None,
    ) -> SavedSearch:
        body: dict[str, Any] = {k: v for k, v in (("name", name), ("query", query)) if v is not None}
        if not body:
            raise ConfigurationError("update needs at least one of name/query")
        return self._bulk.update(
            f"saved_searches/{search_id}", body, alternate=alternate, target=SavedSearch, cancel=cancel
        ).payload

    def delete(self, search_id: int, *, cancel: CancellationToken | None = None) -> None:
        self._client.delete(f"saved_searches/{search_id}.json", cancel=cancel)
