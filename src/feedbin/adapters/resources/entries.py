"""Resource: entries (paged) and single-feed entries."""

from __future__ import annotations

from typing import Iterator

from feedbin.core.cancellation import CancellationToken
from feedbin.core.domain.models import Entry
from feedbin.core.domain.options import EntryQuery
from feedbin.core.services.client import ApiResponse, FeedbinClient


class EntriesResource:
    def __init__(self, client: FeedbinClient) -> None:
        self._client = client

    def list(
        self,
        query: EntryQuery | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> ApiResponse[list[Entry]]:
        """One page of entries with its pagination cursor."""

        params = query.to_params() if query else None
        return self._client.get("entries.json", params=params, target=list[Entry], default=[], cancel=cancel)

    def iter_all(
        self,
        query: EntryQuery | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> Iterator[Entry]:
        params = query.to_params() if query else None
        for page in self._client.iter_pages("entries.json", params=params, target=list[Entry], cancel=cancel):
            yield from page.payload

    def get(self, entry_id: int, *, cancel: CancellationToken | None = None) -> Entry:
        return self._client.get(f"entries/{entry_id}.json", target=Entry, cancel=cancel).payload

    def for_feed(
        self,
        feed_id: int,
        query: EntryQuery | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> ApiResponse[list[Entry]]:
        params = query.to_params() if query else None
        return self._client.get(
            f"feeds/{feed_id}/entries.json", params=params, target=list[Entry], default=[], cancel=cancel
        )
