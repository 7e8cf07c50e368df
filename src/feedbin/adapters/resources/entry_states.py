"""Resources: per-entry state sets (unread, starred, recently read, updated).

Each set is a list of entry IDs. Mutations send the IDs wrapped in the
set's own key, e.g. `{"unread_entries": [1, 2]}`, at most 1000 per call.
"""

from __future__ import annotations

from typing import Iterable

from feedbin.core.cancellation import CancellationToken
from feedbin.core.services.bulk import BulkMutationHelper
from feedbin.core.services.client import FeedbinClient


class _EntryIdSet:
    resource: str

    def __init__(self, client: FeedbinClient) -> None:
        self._client = client
        self._bulk = BulkMutationHelper(client)

    def list(self, *, cancel: CancellationToken | None = None) -> list[int]:
        return self._client.get(f"{self.resource}.json", target=list[int], default=[], cancel=cancel).payload


class _AddableIdSet(_EntryIdSet):
    def add(self, ids: Iterable[int], *, cancel: CancellationToken | None = None) -> list[int]:
        return self._bulk.add(self.resource, ids, field=self.resource, cancel=cancel)


class _RemovableIdSet(_EntryIdSet):
    def remove(
        self,
        ids: Iterable[int],
        *,
        alternate: bool = False,
        cancel: CancellationToken | None = None,
    ) -> list[int]:
        """DELETE with a body, or POST `.../delete.json` when `alternate` is set."""

        return self._bulk.remove(self.resource, ids, field=self.resource, alternate=alternate, cancel=cancel)


class UnreadEntriesResource(_AddableIdSet, _RemovableIdSet):
    """`add` marks entries unread, `remove` marks them read."""

    resource = "unread_entries"


class StarredEntriesResource(_AddableIdSet, _RemovableIdSet):
    resource = "starred_entries"


class RecentlyReadEntriesResource(_AddableIdSet):
    resource = "recently_read_entries"


class UpdatedEntriesResource(_RemovableIdSet):
    """`remove` acknowledges updates so they stop being reported."""

    resource = "updated_entries"
