"""`Feedbin`: one client plus every resource surface."""

from __future__ import annotations

from feedbin.adapters.resources import (
    EntriesResource,
    FeedsResource,
    IconsResource,
    PagesResource,
    RecentlyReadEntriesResource,
    SavedSearchesResource,
    StarredEntriesResource,
    SubscriptionsResource,
    TaggingsResource,
    TagsResource,
    UnreadEntriesResource,
    UpdatedEntriesResource,
)
from feedbin.core.services.client import FeedbinClient


class Feedbin:
    """Facade over a `FeedbinClient`.

    >>> with Feedbin(FeedbinClient(settings)) as fb:  # doctest: +SKIP
    ...     ids = fb.unread.list()
    ...     fb.unread.remove(ids[:10], alternate=True)
    """

    def __init__(self, client: FeedbinClient | None = None) -> None:
        self.client = client or FeedbinClient()
        self.subscriptions = SubscriptionsResource(self.client)
        self.entries = EntriesResource(self.client)
        self.unread = UnreadEntriesResource(self.client)
        self.starred = StarredEntriesResource(self.client)
        self.recently_read = RecentlyReadEntriesResource(self.client)
        self.updated = UpdatedEntriesResource(self.client)
        self.tags = TagsResource(self.client)
        self.taggings = TaggingsResource(self.client)
        self.saved_searches = SavedSearchesResource(self.client)
        self.feeds = FeedsResource(self.client)
        self.icons = IconsResource(self.client)
        self.pages = PagesResource(self.client)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> Feedbin:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
