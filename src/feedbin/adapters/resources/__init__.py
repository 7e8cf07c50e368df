"""Per-resource surfaces.

Each class wraps a `FeedbinClient` and only knows its paths, body shapes and
target models; transport, errors and pagination live in the core.
"""

from feedbin.adapters.resources.entries import EntriesResource
from feedbin.adapters.resources.entry_states import (
    RecentlyReadEntriesResource,
    StarredEntriesResource,
    UnreadEntriesResource,
    UpdatedEntriesResource,
)
from feedbin.adapters.resources.misc import FeedsResource, IconsResource, PagesResource
from feedbin.adapters.resources.saved_searches import SavedSearchesResource
from feedbin.adapters.resources.subscriptions import SubscriptionsResource
from feedbin.adapters.resources.tags import TaggingsResource, TagsResource

__all__ = [
    "EntriesResource",
    "FeedsResource",
    "IconsResource",
    "PagesResource",
    "RecentlyReadEntriesResource",
    "SavedSearchesResource",
    "StarredEntriesResource",
    "SubscriptionsResource",
    "TaggingsResource",
    "TagsResource",
    "UnreadEntriesResource",
    "UpdatedEntriesResource",
]
