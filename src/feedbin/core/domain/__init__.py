"""Domain models and query records.

Pure data structures (Pydantic v2): no HTTP, no CLI.
"""

from feedbin.core.domain.models import (
    Authentication,
    Enclosure,
    Entry,
    Feed,
    FeedChoice,
    Icon,
    OriginalEntry,
    SavedSearch,
    Subscription,
    Tagging,
)
from feedbin.core.domain.options import EntryQuery, SavedSearchQuery, SubscriptionQuery

__all__ = [
    "Authentication",
    "Enclosure",
    "Entry",
    "EntryQuery",
    "Feed",
    "FeedChoice",
    "Icon",
    "OriginalEntry",
    "SavedSearch",
    "SavedSearchQuery",
    "Subscription",
    "SubscriptionQuery",
    "Tagging",
]
