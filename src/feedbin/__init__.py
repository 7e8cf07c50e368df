"""Python client for the Feedbin v2 REST API."""

__version__ = "0.1.0"

import logging

from feedbin.api import Feedbin
from feedbin.core.cancellation import CancellationToken
from feedbin.core.config import ClientSettings, Credentials, Endpoint
from feedbin.core.domain import (
    Entry,
    EntryQuery,
    Feed,
    FeedChoice,
    Icon,
    SavedSearch,
    SavedSearchQuery,
    Subscription,
    SubscriptionQuery,
    Tagging,
)
from feedbin.core.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    ErrorKind,
    FeedbinError,
    MultipleChoicesError,
    RequestCancelledError,
    TransportError,
)
from feedbin.core.pagination import PaginationCursor
from feedbin.core.services import (
    ApiResponse,
    FeedbinClient,
    SubscriptionOutcome,
    SubscriptionResult,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "ApiResponse",
    "CancellationToken",
    "ClientSettings",
    "ConfigurationError",
    "Credentials",
    "DecodeError",
    "Endpoint",
    "Entry",
    "EntryQuery",
    "ErrorKind",
    "Feed",
    "FeedChoice",
    "Feedbin",
    "FeedbinClient",
    "FeedbinError",
    "Icon",
    "MultipleChoicesError",
    "PaginationCursor",
    "RequestCancelledError",
    "SavedSearch",
    "SavedSearchQuery",
    "Subscription",
    "SubscriptionOutcome",
    "SubscriptionQuery",
    "SubscriptionResult",
    "Tagging",
    "TransportError",
    "__version__",
]
