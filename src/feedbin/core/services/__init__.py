"""Services: the request pipeline and the protocol helpers built on it."""

from feedbin.core.services.bulk import MAX_BULK_IDS, BulkMutationHelper, removal_route, update_route
from feedbin.core.services.client import ApiResponse, FeedbinClient
from feedbin.core.services.subscriptions import (
    SubscriptionOutcome,
    SubscriptionResult,
    create_subscription,
)

__all__ = [
    "MAX_BULK_IDS",
    "ApiResponse",
    "BulkMutationHelper",
    "FeedbinClient",
    "SubscriptionOutcome",
    "SubscriptionResult",
    "create_subscription",
    "removal_route",
    "update_route",
]
