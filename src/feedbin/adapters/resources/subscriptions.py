"""Resource: subscriptions."""

from __future__ import annotations

from feedbin.core.cancellation import CancellationToken
from feedbin.core.domain.models import Subscription
from feedbin.core.domain.options import SubscriptionQuery
from feedbin.core.services.bulk import BulkMutationHelper
from feedbin.core.services.client import FeedbinClient
from feedbin.core.services.subscriptions import SubscriptionResult, create_subscription


class SubscriptionsResource:
    def __init__(self, client: FeedbinClient) -> None:
        self._client = client
        self._bulk = BulkMutationHelper(client)

    def list(self, query: SubscriptionQuery | None = None, *, cancel: CancellationToken | None = None) -> list[Subscription]:
        params = query.to_params() if query else None
        return self._client.get(
            "subscriptions.json", params=params, target=list[Subscription], default=[], cancel=cancel
        ).payload

    def get(self, subscription_id: int, *, cancel: CancellationToken | None = None) -> Subscription:
        return self._client.get(f"subscriptions/{subscription_id}.json", target=Subscription, cancel=cancel).payload

    def create(self, feed_url: str, *, cancel: CancellationToken | None = None) -> SubscriptionResult:
        """Subscribe to `feed_url`; raises `MultipleChoicesError` when discovery is ambiguous."""

        return create_subscription(self._client, feed_url, cancel=cancel)

    def update(
        self,
        subscription_id: int,
        title: str,
        *,
        alternate: bool = False,
        cancel: CancellationToken | None = None,
    ) -> Subscription:
        """Rename a subscription (PATCH, or POST `.../update.json` when `alternate`)."""

        return self._bulk.update(
            f"subscriptions/{subscription_id}",
            {"title": title},
            alternate=alternate,
            target=Subscription,
            cancel=cancel,
        ).payload

    def delete(self, subscription_id: int, *, cancel: CancellationToken | None = None) -> None:
        self._client.delete(f"subscriptions/{subscription_id}.json", cancel=cancel)
