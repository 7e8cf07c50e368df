"""Subscription creation from a bare URL.

States: Requested -> Created | AlreadyExists | AmbiguousChoices | Failed.

- Created (2xx) and AlreadyExists (302) return a `SubscriptionResult`.
- AmbiguousChoices (300) raises `MultipleChoicesError` with the decoded
  `FeedChoice` candidates; re-issue with one of their `feed_url`s.
- Failed raises the classified `APIError` / `TransportError`.

Nothing is retried automatically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from feedbin.adapters.decoder import decode_body
from feedbin.core.cancellation import CancellationToken
from feedbin.core.domain.models import FeedChoice, Subscription
from feedbin.core.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    ErrorKind,
    MultipleChoicesError,
)
from feedbin.core.services.client import FeedbinClient

logger = logging.getLogger(__name__)


class SubscriptionOutcome(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class SubscriptionResult:
    outcome: SubscriptionOutcome
    subscription: Subscription

    @property
    def created(self) -> bool:
        return self.outcome is SubscriptionOutcome.CREATED


def _as_multiple_choices(error: APIError) -> MultipleChoicesError:
    try:
        choices = decode_body(error.raw_body, list[FeedChoice], status_code=error.status_code, default=[])
    except DecodeError:
        logger.warning("Could not decode the feed choices of HTTP %s", error.status_code)
        choices = []
    return MultipleChoicesError(
        choices=choices,
        status_code=error.status_code,
        kind=error.kind,
        message=error.message,
        raw_body=error.raw_body,
    )


def create_subscription(
    client: FeedbinClient,
    feed_url: str,
    *,
    cancel: CancellationToken | None = None,
) -> SubscriptionResult:
    if not feed_url or not feed_url.strip():
        raise ConfigurationError("feed_url must not be empty")

    try:
        response = client.post(
            "subscriptions.json",
            json={"feed_url": feed_url.strip()},
            target=Subscription,
            cancel=cancel,
        )
    except APIError as exc:
        if exc.kind is ErrorKind.MULTIPLE_CHOICES:
            error = _as_multiple_choices(exc)
            logger.info("Feed discovery for %s returned %d choices", feed_url, len(error.choices))
            raise error from exc
        raise

    if response.payload is None:
        raise DecodeError(f"empty subscription body (HTTP {response.status_code})")

    outcome = SubscriptionOutcome.ALREADY_EXISTS if response.status_code == 302 else SubscriptionOutcome.CREATED
    logger.info("Subscription for %s: %s", feed_url, outcome.value)
    return SubscriptionResult(outcome=outcome, subscription=response.payload)
