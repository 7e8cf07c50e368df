"""Resources: feeds, icons and pages."""

from __future__ import annotations

from feedbin.core.cancellation import CancellationToken
from feedbin.core.domain.models import Entry, Feed, Icon
from feedbin.core.services.client import FeedbinClient


class FeedsResource:
    def __init__(self, client: FeedbinClient) -> None:
        self._client = client

    def get(self, feed_id: int, *, cancel: CancellationToken | None = None) -> Feed:
        return self._client.get(f"feeds/{feed_id}.json", target=Feed, cancel=cancel).payload


class IconsResource:
    def __init__(self, client: FeedbinClient) -> None:
        self._client = client

    def list(self, *, cancel: CancellationToken | None = None) -> list[Icon]:
        return self._client.get("icons.json", target=list[Icon], default=[], cancel=cancel).payload


class PagesResource:
    def __init__(self, client: FeedbinClient) -> None:
        self._client = client

    def create(self, url: str, title: str | None = None, *, cancel: CancellationToken | None = None) -> Entry:
        """Save a web page; the service returns it as an entry."""

        body = {"url": url}
        if title:
            body["title"] = title
        return self._client.post("pages.json", json=body, target=Entry, cancel=cancel).payload
