"""Shared pytest fixtures: clients wired to an in-memory `httpx.MockTransport`."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from feedbin.adapters.http_client import build_http_client
from feedbin.core.config import ClientSettings
from feedbin.core.services.client import FeedbinClient

BASE_URL = "https://api.example.test/v2/"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(
        _env_file=None,
        email="reader@example.com",
        password="hunter2",
        base_url=BASE_URL,
        timeout_seconds=5.0,
    )


@pytest.fixture
def make_client(settings: ClientSettings):
    """Factory: `make_client(handler)` -> FeedbinClient over a MockTransport."""

    clients: list[FeedbinClient] = []
    http_clients: list[httpx.Client] = []

    def _make(handler: Handler) -> FeedbinClient:
        http_client = build_http_client(settings, transport=httpx.MockTransport(handler))
        client = FeedbinClient(settings, http_client=http_client)
        clients.append(client)
        http_clients.append(http_client)
        return client

    yield _make
    for client in clients:
        client.close()
    for http_client in http_clients:
        http_client.close()


class TrackingStream(httpx.SyncByteStream):
    """Response body that records whether it was closed."""

    def __init__(self, body: bytes) -> None:
        self._body = body
        self.closed = False

    def __iter__(self):
        yield self._body

    def close(self) -> None:
        self.closed = True
