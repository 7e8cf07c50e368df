"""Transport contract.

Design rules:
- `send` is blocking. Without a token it returns a *streaming* response
  whose body has not been read yet; with a token the body may already be
  buffered. Either way the caller reads it exactly once and closes it.
- Connectivity failures surface as `TransportError`, never as `APIError`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx

from feedbin.core.cancellation import CancellationToken


@runtime_checkable
class Transport(Protocol):
    """Minimal contract for the component that puts a request on the wire."""

    def send(
        self,
        request: httpx.Request,
        *,
        cancel: CancellationToken | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Send `request` and return the response, unread unless `cancel` is given."""

        ...

    def close(self) -> None:
        ...
