"""Cooperative cancellation for blocking requests.

A `CancellationToken` is passed down to the transport. It fires either when
another thread calls `cancel()` or when its optional deadline passes; the
transport stops waiting at that point and raises `RequestCancelledError`.
"""

from __future__ import annotations

import threading
import time

from feedbin.core.errors import RequestCancelledError


class CancellationToken:
    """Thread-safe cancellation signal with an optional deadline.

    Examples:
        >>> token = CancellationToken(timeout=5.0)
        >>> client.request("GET", "entries.json", cancel=token)  # doctest: +SKIP
        >>> # from another thread
        >>> token.cancel()  # doctest: +SKIP
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._event = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._event.set()
            return True
        return False

    def remaining(self) -> float | None:
        """Seconds left before the deadline; None when there is no deadline."""

        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def wait(self, seconds: float | None = None) -> bool:
        """Block up to `seconds` (bounded by the deadline); True once cancelled."""

        remaining = self.remaining()
        if remaining is not None:
            seconds = remaining if seconds is None else min(seconds, remaining)
        self._event.wait(seconds)
        return self.is_cancelled()

    def raise_if_cancelled(self, *, method: str | None = None, url: str | None = None) -> None:
        if self.is_cancelled():
            raise RequestCancelledError("request cancelled", method=method, url=url)
