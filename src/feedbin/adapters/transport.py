"""Transport invoker over a pooled `httpx.Client`.

Invariants:
    - Never retries; one call puts one request on the wire.
    - httpx connectivity/timeout failures become `TransportError`.
    - With a `CancellationToken`, the send *and the body read* run on a
      worker thread and the caller stops waiting as soon as the token
      fires, even when the body stalls mid-stream. A response that arrives
      after that is closed by the worker.
    - A timeout that coincides with the token's deadline is reported as
      `RequestCancelledError`, not as a timeout.
    - Without a token the response is returned unread (`stream=True`);
      `read_body` consumes it once and always closes it.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

import httpx

from feedbin.core.cancellation import CancellationToken
from feedbin.core.errors import RequestCancelledError, TransportError

logger = logging.getLogger(__name__)

_CANCEL_POLL_SECONDS = 0.05


def _as_transport_error(exc: httpx.TransportError, request: httpx.Request, stage: str) -> TransportError:
    if isinstance(exc, httpx.TimeoutException):
        message = f"timeout {stage}: {type(exc).__name__}"
    else:
        message = f"connection failed {stage}: {exc}"
    return TransportError(message, method=request.method, url=str(request.url))


def _close_late_response(future: Future) -> None:
    if future.cancelled() or future.exception() is not None:
        return
    response: httpx.Response = future.result()
    response.close()


class HttpxTransport:
    """Sends built requests through a shared `httpx.Client`."""

    def __init__(
        self,
        client: httpx.Client,
        *,
        timeout: float,
        max_workers: int = 4,
        owns_client: bool = True,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._owns_client = owns_client
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None
        self._executor_lock = threading.Lock()

    def _pool(self) -> ThreadPoolExecutor:
        # Callers that never pass a token never start threads.
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="feedbin-send",
                )
            return self._executor

    def _send_now(self, request: httpx.Request, *, buffer: bool = False) -> httpx.Response:
        try:
            response = self._client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise _as_transport_error(exc, request, "while sending") from exc
        if not buffer:
            return response
        try:
            response.read()
        except httpx.TransportError as exc:
            raise _as_transport_error(exc, request, "while reading body") from exc
        finally:
            response.close()
        return response

    def send(
        self,
        request: httpx.Request,
        *,
        cancel: CancellationToken | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        seconds = timeout if timeout is not None else self._timeout
        if cancel is not None:
            cancel.raise_if_cancelled(method=request.method, url=str(request.url))
            remaining = cancel.remaining()
            if remaining is not None:
                seconds = min(seconds, remaining)
        request.extensions["timeout"] = httpx.Timeout(seconds).as_dict()

        if cancel is None:
            return self._send_now(request)

        future = self._pool().submit(self._send_now, request, buffer=True)
        while True:
            try:
                return future.result(timeout=_CANCEL_POLL_SECONDS)
            except FutureTimeoutError:
                if cancel.is_cancelled():
                    future.cancel()
                    future.add_done_callback(_close_late_response)
                    logger.debug("Cancelled %s %s while waiting for response", request.method, request.url)
                    raise RequestCancelledError(
                        "request cancelled", method=request.method, url=str(request.url)
                    ) from None
            except TransportError as exc:
                # The socket timeout was clamped to the deadline.
                if cancel.is_cancelled():
                    raise RequestCancelledError(
                        "request cancelled (deadline reached)", method=request.method, url=str(request.url)
                    ) from exc
                raise

    def close(self) -> None:
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=False, cancel_futures=True)
        if self._owns_client:
            self._client.close()


def read_body(response: httpx.Response, *, cancel: CancellationToken | None = None) -> bytes:
    """Read the whole body once and close the response on every path.

    Responses sent with a token arrive already buffered, so this only
    returns their content.
    """

    request = response.request
    try:
        if cancel is not None:
            cancel.raise_if_cancelled(method=request.method, url=str(request.url))
        return response.read()
    except httpx.TransportError as exc:
        raise _as_transport_error(exc, request, "while reading body") from exc
    finally:
        response.close()
