"""Request/response core shared by every resource surface.

Flow per call:
    RequestBuilder -> Transport -> [non-success] classify_error -> raise
                                -> [success] extract_pagination + decode_body

The client keeps only immutable state (credentials, endpoint, settings)
and a pooled transport, so one instance can be used from many threads.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Mapping, TypeVar

import httpx

from feedbin.adapters.decoder import decode_body
from feedbin.adapters.http_client import build_http_client
from feedbin.adapters.request_builder import UNSET, QueryParams, RequestBuilder
from feedbin.adapters.transport import HttpxTransport, read_body
from feedbin.core.cancellation import CancellationToken
from feedbin.core.config import ClientSettings, Credentials, Endpoint, load_settings
from feedbin.core.errors import APIError, ErrorKind, classify_error, is_success_status
from feedbin.core.interfaces.transport import Transport
from feedbin.core.pagination import PaginationCursor, extract_pagination

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Decoded payload plus the response metadata callers branch on."""

    payload: T
    cursor: PaginationCursor
    status_code: int
    headers: Mapping[str, str]


class FeedbinClient:
    """Authenticated client for the Feedbin v2 REST API.

    Raises `ConfigurationError` at construction when credentials are empty
    or the base URL is not an absolute http(s) URL.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        credentials: Credentials | None = None,
        http_client: httpx.Client | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self._credentials = credentials or self._settings.credentials()
        self._endpoint = self._settings.endpoint()
        self._builder = RequestBuilder(
            self._endpoint,
            self._credentials,
            user_agent=self._settings.user_agent,
        )
        if transport is None:
            owns_client = http_client is None
            http_client = http_client or build_http_client(self._settings)
            transport = HttpxTransport(
                http_client,
                timeout=self._settings.timeout_seconds,
                max_workers=self._settings.max_connections,
                owns_client=owns_client,
            )
        self._transport = transport

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> FeedbinClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        json: Any = UNSET,
        target: Any = None,
        default: Any = None,
        cancel: CancellationToken | None = None,
        timeout: float | None = None,
    ) -> ApiResponse[Any]:
        """Send one request and decode the successful body into `target`.

        `path` is relative to the base URL (`"entries.json"`) or an absolute
        pagination link. Non-success responses raise `APIError`; 302 is a
        success whose body is the already-existing resource.
        """

        spec = self._builder.spec(method, path, params=params, body=json)
        request = self._builder.build(spec)

        started = time.monotonic()
        logger.debug("%s %s", request.method, request.url)
        response = self._transport.send(request, cancel=cancel, timeout=timeout)
        body = read_body(response, cancel=cancel)
        logger.debug(
            "%s %s -> %s (%.0f ms)",
            request.method,
            request.url,
            response.status_code,
            (time.monotonic() - started) * 1000,
        )

        if not is_success_status(response.status_code):
            error = classify_error(
                response.status_code,
                body,
                reason=response.reason_phrase,
                headers=response.headers,
            )
            if error.retryable:
                logger.warning("Retryable API error on %s %s: %s", request.method, request.url, error)
            raise error

        payload = decode_body(body, target, status_code=response.status_code, default=default)
        return ApiResponse(
            payload=payload,
            cursor=extract_pagination(response.headers),
            status_code=response.status_code,
            headers=response.headers,
        )

    def get(self, path: str, **kwargs: Any) -> ApiResponse[Any]:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> ApiResponse[Any]:
        return self.request("POST", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> ApiResponse[Any]:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> ApiResponse[Any]:
        return self.request("DELETE", path, **kwargs)

    def iter_pages(
        self,
        path: str,
        *,
        params: QueryParams | None = None,
        target: Any = None,
        cancel: CancellationToken | None = None,
    ) -> Iterator[ApiResponse[Any]]:
        """Yield every page, following `cursor.next` until it is absent."""

        next_path: str | None = path
        next_params = params
        while next_path is not None:
            page = self.get(next_path, params=next_params, target=target, default=[], cancel=cancel)
            yield page
            next_path = page.cursor.next
            # The next link already carries the full query string.
            next_params = None

    def check_authentication(self, *, cancel: CancellationToken | None = None) -> bool:
        """True for valid credentials, False on 401; other failures raise."""

        try:
            self.get("authentication.json", cancel=cancel)
        except APIError as exc:
            if exc.kind is ErrorKind.UNAUTHORIZED:
                return False
            raise
        return True
