"""httpx client builder.

- Standardizes timeouts, pool limits and default headers for every request.
- Tests inject an `httpx.MockTransport` through `transport=`.
"""

from __future__ import annotations

import httpx

from feedbin.core.config import ClientSettings


def build_http_client(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create a pooled `httpx.Client` with the configured defaults.

    Redirects are not followed: the service answers 302 with the existing
    resource in the body when a subscription already exists.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.timeout_seconds),
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        ),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )
