"""httpx wrapper.

- Standardizes timeouts, headers and redirects for every catalog request.
- Accepts an injected transport so tests can plug in `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_timeout(settings: AppSettings) -> httpx.Timeout:
    """Connect/read caps from settings; write and pool reuse the read cap."""

    return httpx.Timeout(
        settings.read_timeout_seconds,
        connect=settings.connect_timeout_seconds,
        read=settings.read_timeout_seconds,
    )


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the application defaults.

    Use it as an async context manager so the connection is released on
    every exit path.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=build_timeout(settings),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
