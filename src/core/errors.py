"""Error taxonomy of the data layer.

Transport, repository and decoder raise these unchanged; only
`CatalogState` catches them and flattens them into `OperationError`.
"""

from __future__ import annotations

from typing import Any


class CatalogError(Exception):
    """Base class for every data-layer failure."""

    def __init__(self, message: str, error_code: str = "CATALOG_ERROR", details: dict[str, Any] | None = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class TransportError(CatalogError):
    """Non-200 HTTP response."""

    def __init__(
        self,
        status_code: int,
        body: str | None,
        operation: str = "fetching data",
        error_code: str = "TRANSPORT_ERROR",
    ):
        self.status_code = status_code
        self.body = body
        message = f"Error {operation}. Code: {status_code}. Message: {body}"
        super().__init__(message, error_code, {"status_code": status_code, "body": body})


class NotFoundError(TransportError):
    """Exact-match lookup rejected by the remote (typically 404)."""

    def __init__(self, query: str, status_code: int, body: str | None):
        self.query = query
        super().__init__(status_code, body, "searching by name/ID", "NOT_FOUND")
        self.details["query"] = query


class NetworkError(CatalogError):
    """No usable response: connection failure, timeout, redirect loop or bad content encoding."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Network error requesting {url}: {reason}", "NETWORK_ERROR", {"url": url, "reason": reason})


class DecodeError(CatalogError):
    """Body is not valid JSON or does not match the expected shape."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        self.reason = reason
        super().__init__(f"Failed to decode response: {reason}", "DECODE_ERROR", details or {"reason": reason})
