"""PokeAPI transport.

Each operation opens its own `httpx.AsyncClient`, issues one GET, classifies
the status and hands the body to the schema decoders. Nothing here retries or
recovers: failures surface as `core.errors` exceptions.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from adapters.pokeapi.schemas import decode_detail, decode_listing
from core.config import AppSettings
from core.domain.models import EntryDetail, ListingPage
from core.errors import NetworkError, NotFoundError, TransportError
from core.interfaces.catalog import CatalogSource
from core.logging import get_logger

logger = get_logger(__name__)


class PokeApiSource(CatalogSource):
    """Catalog source backed by the public PokeAPI REST endpoints."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url.rstrip("/")

    async def _get(self, url: str, params: dict[str, int] | None = None) -> httpx.Response:
        logger.debug("GET %s params=%s", url, params)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as exc:
            logger.warning("Timeout requesting %s: %s", url, exc)
            raise NetworkError(url, f"timed out ({exc.__class__.__name__})") from exc
        except httpx.RequestError as exc:
            # Connection failures, redirect loops and undecodable content encodings.
            logger.warning("Request to %s failed: %s", url, exc)
            raise NetworkError(url, str(exc) or exc.__class__.__name__) from exc
        return response

    async def fetch_listing(self, offset: int, limit: int) -> ListingPage:
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")

        response = await self._get(f"{self.base_url}/pokemon", params={"offset": offset, "limit": limit})
        if response.status_code != 200:
            logger.warning("Listing request failed with HTTP %s", response.status_code)
            raise TransportError(response.status_code, response.text or None, "fetching Pokemon page")
        return decode_listing(response.content)

    async def fetch_detail_by_ref(self, ref: str) -> EntryDetail:
        response = await self._get(ref)
        if response.status_code != 200:
            logger.warning("Detail request %s failed with HTTP %s", ref, response.status_code)
            raise TransportError(response.status_code, response.text or None, "fetching Pokemon detail")
        return decode_detail(response.content)

    async def fetch_detail_by_query(self, query: str) -> EntryDetail:
        """Exact-match lookup by lowercase name or decimal ID."""

        normalized = query.strip().lower()
        if not normalized:
            raise ValueError("query must not be blank")

        response = await self._get(f"{self.base_url}/pokemon/{quote(normalized, safe='')}")
        if response.status_code != 200:
            logger.info("No exact match for %r (HTTP %s)", normalized, response.status_code)
            raise NotFoundError(normalized, response.status_code, response.text or None)
        return decode_detail(response.content)
