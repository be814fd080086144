"""Catalog repository.

Thin facade between the state container and a `CatalogSource`. Results and
exceptions pass through unchanged; swap the source to substitute test data.
"""

from __future__ import annotations

from core.domain.models import EntryDetail, ListingPage
from core.interfaces.catalog import CatalogSource

DEFAULT_PAGE_LIMIT = 20


class CatalogRepository:
    def __init__(self, source: CatalogSource) -> None:
        self._source = source

    async def get_page(self, offset: int, limit: int = DEFAULT_PAGE_LIMIT) -> ListingPage:
        """One page of entries, e.g. offset=0, limit=20 for the first page."""

        return await self._source.fetch_listing(offset, limit)

    async def get_detail_by_ref(self, ref: str) -> EntryDetail:
        return await self._source.fetch_detail_by_ref(ref)

    async def get_detail_by_query(self, query: str) -> EntryDetail:
        """Exact name or ID lookup; the remote does not support partial matches."""

        return await self._source.fetch_detail_by_query(query)
