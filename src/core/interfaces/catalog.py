"""Catalog data-source contract.

A structural `Protocol`: the HTTP source and any test double are
interchangeable as long as they expose these three coroutines.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import EntryDetail, ListingPage


@runtime_checkable
class CatalogSource(Protocol):
    """Minimal contract for something that can serve the catalog.

    - Every operation is asynchronous because it typically performs HTTP I/O.
    - Calls are independent of each other; no ordering is implied.
    - Failures surface as `core.errors.CatalogError` subclasses.
    """

    async def fetch_listing(self, offset: int, limit: int) -> ListingPage:
        """Return one page of entries starting at `offset`."""

        ...

    async def fetch_detail_by_ref(self, ref: str) -> EntryDetail:
        """Return the detail found at the absolute reference `ref`."""

        ...

    async def fetch_detail_by_query(self, query: str) -> EntryDetail:
        """Return the detail whose name or ID matches `query` exactly."""

        ...
