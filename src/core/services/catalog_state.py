"""Catalog state container.

Owns the three presentation-facing slots (listing, selected detail, last
error) and the imperative triggers that fill them. Consumers read immutable
`StateSnapshot`s or subscribe to be told when one changes; they never mutate
the slots directly.

Concurrency model:
- Triggers schedule a task on the running event loop and return at once.
- Several loads may be in flight; each writes only its own slot when it
  finishes, so the last one to complete wins for that slot.
- All slot writes happen on the event loop thread; there is no cancellation
  and no sequence-number filtering of stale responses.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from typing import Any, Callable, Coroutine

from core.domain.models import EntryDetail, ListingPage, OperationError
from core.logging import get_logger
from core.repository import DEFAULT_PAGE_LIMIT, CatalogRepository

logger = get_logger(__name__)

Listener = Callable[["StateSnapshot"], None]


@dataclass(frozen=True)
class StateSnapshot:
    """Read-only view of the three slots at one point in time."""

    listing: ListingPage | None = None
    detail: EntryDetail | None = None
    error: OperationError | None = None

    @property
    def is_loading(self) -> bool:
        """True while nothing has arrived yet: no listing and no error."""

        return self.listing is None and self.error is None


class CatalogState:
    def __init__(self, repository: CatalogRepository, *, page_size: int = DEFAULT_PAGE_LIMIT) -> None:
        self._repository = repository
        self._page_size = page_size
        self._snapshot = StateSnapshot()
        self._listeners: list[Listener] = []
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def snapshot(self) -> StateSnapshot:
        return self._snapshot

    @property
    def listing(self) -> ListingPage | None:
        return self._snapshot.listing

    @property
    def detail(self) -> EntryDetail | None:
        return self._snapshot.detail

    @property
    def error(self) -> OperationError | None:
        return self._snapshot.error

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener` for every future snapshot; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, **changes: Any) -> None:
        self._snapshot = replace(self._snapshot, **changes)
        for listener in list(self._listeners):
            listener(self._snapshot)

    def _record_failure(self, operation: str, exc: Exception) -> None:
        error = OperationError.from_exception(exc)
        logger.info("%s failed: %s", operation, error.message)
        self._update(error=error)

    def _launch(self, coro: Coroutine[Any, Any, None], name: str) -> asyncio.Task[None]:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def load_listing(self) -> asyncio.Task[None]:
        """Fetch the default page window (offset 0, `page_size` entries)."""

        return self._launch(self._load_listing(), "load_listing")

    async def _load_listing(self) -> None:
        try:
            page = await self._repository.get_page(0, self._page_size)
        except Exception as exc:
            self._record_failure("load_listing", exc)
            return
        self._update(listing=page)

    def load_detail(self, ref: str) -> asyncio.Task[None]:
        """Fetch the detail behind `ref` and make it the selected entry."""

        return self._launch(self._load_detail(ref), "load_detail")

    async def _load_detail(self, ref: str) -> None:
        try:
            detail = await self._repository.get_detail_by_ref(ref)
        except Exception as exc:
            self._record_failure("load_detail", exc)
            return
        self._update(detail=detail)

    def close_detail(self) -> None:
        """Clear the selected detail. No network effect."""

        self._update(detail=None)

    async def wait_idle(self) -> None:
        """Wait until every load scheduled so far (and any it spawned) has finished."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
