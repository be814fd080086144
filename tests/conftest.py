"""Shared test fixtures: sample payloads, mock transports and fake sources."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

# Make `src/` importable without an editable install.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.config import AppSettings  # noqa: E402
from core.domain.models import EntryDetail, EntrySummary, ListingPage  # noqa: E402
from core.errors import NotFoundError  # noqa: E402

BASE_URL = "https://pokeapi.test/api/v2"


def make_listing_payload(names_and_ids: list[tuple[str, int]], *, count: int | None = None) -> dict[str, Any]:
    return {
        "count": len(names_and_ids) if count is None else count,
        "next": None,
        "previous": None,
        "results": [{"name": name, "url": f"{BASE_URL}/pokemon/{pid}/"} for name, pid in names_and_ids],
    }


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        api_base_url=BASE_URL,
        connect_timeout_seconds=1.0,
        read_timeout_seconds=1.0,
        page_size=4,
        _env_file=None,
    )


@pytest.fixture
def detail_payload() -> dict[str, Any]:
    return {
        "id": 6,
        "name": "charizard",
        "height": 17,
        "weight": 905,
        "base_experience": 267,
        "types": [
            {"slot": 1, "type": {"name": "fire", "url": f"{BASE_URL}/type/10/"}},
            {"slot": 2, "type": {"name": "flying", "url": f"{BASE_URL}/type/3/"}},
        ],
        "sprites": {
            "front_default": "https://img.test/sprites/6.png",
            "back_default": None,
        },
    }


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    def _build(payload: Any, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))

    return _build


@pytest.fixture
def sample_entries() -> list[EntrySummary]:
    return [
        EntrySummary(name="bulbasaur", detail_ref=f"{BASE_URL}/pokemon/1/"),
        EntrySummary(name="charmander", detail_ref=f"{BASE_URL}/pokemon/4/"),
        EntrySummary(name="charizard", detail_ref=f"{BASE_URL}/pokemon/6/"),
        EntrySummary(name="pikachu", detail_ref=f"{BASE_URL}/pokemon/25/"),
        EntrySummary(name="chikorita", detail_ref=f"{BASE_URL}/pokemon/152"),
        EntrySummary(name="bellossom", detail_ref=f"{BASE_URL}/pokemon/250/"),
        EntrySummary(name="missingno", detail_ref="not-a-url"),
    ]


class FakeCatalogSource:
    """In-memory `CatalogSource` keyed by detail reference."""

    def __init__(self, entries: list[EntrySummary], details: dict[str, EntryDetail]) -> None:
        self.entries = entries
        self.details = details
        self.calls: list[tuple[str, Any]] = []

    async def fetch_listing(self, offset: int, limit: int) -> ListingPage:
        self.calls.append(("fetch_listing", (offset, limit)))
        window = self.entries[offset : offset + limit]
        return ListingPage(total_count=len(self.entries), entries=tuple(window))

    async def fetch_detail_by_ref(self, ref: str) -> EntryDetail:
        self.calls.append(("fetch_detail_by_ref", ref))
        return self.details[ref]

    async def fetch_detail_by_query(self, query: str) -> EntryDetail:
        self.calls.append(("fetch_detail_by_query", query))
        normalized = query.strip().lower()
        for detail in self.details.values():
            if detail.name == normalized or str(detail.id) == normalized:
                return detail
        raise NotFoundError(normalized, 404, "Not Found")


@pytest.fixture
def fake_source(sample_entries: list[EntrySummary]) -> FakeCatalogSource:
    details = {
        f"{BASE_URL}/pokemon/4/": EntryDetail(
            id=4, name="charmander", height=6, weight=85, categories=("fire",), thumbnail_ref=""
        ),
        f"{BASE_URL}/pokemon/6/": EntryDetail(
            id=6,
            name="charizard",
            height=17,
            weight=905,
            categories=("fire", "flying"),
            thumbnail_ref="https://img.test/sprites/6.png",
        ),
    }
    return FakeCatalogSource(sample_entries[:4], details)
