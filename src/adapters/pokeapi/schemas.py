"""Wire schemas for PokeAPI responses and their decoders.

The pydantic models mirror the JSON bodies; `decode_listing` and
`decode_detail` validate raw bodies against them and map the result onto the
domain models. Required, optional and nullable rules live only here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from core.domain.models import EntryDetail, EntrySummary, ListingPage
from core.errors import DecodeError


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)


class ListingResultWire(_WireModel):
    name: str
    url: str


class ListingWire(_WireModel):
    count: int = Field(ge=0)
    # Required keys whose value may be an explicit null.
    next: str | None
    previous: str | None
    results: list[ListingResultWire]


class NamedResourceWire(_WireModel):
    name: str


class TypeSlotWire(_WireModel):
    type: NamedResourceWire


class SpritesWire(_WireModel):
    front_default: str | None = None


class DetailWire(_WireModel):
    id: int
    name: str
    height: int
    weight: int
    types: list[TypeSlotWire]
    sprites: SpritesWire


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<body>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def decode_listing(body: str | bytes) -> ListingPage:
    """Decode a listing body; raises `DecodeError` on any schema violation."""

    try:
        wire = ListingWire.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"listing: {_describe(exc)}", {"errors": exc.errors(include_url=False)}) from exc

    return ListingPage(
        total_count=wire.count,
        next_page_ref=wire.next,
        previous_page_ref=wire.previous,
        entries=tuple(EntrySummary(name=r.name, detail_ref=r.url) for r in wire.results),
    )


def decode_detail(body: str | bytes) -> EntryDetail:
    """Decode a detail body; a null or absent `sprites.front_default` becomes ""."""

    try:
        wire = DetailWire.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"detail: {_describe(exc)}", {"errors": exc.errors(include_url=False)}) from exc

    return EntryDetail(
        id=wire.id,
        name=wire.name,
        height=wire.height,
        weight=wire.weight,
        categories=tuple(slot.type.name for slot in wire.types),
        thumbnail_ref=wire.sprites.front_default or "",
    )
