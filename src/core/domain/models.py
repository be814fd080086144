"""Domain models (Pydantic v2).

- These models describe *what* the catalog data is, not *how* it is fetched.
- All of them are frozen: a new fetch result replaces an instance wholesale.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class EntrySummary(BaseModel):
    """Lightweight listing entry: a name plus an opaque reference to its detail."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Entry name as returned by the catalog (e.g. 'bulbasaur').",
    )
    detail_ref: str = Field(
        ...,
        description="Absolute URL of the entry detail; never parsed by this model.",
    )


class ListingPage(BaseModel):
    """One page of the catalog listing."""

    model_config = ConfigDict(frozen=True)

    total_count: int = Field(
        ...,
        ge=0,
        description="Total number of entries in the remote catalog.",
    )
    next_page_ref: str | None = Field(
        default=None,
        description="URL of the next page, None on the last page.",
    )
    previous_page_ref: str | None = Field(
        default=None,
        description="URL of the previous page, None on the first page.",
    )
    entries: tuple[EntrySummary, ...] = Field(
        default_factory=tuple,
        description="Entries in server order.",
    )


class EntryDetail(BaseModel):
    """Full record for a single entry."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Numeric catalog ID.")
    name: str = Field(..., description="Entry name.")
    height: int = Field(..., description="Height in decimetres.")
    weight: int = Field(..., description="Weight in hectograms.")
    categories: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Category (type) names in server order.",
    )
    thumbnail_ref: str = Field(
        default="",
        description="Sprite URL; empty string when the catalog has none.",
    )


class OperationError(BaseModel):
    """Flattened, human-readable failure stored in the state container."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Human-readable failure description.")

    @classmethod
    def from_exception(cls, exc: BaseException) -> "OperationError":
        message = str(exc).strip() or exc.__class__.__name__
        return cls(message=message)
