"""Domain models and entities.

Plain, strict data structures (Pydantic v2). The domain knows nothing about
HTTP, the CLI or SDKs: only catalog concepts.
"""

from core.domain.models import EntryDetail, EntrySummary, ListingPage, OperationError

__all__ = [
    "EntryDetail",
    "EntrySummary",
    "ListingPage",
    "OperationError",
]
