"""Local search over an already fetched listing.

Pure and synchronous: safe to run on every keystroke without touching the
network or the state container.
"""

from __future__ import annotations

import re
from typing import Sequence

from core.domain.models import EntrySummary

_TRAILING_ID_RE = re.compile(r".*/([0-9]+)/?")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def extract_entry_id(ref: str) -> int | None:
    """Numeric ID at the end of a detail reference.

    Example: "https://pokeapi.co/api/v2/pokemon/25/" -> 25
    """

    match = _TRAILING_ID_RE.fullmatch(ref)
    if match is None:
        return None
    return int(match.group(1))


def _parse_query_id(query: str) -> int | None:
    if _INTEGER_RE.fullmatch(query) is None:
        return None
    return int(query)


def filter_entries(entries: Sequence[EntrySummary], query: str) -> list[EntrySummary]:
    """Filter `entries` by numeric ID or by name substring.

    - Blank query: every entry, in the original order.
    - Integer query: entries whose reference ends in that ID.
    - Anything else: entries whose name contains the query (case-insensitive).
    """

    trimmed = query.strip()
    if not trimmed:
        return list(entries)

    needle = trimmed.lower()
    wanted_id = _parse_query_id(needle)
    if wanted_id is not None:
        return [entry for entry in entries if extract_entry_id(entry.detail_ref) == wanted_id]
    return [entry for entry in entries if needle in entry.name.lower()]
