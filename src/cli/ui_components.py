"""Rich UI components for the CLI.

Keeps table/panel layout out of the command functions so `list`, `show` and
`browse` render entries the same way.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import EntryDetail, EntrySummary, ListingPage, OperationError
from core.services.search_filter import extract_entry_id

# Category (type) name -> Rich colour.
CATEGORY_STYLES: dict[str, str] = {
    "normal": "grey70",
    "fire": "red1",
    "water": "dodger_blue1",
    "grass": "green3",
    "electric": "yellow1",
    "ice": "pale_turquoise1",
    "fighting": "dark_red",
    "poison": "medium_purple3",
    "ground": "tan",
    "flying": "light_slate_blue",
    "psychic": "hot_pink",
    "bug": "chartreuse3",
    "rock": "dark_goldenrod",
    "ghost": "purple4",
    "dragon": "slate_blue1",
    "dark": "grey35",
    "steel": "light_steel_blue",
    "fairy": "pink1",
}


def category_style(name: str) -> str:
    return CATEGORY_STYLES.get(name.lower(), "white")


def print_banner(console: Console) -> None:
    title = Text("POKEDEX", style="bold red")
    subtitle = Text("Catalog listing • Local search • Detail lookup", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="red", padding=(1, 4)))


def build_listing_table(entries: Sequence[EntrySummary], *, title: str = "Pokémon List") -> Table:
    """Table of entries; the `#` column is the 1-based row used by `browse`."""

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Reference", style="magenta")
    for row, entry in enumerate(entries, start=1):
        entry_id = extract_entry_id(entry.detail_ref)
        table.add_row(
            str(row),
            entry.name.upper(),
            str(entry_id) if entry_id is not None else "-",
            entry.detail_ref,
        )
    return table


def build_page_summary(page: ListingPage, *, shown: int) -> Text:
    text = Text()
    text.append(f"Showing {shown} of {len(page.entries)} on this page", style="bold")
    text.append(f" • {page.total_count} in catalog", style="dim")
    if page.previous_page_ref:
        text.append(f"\nPrevious: {page.previous_page_ref}", style="dim")
    if page.next_page_ref:
        text.append(f"\nNext: {page.next_page_ref}", style="dim")
    return text


def build_detail_panel(detail: EntryDetail) -> Panel:
    body = Text()
    body.append(f"ID: {detail.id}\n")
    body.append(f"Height: {detail.height}\n")
    body.append(f"Weight: {detail.weight}\n")
    body.append("Types: ")
    for index, category in enumerate(detail.categories):
        if index:
            body.append(", ")
        body.append(category, style=f"bold {category_style(category)}")
    if not detail.categories:
        body.append("-", style="dim")
    body.append("\nSprite: ")
    body.append(detail.thumbnail_ref or "(none)", style="dim")

    border = category_style(detail.categories[0]) if detail.categories else "white"
    title = Text(detail.name.upper(), style="bold")
    return Panel(body, title=title, border_style=border, padding=(1, 2))


def build_error_text(error: OperationError) -> Text:
    return Text(f"Error: {error.message}", style="bold red")
