"""Pokedex command line.

Commands:
- `list`:   one page of the catalog, optionally filtered locally.
- `show`:   exact-match lookup by name or ID.
- `browse`: interactive session driven by `CatalogState`.
- `doctor`: diagnostics and configuration (see `cli.doctor`).
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from adapters.json_exporter import export_model_json
from adapters.pokeapi import PokeApiSource
from cli import doctor
from cli.ui_components import (
    build_detail_panel,
    build_error_text,
    build_listing_table,
    build_page_summary,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import OperationError
from core.errors import CatalogError
from core.logging import get_logger, setup_logging
from core.repository import CatalogRepository
from core.services.catalog_state import CatalogState
from core.services.search_filter import filter_entries

app = typer.Typer(no_args_is_help=True, help="Browse the PokeAPI catalog from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = get_logger(__name__)

_QUIT_WORDS = {"q", "quit", "exit"}


def build_repository(settings: AppSettings) -> CatalogRepository:
    return CatalogRepository(PokeApiSource(settings))


def _fail(exc: Exception) -> None:
    _console.print(build_error_text(OperationError.from_exception(exc)))
    raise typer.Exit(code=1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(Text(f"Error: invalid configuration\n{exc}", style="bold red"))
        raise typer.Exit(code=1) from exc
    setup_logging("DEBUG" if verbose else settings.log_level)


@app.command(name="list")
def list_entries(
    offset: int = typer.Option(0, "--offset", min=0, help="Index of the first entry."),
    limit: int | None = typer.Option(None, "--limit", min=1, help="Entries per page (defaults to POKEDEX_PAGE_SIZE)."),
    query: str = typer.Option("", "--query", "-q", help="Local filter: name substring or numeric ID."),
    json_out: Path | None = typer.Option(None, "--json-out", help="Also write the fetched page as JSON."),
) -> None:
    """Fetch one page of the catalog and print it."""

    settings = AppSettings()
    repository = build_repository(settings)
    try:
        page = asyncio.run(repository.get_page(offset, limit or settings.page_size))
    except (CatalogError, ValueError) as exc:
        _fail(exc)
        return

    entries = filter_entries(page.entries, query)
    _console.print(build_listing_table(entries))
    _console.print(build_page_summary(page, shown=len(entries)))

    if json_out is not None:
        path = export_model_json(model=page, output_path=json_out)
        _console.print(f"[green]Saved JSON to:[/green] {path}")


@app.command()
def show(
    name_or_id: str = typer.Argument(..., help="Exact name (e.g. pikachu) or numeric ID (e.g. 25)."),
    json_out: Path | None = typer.Option(None, "--json-out", help="Also write the detail as JSON."),
) -> None:
    """Look up a single entry by exact name or ID."""

    settings = AppSettings()
    repository = build_repository(settings)
    try:
        detail = asyncio.run(repository.get_detail_by_query(name_or_id))
    except (CatalogError, ValueError) as exc:
        _fail(exc)
        return

    _console.print(build_detail_panel(detail))

    if json_out is not None:
        path = export_model_json(model=detail, output_path=json_out)
        _console.print(f"[green]Saved JSON to:[/green] {path}")


def _row_selection(answer: str) -> int | None:
    """`#3` selects row 3; anything else is not a selection."""

    if not answer.startswith("#"):
        return None
    digits = answer[1:].strip()
    if not digits.isdigit():
        return None
    return int(digits)


async def _browse(state: CatalogState, query: str) -> int:
    state.load_listing()
    with _console.status("Loading catalog..."):
        await state.wait_idle()

    shown_error: OperationError | None = None
    while True:
        snapshot = state.snapshot
        if snapshot.error is not None and snapshot.error is not shown_error:
            _console.print(build_error_text(snapshot.error))
            shown_error = snapshot.error
        if snapshot.listing is None:
            return 1

        entries = filter_entries(snapshot.listing.entries, query)
        _console.print(build_listing_table(entries))
        _console.print(build_page_summary(snapshot.listing, shown=len(entries)))

        answer = typer.prompt(
            "Filter (name or ID), #row to open, empty to reset, q to quit",
            default="",
            show_default=False,
        ).strip()
        if answer.lower() in _QUIT_WORDS:
            return 0

        row = _row_selection(answer)
        if row is None:
            query = answer
            continue
        if not 1 <= row <= len(entries):
            _console.print(f"[yellow]No row {row} in the current view.[/yellow]")
            continue

        state.load_detail(entries[row - 1].detail_ref)
        with _console.status(f"Loading {entries[row - 1].name}..."):
            await state.wait_idle()
        if state.detail is not None:
            _console.print(build_detail_panel(state.detail))
            state.close_detail()


@app.command()
def browse(
    query: str = typer.Option("", "--query", "-q", help="Initial local filter."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """Interactive listing with local search and detail lookup."""

    settings = AppSettings()
    if banner:
        print_banner(_console)
    state = CatalogState(build_repository(settings), page_size=settings.page_size)
    code = asyncio.run(_browse(state, query))
    logger.debug("browse finished with exit code %s", code)
    if code:
        raise typer.Exit(code=code)


def run() -> None:
    app()
