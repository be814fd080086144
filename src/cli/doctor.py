"""Doctor commands: environment diagnostics and configuration."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.pokeapi import PokeApiSource
from core.config import AppSettings, write_user_env_vars
from core.errors import CatalogError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    source = PokeApiSource(settings)
    try:
        page = await source.fetch_listing(0, 1)
    except CatalogError as exc:
        return False, str(exc)
    return True, f"{page.total_count} entries available"


@app.command()
def run() -> None:
    """Show the effective settings and check that the catalog API answers."""

    settings = AppSettings()

    table = Table(title="Pokedex Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base URL", "OK", settings.api_base_url)
    table.add_row(
        "Timeouts",
        "OK",
        f"connect {settings.connect_timeout_seconds}s / read {settings.read_timeout_seconds}s",
    )
    table.add_row("Page size", "OK", str(settings.page_size))

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="set-base-url")
def set_base_url(url: str = typer.Argument(..., help="Catalog API base URL, e.g. https://pokeapi.co/api/v2")) -> None:
    """Store the API base URL in the user config .env."""

    url = url.strip().rstrip("/")
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("the base URL must start with http:// or https://")

    env_path = write_user_env_vars({"POKEDEX_API_BASE_URL": url})
    _console.print(f"[green]Saved API base URL to:[/green] {env_path}")
