"""CLI commands with the repository swapped for an in-memory source."""

from __future__ import annotations

import json

import httpx
import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from cli import main as cli_main
from adapters.pokeapi import PokeApiSource
from cli.main import _row_selection, app
from core.config import write_user_env_vars
from core.repository import CatalogRepository

runner = CliRunner()


@pytest.fixture
def patched_repository(monkeypatch, fake_source):
    monkeypatch.setattr(cli_main, "build_repository", lambda settings: CatalogRepository(fake_source))
    return fake_source


def test_list_prints_page(patched_repository):
    result = runner.invoke(app, ["list", "--limit", "4"])

    assert result.exit_code == 0, result.output
    for name in ("BULBASAUR", "CHARMANDER", "CHARIZARD", "PIKACHU"):
        assert name in result.output
    assert patched_repository.calls == [("fetch_listing", (0, 4))]


def test_list_filters_locally(patched_repository):
    result = runner.invoke(app, ["list", "--limit", "4", "--query", "char"])

    assert result.exit_code == 0, result.output
    assert "CHARMANDER" in result.output
    assert "CHARIZARD" in result.output
    assert "PIKACHU" not in result.output
    assert "Showing 2 of 4" in result.output


def test_list_writes_json(patched_repository, tmp_path):
    out = tmp_path / "page.json"

    result = runner.invoke(app, ["list", "--limit", "2", "--json-out", str(out)])

    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["total_count"] == 4
    assert [e["name"] for e in data["entries"]] == ["bulbasaur", "charmander"]


def test_show_renders_detail(patched_repository):
    result = runner.invoke(app, ["show", "Charizard"])

    assert result.exit_code == 0, result.output
    assert "CHARIZARD" in result.output
    assert "fire" in result.output
    assert "flying" in result.output


def test_show_not_found_exits_with_error(patched_repository):
    result = runner.invoke(app, ["show", "agumon"])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert "404" in result.output


def test_browse_filters_and_opens_detail(patched_repository):
    result = runner.invoke(app, ["browse", "--no-banner"], input="char\n#2\nq\n")

    assert result.exit_code == 0, result.output
    assert "Showing 2 of 4" in result.output
    assert "Sprite: https://img.test/sprites/6.png" in result.output
    assert ("fetch_detail_by_ref", "https://pokeapi.test/api/v2/pokemon/6/") in patched_repository.calls


def test_browse_reports_detail_failure(patched_repository):
    result = runner.invoke(app, ["browse", "--no-banner"], input="#1\nq\n")

    assert result.exit_code == 0, result.output
    assert "Error:" in result.output


def test_browse_out_of_range_row(patched_repository):
    result = runner.invoke(app, ["browse", "--no-banner"], input="#9\nq\n")

    assert result.exit_code == 0, result.output
    assert "No row 9" in result.output


@pytest.mark.parametrize("answer,expected", [("#3", 3), ("# 12", 12), ("3", None), ("#x", None), ("", None)])
def test_row_selection(answer, expected):
    assert _row_selection(answer) == expected


def test_doctor_set_base_url_writes_user_env(monkeypatch, tmp_path):
    env_file = tmp_path / "pokedex-cli" / ".env"
    monkeypatch.setattr("cli.doctor.write_user_env_vars", lambda values: write_user_env_vars(values, env_path=env_file))

    result = runner.invoke(app, ["doctor", "set-base-url", "https://mirror.test/api/v2/"])

    assert result.exit_code == 0, result.output
    assert "POKEDEX_API_BASE_URL=https://mirror.test/api/v2" in env_file.read_text(encoding="utf-8")


def test_doctor_set_base_url_rejects_non_http():
    result = runner.invoke(app, ["doctor", "set-base-url", "ftp://mirror.test"])

    assert result.exit_code != 0


def test_show_reports_redirect_loop(monkeypatch, settings):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": str(request.url)})

    source = PokeApiSource(settings, transport=httpx.MockTransport(handler))
    monkeypatch.setattr(cli_main, "build_repository", lambda _settings: CatalogRepository(source))

    result = runner.invoke(app, ["show", "pikachu"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, httpx.HTTPError)
    assert "Error: Network error requesting" in result.output


def test_invalid_environment_reports_configuration_error(monkeypatch, patched_repository):
    monkeypatch.setenv("POKEDEX_PAGE_SIZE", "0")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, ValidationError)
    assert "Error: invalid configuration" in result.output
    assert "page_size" in result.output
    assert patched_repository.calls == []
