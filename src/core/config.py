"""Core configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI.
- Adapters (HTTP) and the state container read the same `AppSettings`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pokedex-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pokedex-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pokedex-cli"
    return Path.home() / ".config" / "pokedex-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write/update variables in the per-user .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pokedex-cli user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Every value can be overridden with a `POKEDEX_`-prefixed environment
    variable or an entry in one of the `.env` files.
    """

    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        min_length=8,
        description="Base URL of the catalog API (without trailing slash).",
    )
    connect_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Connect timeout per request (seconds).",
    )
    read_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Read timeout per request (seconds).",
    )
    page_size: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Number of entries fetched by the default listing window.",
    )
    user_agent: str = Field(
        default="pokedex-cli/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the `pokedex` logger (DEBUG, INFO, WARNING, ...).",
    )
