"""Logging setup for the `pokedex` logger hierarchy."""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "pokedex"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the root `pokedex` logger once and return it.

    Calling it again only adjusts the level; handlers are never duplicated.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under `pokedex` (e.g. `pokedex.adapters.pokeapi.client`)."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
