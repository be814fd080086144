"""PokeAPI adapter: HTTP transport plus wire schemas/decoders."""

from adapters.pokeapi.client import PokeApiSource
from adapters.pokeapi.schemas import decode_detail, decode_listing

__all__ = [
    "PokeApiSource",
    "decode_detail",
    "decode_listing",
]
