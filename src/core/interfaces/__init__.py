"""Core interfaces/abstractions.

Contracts (Protocol) implemented by concrete adapters, so the core depends
on abstractions rather than on httpx.
"""

from core.interfaces.catalog import CatalogSource

__all__ = ["CatalogSource"]
