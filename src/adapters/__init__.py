"""Adapters: concrete I/O (HTTP transport, JSON export)."""
