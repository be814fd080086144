"""Core services: local search and the catalog state container."""
