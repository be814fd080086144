"""Core: configuration, domain models, errors and services. No HTTP here."""
