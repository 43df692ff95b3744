"""Catalog API: user accounts, JWT auth and an admin-managed product catalog."""

__version__ = "0.1.0"
