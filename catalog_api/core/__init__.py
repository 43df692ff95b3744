"""Core app configuration, database and security."""

from catalog_api.core.config import get_settings, settings
from catalog_api.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
