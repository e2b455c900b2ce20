"""Core app configuration, database and token security."""

from wisata.core.config import get_settings, settings
from wisata.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
