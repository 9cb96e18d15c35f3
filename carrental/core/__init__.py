"""Core app configuration, database, security and errors."""

from carrental.core.config import get_settings, settings
from carrental.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
