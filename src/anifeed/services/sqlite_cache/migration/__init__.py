"""SQLite cache migration module."""

from anifeed.services.sqlite_cache.migration.manager import MigrationManager

__all__ = ["MigrationManager"]
