"""SQLite cache transaction module."""

from anifeed.services.sqlite_cache.transaction.manager import TransactionManager

__all__ = ["TransactionManager"]
