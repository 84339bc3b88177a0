"""SQLite cache operations module.

This module provides separate operation classes for querying, inserting,
and deleting cached rows.
"""

from anifeed.services.sqlite_cache.operations.delete import DeleteOperations
from anifeed.services.sqlite_cache.operations.insert import InsertOperations
from anifeed.services.sqlite_cache.operations.query import QueryOperations

__all__ = ["DeleteOperations", "InsertOperations", "QueryOperations"]
