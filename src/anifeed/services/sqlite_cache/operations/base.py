"""Base operation class for SQLite cache operations.

This module provides the row <-> dataclass conversion shared by all
cache operations.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import astuple
from typing import Any

from anifeed.domain.models import AnimeRow
from anifeed.shared.constants import CacheColumns

logger = logging.getLogger(__name__)


class BaseOperation:
    """Base class for cache operations with shared functionality."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize base operation.

        Args:
            conn: SQLite database connection
        """
        self.conn = conn

    def _validate_connection(self) -> None:
        """Validate database connection is available.

        Raises:
            RuntimeError: If connection is not initialized
        """
        if self.conn is None:
            raise RuntimeError("Database connection not initialized")

    @staticmethod
    def _to_params(row: AnimeRow) -> tuple[Any, ...]:
        """Flatten a row into parameters ordered as ``CacheColumns.ALL``."""
        params = list(astuple(row))
        airing_index = CacheColumns.ALL.index("airing")
        if params[airing_index] is not None:
            params[airing_index] = int(params[airing_index])
        return tuple(params)

    @staticmethod
    def _from_record(record: sqlite3.Row | tuple[Any, ...]) -> AnimeRow:
        """Rebuild an ``AnimeRow`` from a row selected with ``CacheColumns.ALL``."""
        values = dict(zip(CacheColumns.ALL, tuple(record)))
        if values["airing"] is not None:
            values["airing"] = bool(values["airing"])
        return AnimeRow(**values)
