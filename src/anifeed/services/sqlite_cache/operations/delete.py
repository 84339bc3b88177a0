"""Delete operations for the SQLite anime cache."""

from __future__ import annotations

import logging

from anifeed.services.sqlite_cache.operations.base import BaseOperation
from anifeed.shared.constants import CacheConfig

logger = logging.getLogger(__name__)


class DeleteOperations(BaseOperation):
    """Delete operations for cache management."""

    def clear_all(self) -> int:
        """Delete every cached row.

        Returns:
            Number of deleted rows
        """
        self._validate_connection()

        cursor = self.conn.execute(f"DELETE FROM {CacheConfig.TABLE_NAME}")
        cleared_count = cursor.rowcount

        logger.info("Cleared %d cached anime entries", cleared_count)
        return cleared_count
