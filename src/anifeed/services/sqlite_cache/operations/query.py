"""Query operations for the SQLite anime cache."""

from __future__ import annotations

import logging

from anifeed.domain.models import AnimeRow
from anifeed.services.sqlite_cache.operations.base import BaseOperation
from anifeed.shared.constants import CacheColumns, CacheConfig

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = ", ".join(CacheColumns.ALL)


class QueryOperations(BaseOperation):
    """Read operations for cached anime rows."""

    def select_by_page_range(self, max_page: int) -> list[AnimeRow]:
        """Return every row cached under a page up to ``max_page``.

        Rows are ordered by page, then rank, so the accumulated list reads
        back in the order it was served. Unranked rows sort first in a page.

        Args:
            max_page: Highest page to include

        Returns:
            Ordered list of rows (empty when nothing is cached)
        """
        self._validate_connection()

        sql = f"""
        SELECT {_SELECT_COLUMNS}
        FROM {CacheConfig.TABLE_NAME}
        WHERE page <= ?
        ORDER BY page ASC, rank ASC
        """
        rows = [self._from_record(r) for r in self.conn.execute(sql, (max_page,))]

        logger.debug("Cache read: %d rows up to page %d", len(rows), max_page)
        return rows

    def select_max_page(self) -> int | None:
        """Return the highest cached page, or None for an empty cache."""
        self._validate_connection()

        cursor = self.conn.execute(f"SELECT MAX(page) FROM {CacheConfig.TABLE_NAME}")
        row = cursor.fetchone()
        return row[0] if row else None

    def select_by_id(self, anime_id: int) -> AnimeRow | None:
        """Return the row for ``anime_id`` or None on a cache miss."""
        self._validate_connection()

        sql = f"SELECT {_SELECT_COLUMNS} FROM {CacheConfig.TABLE_NAME} WHERE mal_id = ?"
        record = self.conn.execute(sql, (anime_id,)).fetchone()

        if record is None:
            logger.debug("Cache miss: mal_id=%d", anime_id)
            return None
        return self._from_record(record)

    def count(self) -> int:
        """Total number of cached rows."""
        self._validate_connection()

        cursor = self.conn.execute(f"SELECT COUNT(*) FROM {CacheConfig.TABLE_NAME}")
        return int(cursor.fetchone()[0])

    def page_counts(self) -> dict[int, int]:
        """Number of cached rows per page."""
        self._validate_connection()

        cursor = self.conn.execute(
            f"SELECT page, COUNT(*) FROM {CacheConfig.TABLE_NAME} GROUP BY page ORDER BY page"
        )
        return {page: count for page, count in cursor.fetchall()}
