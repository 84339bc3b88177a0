"""Insert operations for the SQLite anime cache."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from anifeed.domain.models import AnimeRow
from anifeed.services.sqlite_cache.operations.base import BaseOperation
from anifeed.shared.constants import CacheColumns, CacheConfig

logger = logging.getLogger(__name__)

_UPSERT_SQL = (
    f"INSERT OR REPLACE INTO {CacheConfig.TABLE_NAME} ({', '.join(CacheColumns.ALL)}) "
    f"VALUES ({', '.join('?' for _ in CacheColumns.ALL)})"
)


class InsertOperations(BaseOperation):
    """Insert-or-replace operations keyed by ``mal_id``."""

    def upsert_one(self, row: AnimeRow) -> None:
        """Insert or replace a single row.

        Args:
            row: Row to store; an existing row with the same id is replaced
        """
        self._validate_connection()

        self.conn.execute(_UPSERT_SQL, self._to_params(row))

        logger.debug("Cache upsert: mal_id=%d, page=%d", row.mal_id, row.page)

    def upsert_many(self, rows: Sequence[AnimeRow]) -> None:
        """Insert or replace many rows.

        The caller wraps this in a transaction so a page is stored whole.

        Args:
            rows: Rows to store
        """
        self._validate_connection()

        self.conn.executemany(_UPSERT_SQL, [self._to_params(row) for row in rows])

        logger.debug("Cache upsert: %d rows", len(rows))
