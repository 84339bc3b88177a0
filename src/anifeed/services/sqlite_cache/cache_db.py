"""SQLite anime cache database facade.

This module ties the migration, transaction and operation classes together
behind the ``CacheStoreProtocol`` interface used by the repository.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Generator, Sequence
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from typing import Any

from anifeed.domain.models import AnimeRow
from anifeed.services.sqlite_cache.migration.manager import MigrationManager
from anifeed.services.sqlite_cache.operations.delete import DeleteOperations
from anifeed.services.sqlite_cache.operations.insert import InsertOperations
from anifeed.services.sqlite_cache.operations.query import QueryOperations
from anifeed.services.sqlite_cache.transaction.manager import TransactionManager
from anifeed.shared.constants import ErrorMessages
from anifeed.shared.errors import ErrorCode, ErrorContext, StorageError
from anifeed.shared.logging import log_operation_error, log_operation_success

logger = logging.getLogger(__name__)


class AnimeCacheDB:
    """SQLite-backed anime cache, one row per anime partitioned by page.

    Calls arrive from worker threads (the repository runs them through
    ``asyncio.to_thread``), so the single connection is guarded by a
    re-entrant lock held for exactly one call.

    Attributes:
        db_path: Path to SQLite database file
        conn: SQLite database connection

    Example:
        >>> cache = AnimeCacheDB(Path("anime_cache.db"))
        >>> cache.upsert_many(rows)
        >>> cache.select_by_page_range(2)
        >>> cache.close()
    """

    def __init__(self, db_path: Path | str) -> None:
        """Initialize SQLite cache database.

        Args:
            db_path: Path to SQLite database file, or ``":memory:"``

        Raises:
            StorageError: If database initialization fails
        """
        self.db_path = Path(db_path)
        self.conn: sqlite3.Connection | None = None
        self._lock = threading.RLock()
        self._initialize_db()

    def _initialize_db(self) -> None:
        """Initialize database with WAL mode and schema.

        Raises:
            StorageError: If database connection or schema creation fails
        """
        context = ErrorContext(
            operation="initialize_db",
            additional_data={"db_path": str(self.db_path)},
        )

        try:
            in_memory = str(self.db_path) == ":memory:"
            if not in_memory:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self.conn = sqlite3.connect(
                str(self.db_path),
                check_same_thread=False,  # Guarded by self._lock
                isolation_level=None,  # Auto-commit mode
            )

            if not in_memory:
                self.conn.execute("PRAGMA journal_mode=WAL")
                self.conn.execute("PRAGMA synchronous=NORMAL")

            migration_manager = MigrationManager(self.conn)
            migration_manager.create_tables()

            self._transactions = TransactionManager(self.conn)
            self._query_ops = QueryOperations(self.conn)
            self._insert_ops = InsertOperations(self.conn)
            self._delete_ops = DeleteOperations(self.conn)

            log_operation_success(
                logger=logger,
                operation="initialize_db",
                duration_ms=0,
                context=context.additional_data,
            )

        except (sqlite3.Error, OSError) as e:
            error = StorageError(
                code=ErrorCode.CACHE_INIT_FAILED,
                message=ErrorMessages.CACHE_INIT_FAILED.format(reason=e),
                context=context,
                original_error=e,
            )
            log_operation_error(
                logger=logger,
                error=error,
                operation="initialize_db",
            )
            raise error from e

    @contextmanager
    def _guard(
        self,
        operation: str,
        code: ErrorCode,
        template: str,
    ) -> Generator[None, None, None]:
        """Serialize one call on the connection and wrap SQLite failures."""
        with self._lock:
            if self.conn is None:
                raise StorageError(
                    code=code,
                    message=template.format(reason="database connection is closed"),
                    context=ErrorContext(operation=operation),
                )
            try:
                yield
            except sqlite3.Error as e:
                raise StorageError(
                    code=code,
                    message=template.format(reason=e),
                    context=ErrorContext(
                        operation=operation,
                        additional_data={"db_path": str(self.db_path)},
                    ),
                    original_error=e,
                ) from e

    def _reading(self, operation: str) -> AbstractContextManager[None]:
        return self._guard(operation, ErrorCode.CACHE_READ_FAILED, ErrorMessages.CACHE_READ_FAILED)

    def _writing(self, operation: str) -> AbstractContextManager[None]:
        return self._guard(
            operation, ErrorCode.CACHE_WRITE_FAILED, ErrorMessages.CACHE_WRITE_FAILED
        )

    def upsert_many(self, rows: Sequence[AnimeRow]) -> None:
        """Insert or replace rows in a single transaction.

        Raises:
            StorageError: If the write fails; no row of the batch is stored
        """
        if not rows:
            return
        with self._writing("upsert_many"), self._transactions.transaction():
            self._insert_ops.upsert_many(rows)

    def upsert_one(self, row: AnimeRow) -> None:
        """Insert or replace one row.

        Raises:
            StorageError: If the write fails
        """
        with self._writing("upsert_one"):
            self._insert_ops.upsert_one(row)

    def select_by_page_range(self, max_page: int) -> list[AnimeRow]:
        """Rows cached under pages ``1..max_page`` ordered by (page, rank).

        Raises:
            StorageError: If the read fails
        """
        with self._reading("select_by_page_range"):
            return self._query_ops.select_by_page_range(max_page)

    def select_max_page(self) -> int | None:
        """Highest cached page, or None for an empty cache.

        Raises:
            StorageError: If the read fails
        """
        with self._reading("select_max_page"):
            return self._query_ops.select_max_page()

    def select_by_id(self, anime_id: int) -> AnimeRow | None:
        """Cached row for ``anime_id``, or None.

        Raises:
            StorageError: If the read fails
        """
        with self._reading("select_by_id"):
            return self._query_ops.select_by_id(anime_id)

    def clear_all(self) -> int:
        """Delete every cached row.

        Returns:
            Number of deleted rows

        Raises:
            StorageError: If the delete fails
        """
        with self._writing("clear_all"):
            return self._delete_ops.clear_all()

    def get_cache_info(self) -> dict[str, Any]:
        """Get cache statistics and metadata.

        Returns:
            Dictionary with cache information:
            - db_path: Path to the database file
            - total_entries: Number of cached anime
            - max_page: Highest cached page (None when empty)
            - pages: Row count per page
            - size_bytes: Database file size (0 for in-memory databases)

        Raises:
            StorageError: If the read fails
        """
        with self._reading("get_cache_info"):
            total = self._query_ops.count()
            max_page = self._query_ops.select_max_page()
            pages = self._query_ops.page_counts()

        size_bytes = self.db_path.stat().st_size if self.db_path.is_file() else 0

        return {
            "db_path": str(self.db_path),
            "total_entries": total,
            "max_page": max_page,
            "pages": pages,
            "size_bytes": size_bytes,
        }

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self.conn:
                self.conn.close()
                self.conn = None
                logger.debug("Closed SQLite cache connection: %s", self.db_path)
