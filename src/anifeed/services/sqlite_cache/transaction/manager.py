"""Transaction manager for the SQLite anime cache."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import sqlite3

logger = logging.getLogger(__name__)


class TransactionManager:
    """Explicit BEGIN/COMMIT/ROLLBACK on an autocommit connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def begin(self) -> None:
        self.conn.execute("BEGIN")

    def commit(self) -> None:
        self.conn.execute("COMMIT")

    def rollback(self) -> None:
        self.conn.execute("ROLLBACK")

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """Context manager for transactions.

        Automatically commits on success or rolls back on exception.

        Example:
            >>> with transaction_manager.transaction():
            ...     insert_ops.upsert_one(row1)
            ...     insert_ops.upsert_one(row2)
        """
        self.begin()
        try:
            yield
            self.commit()
        except Exception:
            self.rollback()
            logger.debug("Transaction rolled back")
            raise
