"""Migration manager for the SQLite anime cache.

This module owns the database schema and its version tracking.
"""

from __future__ import annotations

import logging
import sqlite3

from anifeed.shared.constants import CacheConfig

logger = logging.getLogger(__name__)


class MigrationManager:
    """Database schema migration manager."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize migration manager.

        Args:
            conn: SQLite database connection
        """
        self.conn = conn
        self._current_version = self._get_current_version()

    def get_current_version(self) -> int:
        """Get current schema version."""
        return self._current_version

    def _get_current_version(self) -> int:
        cursor = self.conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
        )
        if cursor.fetchone() is None:
            return 0

        cursor = self.conn.execute("SELECT MAX(version) FROM schema_version")
        row = cursor.fetchone()
        return row[0] if row and row[0] is not None else 0

    def create_tables(self) -> None:
        """Create database schema (v1).

        One flat row per anime keyed by MyAnimeList id. ``page`` records the
        top-list page the row was fetched under; genres are a joined string.
        """
        schema_sql = f"""
        CREATE TABLE IF NOT EXISTS {CacheConfig.TABLE_NAME} (
            mal_id INTEGER PRIMARY KEY,
            title TEXT NOT NULL,
            title_english TEXT,
            title_japanese TEXT,
            episodes INTEGER,
            score REAL,
            synopsis TEXT,
            rating TEXT,
            image_url TEXT,
            large_image_url TEXT,
            trailer_embed_url TEXT,
            trailer_youtube_id TEXT,
            trailer_url TEXT,
            genres TEXT,
            type TEXT,
            status TEXT,
            airing INTEGER,
            duration TEXT,
            rank INTEGER,
            popularity INTEGER,
            season TEXT,
            year INTEGER,
            page INTEGER NOT NULL DEFAULT 1,
            last_updated INTEGER NOT NULL,

            CHECK (page >= 1)
        );

        CREATE INDEX IF NOT EXISTS idx_anime_page_rank
            ON {CacheConfig.TABLE_NAME}(page, rank);

        CREATE TABLE IF NOT EXISTS schema_version (
            version INTEGER PRIMARY KEY,
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP NOT NULL
        );
        """

        self.conn.executescript(schema_sql)
        self.conn.execute(
            "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
            (CacheConfig.SCHEMA_VERSION,),
        )
        if self._current_version != CacheConfig.SCHEMA_VERSION:
            logger.info("Created anime cache schema (v%d)", CacheConfig.SCHEMA_VERSION)
        self._current_version = CacheConfig.SCHEMA_VERSION
