"""Service protocols for dependency inversion.

The repository depends only on these interfaces; concrete implementations
(aiohttp client, SQLite store, socket check) are injected by the container.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from typing import Protocol

from anifeed.domain.models import AnimeRow
from anifeed.shared.models.jikan import AnimePageRecord, AnimeRecord


class RemoteSourceProtocol(Protocol):
    """Remote anime source.

    Implementations raise ``NetworkError`` on transport failures and
    ``DecodeError`` on malformed payloads.
    """

    async def fetch_list_page(self, page: int, limit: int) -> AnimePageRecord:
        """Fetch one page of the top anime list."""

    async def fetch_detail(self, anime_id: int) -> AnimeRecord:
        """Fetch a single anime by MyAnimeList id."""


class CacheStoreProtocol(Protocol):
    """Persistent anime cache.

    Methods are synchronous; the repository moves them off the event loop.
    Implementations raise ``StorageError`` on I/O failure.
    """

    def upsert_many(self, rows: Sequence[AnimeRow]) -> None:
        """Insert or replace rows by ``mal_id`` atomically."""

    def upsert_one(self, row: AnimeRow) -> None:
        """Insert or replace one row by ``mal_id``."""

    def select_by_page_range(self, max_page: int) -> list[AnimeRow]:
        """Rows with ``page <= max_page`` ordered by (page, rank)."""

    def select_max_page(self) -> int | None:
        """Highest cached page, or None when the cache is empty."""

    def select_by_id(self, anime_id: int) -> AnimeRow | None:
        """Row for ``anime_id``, or None."""

    def clear_all(self) -> int:
        """Delete every row and return the number deleted."""


class ConnectivityOracleProtocol(Protocol):
    """Network reachability source."""

    def is_available(self) -> bool:
        """Instant, side-effect-free reachability check."""

    def observe_changes(self) -> AsyncIterator[bool]:
        """Infinite stream of states; current state first, no consecutive repeats."""
