"""Network-first anime repository with SQLite fallback.

``AnimeRepository`` is the single source of anime data for the rest of the
application. Each call tries the Jikan API when the connectivity oracle
reports the network as available, writes successful responses back to the
cache, and falls back to cached rows when offline or when the remote call
fails. Results are returned as ``Success``/``Failure``; no network, decode
or storage exception escapes.

List-page calls and detail calls are serialized by two independent locks
so rapid pagination never interleaves cache writes, while a detail lookup
never waits behind a list fetch.
"""

from __future__ import annotations

import asyncio
import logging
import time

from anifeed.domain.models import Anime, PaginatedResult
from anifeed.services.mappers import record_to_domain, record_to_row, row_to_domain
from anifeed.shared.constants import APIConfig, CacheConfig, ErrorMessages
from anifeed.shared.errors import AniFeedError, create_no_data_error, wrap_unexpected_error
from anifeed.shared.logging import (
    log_operation_error,
    log_operation_start,
    log_operation_success,
)
from anifeed.shared.protocols import (
    CacheStoreProtocol,
    ConnectivityOracleProtocol,
    RemoteSourceProtocol,
)
from anifeed.shared.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class AnimeRepository:
    """Resolves top-list pages and anime details from network or cache.

    Attributes:
        page_limit: Items requested per top-list page
    """

    def __init__(
        self,
        remote: RemoteSourceProtocol,
        cache: CacheStoreProtocol,
        connectivity: ConnectivityOracleProtocol,
        page_limit: int = APIConfig.DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize the repository.

        Args:
            remote: Remote anime source (Jikan client)
            cache: Persistent cache store
            connectivity: Reachability oracle consulted before each call
            page_limit: Items requested per top-list page
        """
        self._remote = remote
        self._cache = cache
        self._connectivity = connectivity
        self.page_limit = page_limit
        self._list_lock = asyncio.Lock()
        self._detail_lock = asyncio.Lock()

    async def fetch_list_page(
        self,
        page: int = CacheConfig.DEFAULT_PAGE,
        force_refresh: bool = False,
    ) -> Result[PaginatedResult]:
        """Resolve one page of the top anime list.

        Online, the page is fetched, written to the cache under ``page`` and
        returned with the server's ``has_next_page``. A forced refresh of
        page 1 clears the whole cache before that write. Offline or on any
        remote failure, every cached row up to ``page`` is returned with
        ``current_page`` set to the highest cached page and
        ``has_next_page=False``.

        Args:
            page: 1-based page number
            force_refresh: Discard the cache when refreshing page 1

        Returns:
            ``Success(PaginatedResult)`` or ``Failure`` carrying the remote
            error, or ``NoDataAvailableError`` when nothing is cached
        """
        operation = "fetch_list_page"
        async with self._list_lock:
            log_operation_start(logger, operation, {"page": page, "force_refresh": force_refresh})
            start_time = time.perf_counter()
            try:
                result = await self._load_list_page(page, force_refresh)
            except Exception as e:  # noqa: BLE001
                error = wrap_unexpected_error(e, operation)
                log_operation_error(logger, error, operation, {"page": page})
                return Failure(error)

            log_operation_success(
                logger,
                operation,
                (time.perf_counter() - start_time) * 1000,
                result_info={
                    "items": len(result.items),
                    "current_page": result.current_page,
                    "has_next_page": result.has_next_page,
                },
            )
            return Success(result)

    async def fetch_detail(self, anime_id: int) -> Result[Anime]:
        """Resolve a single anime by MyAnimeList id.

        Online, the record is fetched and written back under the page its
        cached row already has (page 1 when it was never listed). Offline or
        on remote failure the cached row is used.

        Returns:
            ``Success(Anime)`` or ``Failure`` carrying the remote error, or
            ``NoDataAvailableError`` on a cache miss
        """
        operation = "fetch_detail"
        async with self._detail_lock:
            log_operation_start(logger, operation, {"anime_id": anime_id})
            start_time = time.perf_counter()
            try:
                anime = await self._load_detail(anime_id)
            except Exception as e:  # noqa: BLE001
                error = wrap_unexpected_error(e, operation)
                log_operation_error(logger, error, operation, {"anime_id": anime_id})
                return Failure(error)

            log_operation_success(
                logger,
                operation,
                (time.perf_counter() - start_time) * 1000,
                result_info={"anime_id": anime_id},
            )
            return Success(anime)

    async def _is_online(self) -> bool:
        return await asyncio.to_thread(self._connectivity.is_available)

    async def _load_list_page(self, page: int, force_refresh: bool) -> PaginatedResult:
        remote_error: AniFeedError | None = None
        if await self._is_online():
            try:
                return await self._fetch_remote_page(page, force_refresh)
            except Exception as e:  # noqa: BLE001
                remote_error = wrap_unexpected_error(e, "fetch_list_page")
                log_operation_error(
                    logger,
                    remote_error,
                    "fetch_list_page",
                    {"page": page, "fallback": "cache"},
                    level=logging.WARNING,
                )
        return await self._load_cached_page(page, remote_error)

    async def _fetch_remote_page(self, page: int, force_refresh: bool) -> PaginatedResult:
        response = await self._remote.fetch_list_page(page, self.page_limit)
        rows = [record_to_row(record, page) for record in response.items]

        if force_refresh and page == CacheConfig.DEFAULT_PAGE:
            cleared = await asyncio.to_thread(self._cache.clear_all)
            logger.info("Force refresh cleared %d cached anime", cleared)
        await asyncio.to_thread(self._cache.upsert_many, rows)

        return PaginatedResult(
            items=tuple(record_to_domain(record) for record in response.items),
            current_page=page,
            has_next_page=response.has_next_page,
        )

    async def _load_cached_page(
        self,
        page: int,
        remote_error: AniFeedError | None,
    ) -> PaginatedResult:
        rows = await asyncio.to_thread(self._cache.select_by_page_range, page)
        if not rows:
            raise remote_error or create_no_data_error(
                ErrorMessages.NO_DATA_LIST, operation="fetch_list_page"
            )

        max_page = await asyncio.to_thread(self._cache.select_max_page)
        logger.info("Serving %d cached anime up to page %d", len(rows), page)
        return PaginatedResult(
            items=tuple(row_to_domain(row) for row in rows),
            current_page=max_page or page,
            has_next_page=False,
        )

    async def _load_detail(self, anime_id: int) -> Anime:
        remote_error: AniFeedError | None = None
        if await self._is_online():
            try:
                record = await self._remote.fetch_detail(anime_id)
                existing = await asyncio.to_thread(self._cache.select_by_id, anime_id)
                page = existing.page if existing is not None else CacheConfig.DEFAULT_PAGE
                await asyncio.to_thread(self._cache.upsert_one, record_to_row(record, page))
                return record_to_domain(record)
            except Exception as e:  # noqa: BLE001
                remote_error = wrap_unexpected_error(e, "fetch_detail")
                log_operation_error(
                    logger,
                    remote_error,
                    "fetch_detail",
                    {"anime_id": anime_id, "fallback": "cache"},
                    level=logging.WARNING,
                )

        row = await asyncio.to_thread(self._cache.select_by_id, anime_id)
        if row is None:
            raise remote_error or create_no_data_error(
                ErrorMessages.NO_DATA_DETAIL, operation="fetch_detail"
            )
        return row_to_domain(row)


__all__ = ["AnimeRepository"]
