"""Incremental top-list pagination.

``AnimeListSession`` accumulates pages of the top anime list across fetch
cycles. It keeps the main load ("is there a list at all?") separate from
"load more" failures, so a failed page 2 never hides the items already
shown, and it drops items a later page repeats.

Example:
    >>> session = AnimeListSession(repository, oracle)
    >>> await session.start()
    >>> await session.load_next_page()
    >>> session.snapshot.items
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from anifeed.domain.models import Anime
from anifeed.services.repository import AnimeRepository
from anifeed.services.session import StatefulSession
from anifeed.shared.constants import CacheConfig, ErrorMessages
from anifeed.shared.protocols import ConnectivityOracleProtocol
from anifeed.shared.result import Success

logger = logging.getLogger(__name__)


class ListState(str, Enum):
    """Main list load state."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class ListSnapshot:
    """Immutable view of an ``AnimeListSession``.

    Attributes:
        state: Main load state
        items: Accumulated items, unique by id, in arrival order
        error_message: Message of the failed main load (ERROR only)
        is_offline: Last connectivity emission was "down"
        current_page: Last page merged into ``items``
        has_next_page: Whether ``load_next_page`` can fetch more
        is_loading_more: A next-page fetch is in flight
        pagination_failed: The last next-page fetch failed
    """

    state: ListState
    items: tuple[Anime, ...]
    error_message: str | None
    is_offline: bool
    current_page: int
    has_next_page: bool
    is_loading_more: bool
    pagination_failed: bool


class AnimeListSession(StatefulSession[ListSnapshot]):
    """Pagination accumulator over ``AnimeRepository.fetch_list_page``."""

    def __init__(
        self,
        repository: AnimeRepository,
        connectivity: ConnectivityOracleProtocol | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            repository: Source of list pages
            connectivity: Optional oracle; when given, ``start()`` observes it
                and reloads automatically after an error once it reports
                the network as back
        """
        super().__init__()
        self._repository = repository
        self._connectivity = connectivity

        self._state = ListState.LOADING
        self._items: list[Anime] = []
        self._item_ids: set[int] = set()
        self._error_message: str | None = None
        self._is_offline = False
        self._current_page = CacheConfig.DEFAULT_PAGE
        self._has_next_page = True
        self._is_loading_more = False
        self._pagination_failed = False

        self._fetch_task: asyncio.Task[None] | None = None
        self._pagination_task: asyncio.Task[None] | None = None
        self._observer_task: asyncio.Task[None] | None = None

    @property
    def snapshot(self) -> ListSnapshot:
        return ListSnapshot(
            state=self._state,
            items=tuple(self._items),
            error_message=self._error_message,
            is_offline=self._is_offline,
            current_page=self._current_page,
            has_next_page=self._has_next_page,
            is_loading_more=self._is_loading_more,
            pagination_failed=self._pagination_failed,
        )

    def start(self) -> asyncio.Task[None]:
        """Load the first page and begin observing connectivity.

        Returns:
            The first-page task
        """
        task = self.refresh(force_refresh=False)
        if self._connectivity is not None and self._observer_task is None:
            self._observer_task = self._spawn(self._observe_connectivity(), "observe_connectivity")
        return task

    def refresh(self, force_refresh: bool = False) -> asyncio.Task[None]:
        """Drop all accumulated state and reload page 1.

        Any in-flight main or next-page fetch is cancelled; a result that
        still arrives from it is discarded.

        Args:
            force_refresh: Ask the repository to clear the cache first

        Returns:
            The scheduled page-1 task
        """
        self._cancel(self._fetch_task)
        self._cancel(self._pagination_task)
        generation = self._next_generation()

        self._current_page = CacheConfig.DEFAULT_PAGE
        self._has_next_page = True
        self._items = []
        self._item_ids = set()
        self._is_loading_more = False
        self._pagination_failed = False
        self._error_message = None
        self._state = ListState.LOADING
        self._notify()

        self._fetch_task = self._spawn(self._run_refresh(generation, force_refresh), "list_refresh")
        return self._fetch_task

    def load_next_page(self) -> asyncio.Task[None] | None:
        """Fetch the page after ``current_page`` and merge it.

        Only a READY list grows; while page 1 is loading or after it failed
        this is a no-op.

        Returns:
            The scheduled task, or None when the list is not READY, there is
            no next page or a next-page fetch is already running
        """
        if self._state is not ListState.READY:
            return None
        if not self._has_next_page or self._is_loading_more:
            return None

        next_page = self._current_page + 1
        self._pagination_failed = False
        self._is_loading_more = True
        self._notify()

        self._pagination_task = self._spawn(
            self._run_next_page(self._generation, next_page), "list_next_page"
        )
        return self._pagination_task

    def retry_next_page(self) -> asyncio.Task[None] | None:
        """Clear the pagination failure and load the next page again."""
        self._pagination_failed = False
        return self.load_next_page()

    async def _run_refresh(self, generation: int, force_refresh: bool) -> None:
        result = await self._repository.fetch_list_page(
            CacheConfig.DEFAULT_PAGE, force_refresh=force_refresh
        )
        if self._is_stale(generation):
            logger.debug("Discarding stale page-1 result")
            return

        if isinstance(result, Success):
            self._merge(result.value.items)
            self._current_page = result.value.current_page
            self._has_next_page = result.value.has_next_page
            self._state = ListState.READY
        else:
            self._error_message = result.message or ErrorMessages.UNKNOWN_LIST_ERROR
            self._state = ListState.ERROR
        self._notify()

    async def _run_next_page(self, generation: int, page: int) -> None:
        result = await self._repository.fetch_list_page(page)
        if self._is_stale(generation):
            logger.debug("Discarding stale result for page %d", page)
            return

        if isinstance(result, Success):
            added = self._merge(result.value.items)
            self._current_page = result.value.current_page
            self._has_next_page = result.value.has_next_page
            logger.debug("Page %d merged: %d new items", page, added)
        else:
            self._pagination_failed = True
            logger.info("Loading page %d failed: %s", page, result.message)
        self._is_loading_more = False
        self._notify()

    def _merge(self, items: tuple[Anime, ...]) -> int:
        """Append items whose id is not present yet; return how many were added."""
        added = 0
        for anime in items:
            if anime.id in self._item_ids:
                continue
            self._item_ids.add(anime.id)
            self._items.append(anime)
            added += 1
        return added

    async def _observe_connectivity(self) -> None:
        if self._connectivity is None:
            return
        async for connected in self._connectivity.observe_changes():
            self._is_offline = not connected
            self._notify()
            # Only the main error state recovers automatically
            if connected and self._state is ListState.ERROR:
                logger.info("Connectivity restored, reloading list")
                self.refresh(force_refresh=True)


__all__ = ["AnimeListSession", "ListSnapshot", "ListState"]
