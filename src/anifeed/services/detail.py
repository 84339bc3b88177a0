"""Single-anime detail loading."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from anifeed.domain.models import Anime
from anifeed.services.repository import AnimeRepository
from anifeed.services.session import StatefulSession
from anifeed.shared.constants import ErrorMessages
from anifeed.shared.result import Success

logger = logging.getLogger(__name__)


class DetailState(str, Enum):
    """Detail load state."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class DetailSnapshot:
    """Immutable view of an ``AnimeDetailSession``."""

    state: DetailState
    anime_id: int | None = None
    anime: Anime | None = None
    error_message: str | None = None


class AnimeDetailSession(StatefulSession[DetailSnapshot]):
    """Loads one anime at a time; a new load supersedes the previous one."""

    def __init__(self, repository: AnimeRepository) -> None:
        super().__init__()
        self._repository = repository
        self._state = DetailState.LOADING
        self._anime_id: int | None = None
        self._anime: Anime | None = None
        self._error_message: str | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def snapshot(self) -> DetailSnapshot:
        return DetailSnapshot(
            state=self._state,
            anime_id=self._anime_id,
            anime=self._anime,
            error_message=self._error_message,
        )

    def load(self, anime_id: int) -> asyncio.Task[None]:
        """Cancel any in-flight load and fetch ``anime_id``.

        Returns:
            The scheduled task
        """
        self._cancel(self._task)
        generation = self._next_generation()

        self._anime_id = anime_id
        self._anime = None
        self._error_message = None
        self._state = DetailState.LOADING
        self._notify()

        self._task = self._spawn(self._run_load(generation, anime_id), "detail_load")
        return self._task

    def retry(self) -> asyncio.Task[None] | None:
        """Load the last requested anime again; None if nothing was requested."""
        if self._anime_id is None:
            return None
        return self.load(self._anime_id)

    async def _run_load(self, generation: int, anime_id: int) -> None:
        result = await self._repository.fetch_detail(anime_id)
        if self._is_stale(generation):
            logger.debug("Discarding stale detail result for %d", anime_id)
            return

        if isinstance(result, Success):
            self._anime = result.value
            self._state = DetailState.READY
        else:
            self._error_message = result.message or ErrorMessages.DETAIL_LOAD_FAILED
            self._state = DetailState.ERROR
        self._notify()


__all__ = ["AnimeDetailSession", "DetailSnapshot", "DetailState"]
