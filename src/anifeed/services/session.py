"""Shared plumbing for stateful sessions.

A session owns asyncio tasks and a list of subscribers that receive an
immutable snapshot after every state change.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

SnapshotT = TypeVar("SnapshotT")


class StatefulSession(Generic[SnapshotT]):
    """Base class handling subscribers and owned tasks."""

    def __init__(self) -> None:
        self._subscribers: list[Callable[[SnapshotT], None]] = []
        self._tasks: set[asyncio.Task[Any]] = set()
        self._generation = 0

    @property
    def snapshot(self) -> SnapshotT:
        raise NotImplementedError

    def subscribe(self, callback: Callable[[SnapshotT], None]) -> Callable[[], None]:
        """Register ``callback`` and return a function that unregisters it.

        The callback receives the current snapshot immediately.
        """
        self._subscribers.append(callback)
        callback(self.snapshot)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot
        for callback in list(self._subscribers):
            callback(snapshot)

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation

    def _spawn(self, coro: Coroutine[Any, Any, None], name: str) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                "%s task %r failed",
                type(self).__name__,
                task.get_name(),
                exc_info=(type(error), error, error.__traceback__),
            )

    @staticmethod
    def _cancel(task: asyncio.Task[Any] | None) -> None:
        if task is not None and not task.done():
            task.cancel()

    async def close(self) -> None:
        """Cancel every task owned by the session and wait for them to finish."""
        tasks = [task for task in self._tasks if not task.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.debug("%s closed (%d tasks cancelled)", type(self).__name__, len(tasks))
