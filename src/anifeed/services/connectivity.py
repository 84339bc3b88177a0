"""Connectivity oracles.

An oracle answers "is the API reachable right now?" and streams changes of
that answer. ``SocketConnectivityOracle`` checks the API host over TCP;
``ManualConnectivityOracle`` is an in-memory switch for tests and the
CLI ``--offline`` flag.
"""

from __future__ import annotations

import asyncio
import logging
import socket
import threading
import time
from collections.abc import AsyncIterator

from anifeed.shared.constants import ConnectivityConfig

logger = logging.getLogger(__name__)


class SocketConnectivityOracle:
    """Reachability from a TCP connect to the API host.

    The last check result is cached; ``is_available()`` checks again only
    once that result is older than ``poll_interval``. Every call to
    ``observe_changes()`` returns an independent polling iterator.
    """

    def __init__(
        self,
        host: str = ConnectivityConfig.CHECK_HOST,
        port: int = ConnectivityConfig.CHECK_PORT,
        timeout: float = ConnectivityConfig.CHECK_TIMEOUT,
        poll_interval: float = ConnectivityConfig.POLL_INTERVAL,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._lock = threading.Lock()
        self._last_result: bool | None = None
        self._last_check_at = 0.0

    def check(self) -> bool:
        """Open and close one TCP connection; record and return the outcome."""
        try:
            with socket.create_connection((self.host, self.port), timeout=self.timeout):
                available = True
        except OSError as e:
            logger.debug("Connectivity check to %s:%d failed: %s", self.host, self.port, e)
            available = False

        with self._lock:
            if available != self._last_result:
                logger.info("Connectivity to %s: %s", self.host, "up" if available else "down")
            self._last_result = available
            self._last_check_at = time.monotonic()
        return available

    def is_available(self) -> bool:
        with self._lock:
            fresh = (
                self._last_result is not None
                and time.monotonic() - self._last_check_at < self.poll_interval
            )
            if fresh:
                return bool(self._last_result)
        return self.check()

    async def observe_changes(self) -> AsyncIterator[bool]:
        last: bool | None = None
        while True:
            available = await asyncio.to_thread(self.check)
            if available != last:
                last = available
                yield available
            await asyncio.sleep(self.poll_interval)


class ManualConnectivityOracle:
    """In-memory connectivity switch.

    Example:
        >>> oracle = ManualConnectivityOracle(available=False)
        >>> oracle.set_available(True)  # pushed to every observer
    """

    def __init__(self, available: bool = True) -> None:
        self._available = available
        self._subscribers: set[asyncio.Queue[bool]] = set()

    def is_available(self) -> bool:
        return self._available

    def set_available(self, available: bool) -> None:
        """Switch the state and notify all observers."""
        self._available = available
        for queue in self._subscribers:
            queue.put_nowait(available)

    async def observe_changes(self) -> AsyncIterator[bool]:
        queue: asyncio.Queue[bool] = asyncio.Queue()
        queue.put_nowait(self._available)
        self._subscribers.add(queue)
        last: bool | None = None
        try:
            while True:
                available = await queue.get()
                if available != last:
                    last = available
                    yield available
        finally:
            self._subscribers.discard(queue)


__all__ = ["ManualConnectivityOracle", "SocketConnectivityOracle"]
