"""Tests for AnimeListSession pagination accumulation."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from unittest.mock import AsyncMock, call

import pytest
from pytest_mock import MockerFixture

from anifeed.domain.models import Anime, PaginatedResult
from anifeed.services.connectivity import ManualConnectivityOracle
from anifeed.services.pagination import AnimeListSession, ListSnapshot, ListState
from anifeed.shared.constants import ErrorMessages
from anifeed.shared.errors import ErrorCode, NetworkError, create_no_data_error
from anifeed.shared.result import Failure, Success


def _page(ids: list[int], page: int, has_next: bool = True, tag: str = "") -> Success:
    items = tuple(Anime(id=i, title=f"Anime {i}{tag}") for i in ids)
    return Success(PaginatedResult(items=items, current_page=page, has_next_page=has_next))


def _failure(message: str = "Could not reach api.jikan.moe") -> Failure:
    return Failure(NetworkError(ErrorCode.NETWORK_ERROR, message))


async def _wait_until(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    async def poll() -> None:
        while not predicate():
            await asyncio.sleep(0)

    await asyncio.wait_for(poll(), timeout)


@pytest.fixture
def repository() -> AsyncMock:
    repository = AsyncMock()
    pages = {
        1: _page([1, 2, 3], 1),
        2: _page([3, 4, 5], 2, tag=" (page 2)"),
        3: _page([6], 3, has_next=False),
    }
    repository.fetch_list_page.side_effect = lambda page, force_refresh=False: pages[page]
    return repository


class TestRefresh:
    """Main load."""

    @pytest.mark.asyncio
    async def test_refresh_success(self, repository: AsyncMock) -> None:
        # Given
        session = AnimeListSession(repository)

        # When
        await session.refresh()

        # Then
        snapshot = session.snapshot
        assert snapshot.state is ListState.READY
        assert [anime.id for anime in snapshot.items] == [1, 2, 3]
        assert snapshot.current_page == 1
        assert snapshot.has_next_page is True
        repository.fetch_list_page.assert_awaited_once_with(1, force_refresh=False)

    @pytest.mark.asyncio
    async def test_refresh_failure(self, repository: AsyncMock) -> None:
        repository.fetch_list_page.side_effect = None
        repository.fetch_list_page.return_value = Failure(
            create_no_data_error(ErrorMessages.NO_DATA_LIST)
        )
        session = AnimeListSession(repository)

        await session.refresh()

        assert session.snapshot.state is ListState.ERROR
        assert session.snapshot.error_message == ErrorMessages.NO_DATA_LIST
        assert session.snapshot.items == ()

    @pytest.mark.asyncio
    async def test_refresh_failure_without_message(self, repository: AsyncMock) -> None:
        repository.fetch_list_page.side_effect = None
        repository.fetch_list_page.return_value = _failure(message="")
        session = AnimeListSession(repository)

        await session.refresh()

        assert session.snapshot.error_message == ErrorMessages.UNKNOWN_LIST_ERROR

    @pytest.mark.asyncio
    async def test_refresh_resets_accumulated_state(self, repository: AsyncMock) -> None:
        # Given: two pages loaded
        session = AnimeListSession(repository)
        await session.refresh()
        await session.load_next_page()

        # When
        await session.refresh(force_refresh=True)

        # Then
        assert [anime.id for anime in session.snapshot.items] == [1, 2, 3]
        assert session.snapshot.current_page == 1
        assert repository.fetch_list_page.await_args == call(1, force_refresh=True)


class TestLoadNextPage:
    """Load more."""

    @pytest.mark.asyncio
    async def test_deduplicates_first_occurrence_wins(self, repository: AsyncMock) -> None:
        # Given
        session = AnimeListSession(repository)
        await session.refresh()

        # When
        await session.load_next_page()

        # Then
        items = session.snapshot.items
        assert [anime.id for anime in items] == [1, 2, 3, 4, 5]
        assert items[2].title == "Anime 3"
        assert session.snapshot.current_page == 2
        assert session.snapshot.is_loading_more is False

    @pytest.mark.asyncio
    async def test_noop_without_next_page(self, repository: AsyncMock) -> None:
        # Given: all three pages loaded
        session = AnimeListSession(repository)
        await session.refresh()
        await session.load_next_page()
        await session.load_next_page()
        assert session.snapshot.has_next_page is False

        # When
        task = session.load_next_page()

        # Then
        assert task is None
        assert repository.fetch_list_page.await_count == 3

    @pytest.mark.asyncio
    async def test_noop_while_loading_more(self, repository: AsyncMock) -> None:
        # Given
        session = AnimeListSession(repository)
        await session.refresh()

        # When
        first = session.load_next_page()
        second = session.load_next_page()

        # Then
        assert first is not None
        assert second is None
        assert session.snapshot.is_loading_more is True
        await first
        assert repository.fetch_list_page.await_count == 2

    @pytest.mark.asyncio
    async def test_noop_while_first_page_loading(self, repository: AsyncMock) -> None:
        # Given: page 1 held until released
        pages = repository.fetch_list_page.side_effect
        release = asyncio.Event()

        async def held_first_page(page: int, force_refresh: bool = False):
            if page == 1:
                await release.wait()
            return pages(page, force_refresh)

        repository.fetch_list_page.side_effect = held_first_page
        session = AnimeListSession(repository)
        refresh = session.refresh()
        await asyncio.sleep(0)

        # When
        task = session.load_next_page()
        release.set()
        await refresh

        # Then: page 1 comes first and the cursor stays on it
        assert task is None
        assert session.snapshot.state is ListState.READY
        assert [anime.id for anime in session.snapshot.items] == [1, 2, 3]
        assert session.snapshot.current_page == 1
        assert session.snapshot.is_loading_more is False
        repository.fetch_list_page.assert_awaited_once_with(1, force_refresh=False)

    @pytest.mark.asyncio
    async def test_noop_after_main_load_failed(self, repository: AsyncMock) -> None:
        # Given
        pages = repository.fetch_list_page.side_effect
        repository.fetch_list_page.side_effect = (
            lambda page, force_refresh=False: _failure() if page == 1 else pages(page)
        )
        session = AnimeListSession(repository)
        await session.refresh()
        assert session.snapshot.state is ListState.ERROR

        # When
        task = session.load_next_page()

        # Then
        assert task is None
        assert session.snapshot.items == ()
        assert session.snapshot.current_page == 1
        assert repository.fetch_list_page.await_count == 1

    @pytest.mark.asyncio
    async def test_pagination_failure_keeps_items(self, repository: AsyncMock) -> None:
        # Given
        session = AnimeListSession(repository)
        await session.refresh()
        repository.fetch_list_page.side_effect = lambda page, force_refresh=False: _failure()

        # When
        await session.load_next_page()

        # Then
        snapshot = session.snapshot
        assert snapshot.state is ListState.READY
        assert snapshot.pagination_failed is True
        assert snapshot.is_loading_more is False
        assert snapshot.current_page == 1
        assert [anime.id for anime in snapshot.items] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_retry_next_page(self, repository: AsyncMock) -> None:
        # Given: page 2 failed once
        session = AnimeListSession(repository)
        await session.refresh()
        pages = repository.fetch_list_page.side_effect
        repository.fetch_list_page.side_effect = lambda page, force_refresh=False: _failure()
        await session.load_next_page()
        repository.fetch_list_page.side_effect = pages

        # When
        task = session.retry_next_page()

        # Then
        assert session.snapshot.pagination_failed is False
        assert task is not None
        await task
        assert session.snapshot.current_page == 2
        assert repository.fetch_list_page.await_args == call(2)

    @pytest.mark.asyncio
    async def test_offline_fallback_page_adopts_cached_cursor(self, repository: AsyncMock) -> None:
        """A cache-served page repeats earlier items and reports no next page."""
        # Given
        session = AnimeListSession(repository)
        await session.refresh()
        repository.fetch_list_page.side_effect = lambda page, force_refresh=False: _page(
            [1, 2, 3, 4], 4, has_next=False
        )

        # When
        await session.load_next_page()

        # Then
        assert [anime.id for anime in session.snapshot.items] == [1, 2, 3, 4]
        assert session.snapshot.current_page == 4
        assert session.snapshot.has_next_page is False


class TestCancellationAndStaleness:
    """Superseded work never lands."""

    @pytest.mark.asyncio
    async def test_stale_refresh_result_discarded(self) -> None:
        # Given: a repository that ignores cancellation of the first call
        gate = asyncio.Event()
        calls = 0

        async def fetch(page: int, force_refresh: bool = False):
            nonlocal calls
            calls += 1
            if calls == 1:
                try:
                    await gate.wait()
                except asyncio.CancelledError:
                    pass
                return _page([100], 1, tag=" stale")
            return _page([1, 2], 1)

        repository = AsyncMock()
        repository.fetch_list_page.side_effect = fetch
        session = AnimeListSession(repository)
        first = session.refresh()
        await asyncio.sleep(0)

        # When
        second = session.refresh()
        await asyncio.gather(first, second, return_exceptions=True)

        # Then
        assert [anime.id for anime in session.snapshot.items] == [1, 2]

    @pytest.mark.asyncio
    async def test_refresh_cancels_pending_next_page(self, repository: AsyncMock) -> None:
        # Given: page 2 hangs
        session = AnimeListSession(repository)
        await session.refresh()
        pages = repository.fetch_list_page.side_effect
        hang = asyncio.Event()

        async def hanging(page: int, force_refresh: bool = False):
            if page == 2:
                await hang.wait()
            return pages(page, force_refresh)

        repository.fetch_list_page.side_effect = hanging
        next_page = session.load_next_page()
        assert next_page is not None
        await asyncio.sleep(0)

        # When
        await session.refresh()

        # Then
        assert next_page.cancelled() or next_page.done()
        assert session.snapshot.is_loading_more is False
        assert [anime.id for anime in session.snapshot.items] == [1, 2, 3]
        assert session.load_next_page() is not None
        await session.close()

    @pytest.mark.asyncio
    async def test_close_cancels_tasks(self) -> None:
        async def never_returns(page: int, force_refresh: bool = False):
            await asyncio.sleep(10)

        repository = AsyncMock()
        repository.fetch_list_page.side_effect = never_returns
        session = AnimeListSession(repository)
        task = session.refresh()
        await asyncio.sleep(0)

        await session.close()

        assert task.cancelled()


class TestConnectivityObservation:
    """Auto-refresh on reconnect applies to the main error state only."""

    @pytest.mark.asyncio
    async def test_reconnect_after_main_error_force_refreshes(self, repository: AsyncMock) -> None:
        # Given: offline, first load fails
        pages = repository.fetch_list_page.side_effect
        repository.fetch_list_page.side_effect = lambda page, force_refresh=False: _failure()
        oracle = ManualConnectivityOracle(available=False)
        session = AnimeListSession(repository, oracle)
        await session.start()
        await _wait_until(lambda: session.snapshot.is_offline)
        assert session.snapshot.state is ListState.ERROR

        # When
        repository.fetch_list_page.side_effect = pages
        oracle.set_available(True)
        await _wait_until(lambda: session.snapshot.state is ListState.READY)

        # Then
        assert session.snapshot.is_offline is False
        assert repository.fetch_list_page.await_args == call(1, force_refresh=True)
        await session.close()

    @pytest.mark.asyncio
    async def test_pagination_failure_not_retried_on_reconnect(
        self, repository: AsyncMock
    ) -> None:
        # Given: page 1 loaded, page 2 failed
        oracle = ManualConnectivityOracle(available=True)
        session = AnimeListSession(repository, oracle)
        await session.start()
        repository.fetch_list_page.side_effect = lambda page, force_refresh=False: _failure()
        await session.load_next_page()
        assert session.snapshot.pagination_failed is True
        calls_before = repository.fetch_list_page.await_count

        # When
        oracle.set_available(False)
        await _wait_until(lambda: session.snapshot.is_offline)
        oracle.set_available(True)
        await _wait_until(lambda: not session.snapshot.is_offline)
        await asyncio.sleep(0)

        # Then
        assert repository.fetch_list_page.await_count == calls_before
        assert session.snapshot.pagination_failed is True
        await session.close()


class TestSubscribers:
    """Snapshots are pushed to subscribers."""

    @pytest.mark.asyncio
    async def test_subscriber_sees_loading_then_ready(self, repository: AsyncMock) -> None:
        # Given
        session = AnimeListSession(repository)
        seen: list[ListSnapshot] = []
        unsubscribe = session.subscribe(seen.append)

        # When
        await session.refresh()
        unsubscribe()
        await session.refresh()

        # Then
        assert [snapshot.state for snapshot in seen] == [
            ListState.LOADING,
            ListState.LOADING,
            ListState.READY,
        ]
        assert seen[-1].items[0].id == 1


class BrokenOracle:
    """Oracle whose change stream fails after the first emission."""

    def is_available(self) -> bool:
        return True

    async def observe_changes(self):
        yield True
        raise ConnectionError("network monitor stopped")


class TestTaskFailures:
    """Background task failures are reported."""

    @pytest.mark.asyncio
    async def test_observer_failure_is_logged(
        self, repository: AsyncMock, mocker: MockerFixture
    ) -> None:
        # Given
        session_logger = mocker.patch("anifeed.services.session.logger")
        session = AnimeListSession(repository, BrokenOracle())

        # When
        await session.start()
        await _wait_until(lambda: session_logger.error.called)

        # Then
        args = session_logger.error.call_args.args
        assert args[1:] == ("AnimeListSession", "observe_connectivity")
        exc_info = session_logger.error.call_args.kwargs["exc_info"]
        assert isinstance(exc_info[1], ConnectionError)
        assert session.snapshot.state is ListState.READY
        await session.close()
