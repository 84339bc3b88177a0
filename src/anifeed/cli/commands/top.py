"""``anifeed top``: page through the top anime list."""

from __future__ import annotations

import asyncio
import logging

import typer

from anifeed.cli.common.error_handler import EXIT_FAILURE, handle_cli_error
from anifeed.cli.common.output import (
    anime_to_dict,
    format_json_output,
    get_console,
    print_json,
    render_anime_table,
)
from anifeed.cli.common.setup import create_container
from anifeed.containers import Container
from anifeed.services.pagination import ListSnapshot, ListState
from anifeed.shared.constants import ErrorMessages

logger = logging.getLogger(__name__)

PAGINATION_WARNING = "Loading more pages failed; showing what was loaded"


async def collect_pages(container: Container, pages: int, force_refresh: bool) -> ListSnapshot:
    """Drive a list session through up to ``pages`` pages.

    Stops early when the list has no next page, the main load failed or a
    next-page fetch failed.
    """
    session = container.list_session()
    try:
        await session.refresh(force_refresh=force_refresh)
        for _ in range(pages - 1):
            if session.snapshot.state is not ListState.READY:
                break
            task = session.load_next_page()
            if task is None:
                break
            await task
            if session.snapshot.pagination_failed:
                break
        return session.snapshot
    finally:
        await session.close()
        await container.jikan_client().close()


def top_command(pages: int, force_refresh: bool, offline: bool, json_output: bool) -> None:
    """Fetch and print the top anime list."""
    try:
        container = create_container(offline=offline)
        try:
            snapshot = asyncio.run(collect_pages(container, pages, force_refresh))
        finally:
            container.cache_db().close()
    except Exception as e:  # noqa: BLE001
        raise typer.Exit(handle_cli_error(e, "top", json_output=json_output)) from e

    if snapshot.state is ListState.ERROR:
        message = snapshot.error_message or ErrorMessages.UNKNOWN_LIST_ERROR
        if json_output:
            print_json(format_json_output(False, "top", errors=[message]))
        else:
            get_console().print(f"[red]Error:[/red] {message}")
        raise typer.Exit(EXIT_FAILURE)

    warnings = [PAGINATION_WARNING] if snapshot.pagination_failed else []

    if json_output:
        print_json(
            format_json_output(
                True,
                "top",
                data={
                    "current_page": snapshot.current_page,
                    "has_next_page": snapshot.has_next_page,
                    "items": [anime_to_dict(anime) for anime in snapshot.items],
                },
                warnings=warnings,
            )
        )
        return

    console = get_console()
    title = f"Top anime (pages 1-{snapshot.current_page})"
    console.print(render_anime_table(snapshot.items, title))
    for warning in warnings:
        console.print(f"[yellow]{warning}[/yellow]")
    if not snapshot.has_next_page:
        console.print("[dim]No more pages available[/dim]")
