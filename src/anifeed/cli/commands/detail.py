"""``anifeed detail``: show one anime."""

from __future__ import annotations

import asyncio

import typer

from anifeed.cli.common.error_handler import EXIT_FAILURE, handle_cli_error
from anifeed.cli.common.output import (
    anime_to_dict,
    format_json_output,
    get_console,
    print_json,
    render_anime_detail,
)
from anifeed.cli.common.setup import create_container
from anifeed.containers import Container
from anifeed.services.detail import DetailSnapshot, DetailState
from anifeed.shared.constants import ErrorMessages


async def load_detail(container: Container, anime_id: int) -> DetailSnapshot:
    session = container.detail_session()
    try:
        await session.load(anime_id)
        return session.snapshot
    finally:
        await session.close()
        await container.jikan_client().close()


def detail_command(anime_id: int, offline: bool, json_output: bool) -> None:
    """Fetch and print a single anime."""
    try:
        container = create_container(offline=offline)
        try:
            snapshot = asyncio.run(load_detail(container, anime_id))
        finally:
            container.cache_db().close()
    except Exception as e:  # noqa: BLE001
        raise typer.Exit(handle_cli_error(e, "detail", json_output=json_output)) from e

    if snapshot.state is not DetailState.READY or snapshot.anime is None:
        message = snapshot.error_message or ErrorMessages.DETAIL_LOAD_FAILED
        if json_output:
            print_json(format_json_output(False, "detail", errors=[message]))
        else:
            get_console().print(f"[red]Error:[/red] {message}")
        raise typer.Exit(EXIT_FAILURE)

    if json_output:
        print_json(format_json_output(True, "detail", data=anime_to_dict(snapshot.anime)))
    else:
        get_console().print(render_anime_detail(snapshot.anime))
