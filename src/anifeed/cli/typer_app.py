"""
AniFeed Typer CLI Application

Command-line front end for the data layer: page through the top list,
look up single titles and manage the offline cache.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from anifeed.cli.commands.cache import cache_clear_command, cache_stats_command
from anifeed.cli.commands.detail import detail_command
from anifeed.cli.commands.top import top_command
from anifeed.cli.common.context import CliContext, LogLevel, set_cli_context
from anifeed.cli.common.options import (
    config_option,
    json_output_option,
    log_level_option,
    offline_option,
)
from anifeed.shared.constants import Application

app = typer.Typer(
    name="anifeed",
    help=Application.DESCRIPTION,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

cache_app = typer.Typer(help="Inspect or clear the offline cache.", no_args_is_help=True)
app.add_typer(cache_app, name="cache")


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(f"{Application.NAME} {Application.VERSION}")
        raise typer.Exit


# Typer inspects these annotations at runtime, so Optional stays explicit.
@app.callback()
def main(
    log_level: Annotated[Optional[LogLevel], log_level_option] = None,
    config: Annotated[Optional[Path], config_option] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version information and exit.",
            is_eager=True,
            callback=version_callback,
        ),
    ] = False,
) -> None:
    """Set the global options shared by every command."""
    set_cli_context(CliContext(log_level=log_level, config_path=config))


@app.command("top")
def top_command_typer(
    pages: Annotated[
        int,
        typer.Option("--pages", "-p", min=1, help="Number of pages to load."),
    ] = 1,
    refresh: Annotated[
        bool,
        typer.Option("--refresh", help="Discard the cache and reload from page 1."),
    ] = False,
    offline: Annotated[bool, offline_option] = False,
    json_output: Annotated[bool, json_output_option] = False,
) -> None:
    """
    Show the top anime list.

    Pages are fetched from Jikan when the network is reachable and cached;
    otherwise the cached pages are shown.

    Examples:
        # First two pages
        anifeed top --pages 2

        # Cached data only, as JSON
        anifeed top --offline --json
    """
    top_command(pages, refresh, offline, json_output)


@app.command("detail")
def detail_command_typer(
    anime_id: Annotated[int, typer.Argument(min=1, help="MyAnimeList id.")],
    offline: Annotated[bool, offline_option] = False,
    json_output: Annotated[bool, json_output_option] = False,
) -> None:
    """Show details of a single anime."""
    detail_command(anime_id, offline, json_output)


@cache_app.command("stats")
def cache_stats_typer(
    json_output: Annotated[bool, json_output_option] = False,
) -> None:
    """Show cache statistics."""
    cache_stats_command(json_output)


@cache_app.command("clear")
def cache_clear_typer(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation.")] = False,
    json_output: Annotated[bool, json_output_option] = False,
) -> None:
    """Delete every cached anime."""
    cache_clear_command(yes, json_output)


if __name__ == "__main__":
    app()
