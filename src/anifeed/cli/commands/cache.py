"""``anifeed cache``: inspect or clear the offline cache."""

from __future__ import annotations

import logging

import typer
from rich.table import Table

from anifeed.cli.common.error_handler import handle_cli_error
from anifeed.cli.common.output import format_json_output, get_console, print_json
from anifeed.cli.common.setup import create_container

logger = logging.getLogger(__name__)


def cache_stats_command(json_output: bool) -> None:
    """Show cache statistics."""
    try:
        container = create_container()
        cache_db = container.cache_db()
        try:
            stats = cache_db.get_cache_info()
        finally:
            cache_db.close()
    except Exception as e:  # noqa: BLE001
        raise typer.Exit(handle_cli_error(e, "cache stats", json_output=json_output)) from e

    if json_output:
        data = {**stats, "pages": {str(page): count for page, count in stats["pages"].items()}}
        print_json(format_json_output(True, "cache stats", data=data))
        return

    table = Table(title="Cache Statistics", show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Database", stats["db_path"])
    table.add_row("Total Entries", str(stats["total_entries"]))
    table.add_row("Highest Page", str(stats["max_page"] or "-"))
    table.add_row("Size", f"{stats['size_bytes'] / 1024:.1f} KB")
    for page, count in stats["pages"].items():
        table.add_row(f"Page {page}", str(count))

    get_console().print(table)


def cache_clear_command(yes: bool, json_output: bool) -> None:
    """Delete every cached anime."""
    if not yes and not json_output:
        typer.confirm("Delete all cached anime?", abort=True)

    try:
        container = create_container()
        cache_db = container.cache_db()
        try:
            cleared = cache_db.clear_all()
        finally:
            cache_db.close()
    except Exception as e:  # noqa: BLE001
        raise typer.Exit(handle_cli_error(e, "cache clear", json_output=json_output)) from e

    logger.info("Cache cleared from CLI (%d entries)", cleared)
    if json_output:
        print_json(format_json_output(True, "cache clear", data={"cleared": cleared}))
    else:
        get_console().print(f"[green]Cleared {cleared} cached anime[/green]")
