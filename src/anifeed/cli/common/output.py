"""
CLI output helpers.

JSON output goes through ``format_json_output`` (orjson) so every command
produces the same envelope; human-readable output is rendered with rich.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Any

import orjson
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from typing_extensions import assert_never

from anifeed.domain.models import (
    Anime,
    ExternalLink,
    NoTrailer,
    PlayableById,
    TrailerReference,
    UnavailableEmbed,
)


def get_console() -> Console:
    """Console bound to the current ``sys.stdout``."""
    return Console(file=sys.stdout)


def format_json_output(
    success: bool,
    command: str,
    data: Any | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> bytes:
    """
    Format command output as JSON.

    Args:
        success: Whether the command executed successfully
        command: The command name (e.g., "top", "detail")
        data: The command's output data
        errors: List of error messages
        warnings: List of warning messages

    Returns:
        JSON-encoded bytes ready for output
    """
    if errors is None:
        errors = []
    if warnings is None:
        warnings = []

    # If there are errors, success should be False
    if errors:
        success = False

    json_data = {
        "success": success,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "data": data,
        "errors": errors,
        "warnings": warnings,
    }

    return orjson.dumps(json_data, option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2)


def print_json(payload: bytes) -> None:
    sys.stdout.write(payload.decode("utf-8") + "\n")
    sys.stdout.flush()


def trailer_to_dict(trailer: TrailerReference) -> dict[str, str]:
    if isinstance(trailer, PlayableById):
        return {"kind": "playable", "youtube_id": trailer.youtube_id}
    if isinstance(trailer, ExternalLink):
        return {"kind": "external", "url": trailer.url}
    if isinstance(trailer, UnavailableEmbed):
        return {"kind": "unavailable", "embed_url": trailer.embed_url}
    if isinstance(trailer, NoTrailer):
        return {"kind": "none"}
    assert_never(trailer)


def trailer_label(trailer: TrailerReference) -> str:
    if isinstance(trailer, PlayableById):
        return f"https://www.youtube.com/watch?v={trailer.youtube_id}"
    if isinstance(trailer, ExternalLink):
        return trailer.url
    if isinstance(trailer, UnavailableEmbed):
        return "unavailable (embed only)"
    if isinstance(trailer, NoTrailer):
        return "none"
    assert_never(trailer)


def anime_to_dict(anime: Anime) -> dict[str, Any]:
    return {
        "id": anime.id,
        "title": anime.title,
        "title_japanese": anime.title_japanese,
        "image_url": anime.image_url,
        "large_image_url": anime.large_image_url,
        "score": anime.score,
        "episodes": anime.episodes,
        "type": anime.type,
        "status": anime.status,
        "airing": anime.airing,
        "rank": anime.rank,
        "rating": anime.rating,
        "synopsis": anime.synopsis,
        "genres": list(anime.genres),
        "trailer": trailer_to_dict(anime.trailer),
    }


def _text(value: object) -> str:
    return "-" if value is None else str(value)


def render_anime_table(items: tuple[Anime, ...], title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("ID", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Type")
    table.add_column("Episodes", justify="right")
    table.add_column("Score", justify="right", style="green")

    for anime in items:
        table.add_row(
            _text(anime.rank),
            str(anime.id),
            anime.title,
            _text(anime.type),
            _text(anime.episodes),
            _text(anime.score),
        )
    return table


def render_anime_detail(anime: Anime) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan")
    table.add_column()

    table.add_row("ID", str(anime.id))
    table.add_row("Japanese title", _text(anime.title_japanese))
    table.add_row("Type", _text(anime.type))
    table.add_row("Status", _text(anime.status))
    table.add_row("Episodes", _text(anime.episodes))
    table.add_row("Score", _text(anime.score))
    table.add_row("Rank", _text(anime.rank))
    table.add_row("Rating", _text(anime.rating))
    table.add_row("Genres", ", ".join(anime.genres) or "-")
    table.add_row("Trailer", trailer_label(anime.trailer))
    if anime.synopsis:
        table.add_row("Synopsis", anime.synopsis)

    return Panel(table, title=anime.title, expand=False)
