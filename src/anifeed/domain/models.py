"""Domain models for the anime catalogue.

``Anime`` is what the presentation layer consumes; it knows nothing about
the Jikan JSON shape or the SQLite schema. ``AnimeRow`` is the flat cache
row, carrying the page it was fetched under and its write timestamp.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class PlayableById:
    """Trailer playable in an internal player from its YouTube id."""

    youtube_id: str


@dataclass(frozen=True)
class ExternalLink:
    """Trailer available only as a direct URL to open externally."""

    url: str


@dataclass(frozen=True)
class UnavailableEmbed:
    """Only an embed URL is known; embeds are not playable in-app."""

    embed_url: str


@dataclass(frozen=True)
class NoTrailer:
    """No trailer information at all."""


# Closed union: consumers branch with isinstance and end with assert_never.
TrailerReference = Union[PlayableById, ExternalLink, UnavailableEmbed, NoTrailer]


@dataclass(frozen=True)
class Anime:
    """Anime list/detail item as exposed to the presentation layer."""

    id: int
    title: str
    title_japanese: str | None = None
    image_url: str | None = None
    large_image_url: str | None = None
    score: float | None = None
    episodes: int | None = None
    type: str | None = None
    status: str | None = None
    airing: bool | None = None
    rank: int | None = None
    rating: str | None = None
    synopsis: str | None = None
    genres: tuple[str, ...] = ()
    trailer: TrailerReference = field(default_factory=NoTrailer)


@dataclass(frozen=True)
class AnimeRow:
    """Flat cache row for one anime.

    Attributes:
        page: Page of the top list the row was fetched under
        last_updated: Write time in epoch milliseconds
        genres: Genre names joined with ``CacheConfig.GENRE_SEPARATOR``
    """

    mal_id: int
    title: str
    title_english: str | None = None
    title_japanese: str | None = None
    episodes: int | None = None
    score: float | None = None
    synopsis: str | None = None
    rating: str | None = None
    image_url: str | None = None
    large_image_url: str | None = None
    trailer_embed_url: str | None = None
    trailer_youtube_id: str | None = None
    trailer_url: str | None = None
    genres: str | None = None
    type: str | None = None
    status: str | None = None
    airing: bool | None = None
    duration: str | None = None
    rank: int | None = None
    popularity: int | None = None
    season: str | None = None
    year: int | None = None
    page: int = 1
    last_updated: int = 0


@dataclass(frozen=True)
class PaginatedResult:
    """One resolved page of the top list."""

    items: tuple[Anime, ...]
    current_page: int
    has_next_page: bool


__all__ = [
    "Anime",
    "AnimeRow",
    "ExternalLink",
    "NoTrailer",
    "PaginatedResult",
    "PlayableById",
    "TrailerReference",
    "UnavailableEmbed",
]
