"""Conversions between Jikan records, cache rows and domain items.

Three paths exist:
- record -> row, when a fetched page or detail is written back to the cache
- record -> domain, on the network-first path (no cache read)
- row -> domain, on the cache fallback path

Jikan/SQLite shapes never leak past the repository.
"""

from __future__ import annotations

import time

from anifeed.domain.models import (
    Anime,
    AnimeRow,
    ExternalLink,
    NoTrailer,
    PlayableById,
    TrailerReference,
    UnavailableEmbed,
)
from anifeed.shared.constants import CacheConfig
from anifeed.shared.models.jikan import AnimeRecord


def resolve_trailer(
    youtube_id: str | None,
    url: str | None,
    embed_url: str | None,
) -> TrailerReference:
    """Pick the trailer reference to expose.

    A YouTube id wins over a direct URL, which wins over an embed URL;
    blank strings count as missing. Embeds are not playable in-app, so they
    resolve to ``UnavailableEmbed``.
    """
    if youtube_id and youtube_id.strip():
        return PlayableById(youtube_id)
    if url and url.strip():
        return ExternalLink(url)
    if embed_url and embed_url.strip():
        return UnavailableEmbed(embed_url)
    return NoTrailer()


def _display_title(title_english: str | None, title: str) -> str:
    return title_english if title_english is not None else title


def _now_ms() -> int:
    return int(time.time() * 1000)


def record_to_row(record: AnimeRecord, page: int = CacheConfig.DEFAULT_PAGE) -> AnimeRow:
    """Flatten a record into a cache row tagged with ``page``."""
    trailer = record.trailer
    genres = (
        CacheConfig.GENRE_SEPARATOR.join(record.genres) if record.genres is not None else None
    )
    return AnimeRow(
        mal_id=record.mal_id,
        title=_display_title(record.title_english, record.title),
        title_english=record.title_english,
        title_japanese=record.title_japanese,
        episodes=record.episodes,
        score=record.score,
        synopsis=record.synopsis,
        rating=record.rating,
        image_url=record.image_url,
        large_image_url=record.large_image_url,
        trailer_embed_url=trailer.embed_url if trailer else None,
        trailer_youtube_id=trailer.youtube_id if trailer else None,
        trailer_url=trailer.url if trailer else None,
        genres=genres,
        type=record.type,
        status=record.status,
        airing=record.airing,
        duration=record.duration,
        rank=record.rank,
        popularity=record.popularity,
        season=record.season,
        year=record.year,
        page=page,
        last_updated=_now_ms(),
    )


def record_to_domain(record: AnimeRecord) -> Anime:
    """Map a freshly fetched record straight to the domain item."""
    trailer = record.trailer
    return Anime(
        id=record.mal_id,
        title=_display_title(record.title_english, record.title),
        title_japanese=record.title_japanese,
        image_url=record.image_url,
        large_image_url=record.large_image_url,
        score=record.score,
        episodes=record.episodes,
        type=record.type,
        status=record.status,
        airing=record.airing,
        rank=record.rank,
        rating=record.rating,
        synopsis=record.synopsis,
        genres=tuple(record.genres or ()),
        trailer=resolve_trailer(
            trailer.youtube_id if trailer else None,
            trailer.url if trailer else None,
            trailer.embed_url if trailer else None,
        ),
    )


def row_to_domain(row: AnimeRow) -> Anime:
    """Rebuild the domain item from a cached row."""
    genres: tuple[str, ...] = ()
    if row.genres:
        genres = tuple(row.genres.split(CacheConfig.GENRE_SEPARATOR))
    return Anime(
        id=row.mal_id,
        title=_display_title(row.title_english, row.title),
        title_japanese=row.title_japanese,
        image_url=row.image_url,
        large_image_url=row.large_image_url,
        score=row.score,
        episodes=row.episodes,
        type=row.type,
        status=row.status,
        airing=row.airing,
        rank=row.rank,
        rating=row.rating,
        synopsis=row.synopsis,
        genres=genres,
        trailer=resolve_trailer(row.trailer_youtube_id, row.trailer_url, row.trailer_embed_url),
    )


__all__ = [
    "record_to_domain",
    "record_to_row",
    "resolve_trailer",
    "row_to_domain",
]
