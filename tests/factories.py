"""Factories for Jikan payloads, records and cache rows used across tests."""

from __future__ import annotations

from typing import Any

from anifeed.domain.models import AnimeRow
from anifeed.shared.models.jikan import AnimePageRecord, AnimeRecord, TrailerRecord


def anime_payload(mal_id: int, **overrides: Any) -> dict[str, Any]:
    """One Jikan anime object as returned inside ``data``."""
    payload: dict[str, Any] = {
        "mal_id": mal_id,
        "title": f"Title {mal_id}",
        "title_english": f"English {mal_id}",
        "title_japanese": f"タイトル {mal_id}",
        "images": {
            "jpg": {
                "image_url": f"https://cdn.myanimelist.net/images/{mal_id}.jpg",
                "large_image_url": f"https://cdn.myanimelist.net/images/{mal_id}l.jpg",
            }
        },
        "trailer": {
            "youtube_id": f"yt{mal_id}",
            "url": f"https://www.youtube.com/watch?v=yt{mal_id}",
            "embed_url": f"https://www.youtube.com/embed/yt{mal_id}",
        },
        "type": "TV",
        "episodes": 24,
        "status": "Finished Airing",
        "airing": False,
        "duration": "24 min per ep",
        "rating": "PG-13 - Teens 13 or older",
        "score": 8.5,
        "rank": mal_id,
        "popularity": 100 + mal_id,
        "synopsis": f"Synopsis {mal_id}",
        "season": "spring",
        "year": 2020,
        "genres": [{"mal_id": 1, "name": "Action"}, {"mal_id": 8, "name": "Drama"}],
    }
    payload.update(overrides)
    return payload


def page_payload(ids: list[int], has_next_page: bool = True) -> dict[str, Any]:
    """A ``top/anime`` response body."""
    return {
        "pagination": {"last_visible_page": 10, "has_next_page": has_next_page},
        "data": [anime_payload(mal_id) for mal_id in ids],
    }


def make_record(mal_id: int, **overrides: Any) -> AnimeRecord:
    fields: dict[str, Any] = {
        "mal_id": mal_id,
        "title": f"Title {mal_id}",
        "title_english": f"English {mal_id}",
        "rank": mal_id,
        "score": 8.0,
        "genres": ["Action", "Drama"],
        "trailer": TrailerRecord(youtube_id=f"yt{mal_id}"),
    }
    fields.update(overrides)
    return AnimeRecord(**fields)


def make_page(ids: list[int], has_next_page: bool = True) -> AnimePageRecord:
    return AnimePageRecord(items=[make_record(mal_id) for mal_id in ids], has_next_page=has_next_page)


def make_row(mal_id: int, page: int = 1, **overrides: Any) -> AnimeRow:
    fields: dict[str, Any] = {
        "mal_id": mal_id,
        "title": f"English {mal_id}",
        "title_english": f"English {mal_id}",
        "rank": mal_id,
        "genres": "Action, Drama",
        "trailer_youtube_id": f"yt{mal_id}",
        "page": page,
        "last_updated": 1_700_000_000_000,
    }
    fields.update(overrides)
    return AnimeRow(**fields)


