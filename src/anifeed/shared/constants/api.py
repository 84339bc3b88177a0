"""
API Configuration Constants

This module contains all constants related to the Jikan API,
request limits and the JSON field names of its responses.
"""

from typing import ClassVar

from .system import BASE_SECOND


class APIConfig:
    """Base API configuration constants."""

    DEFAULT_REQUEST_TIMEOUT = 30 * BASE_SECOND
    DEFAULT_PAGE_SIZE = 25
    MAX_PAGE_SIZE = 25


class JikanConfig(APIConfig):
    """Jikan (unofficial MyAnimeList) API v4 configuration."""

    BASE_URL = "https://api.jikan.moe/v4/"
    TOP_ANIME_ENDPOINT = "top/anime"
    ANIME_DETAIL_ENDPOINT = "anime/{anime_id}"

    # Jikan allows 3 requests per second per client
    RATE_LIMIT_PER_SECOND = 3
    RATE_LIMIT_WINDOW = 1.0 * BASE_SECOND

    USER_AGENT = "AniFeed/0.1.0"
    HEADERS: ClassVar[dict[str, str]] = {
        "Accept": "application/json",
    }


class JikanFields:
    """JSON keys used by Jikan responses."""

    DATA = "data"
    PAGINATION = "pagination"
    HAS_NEXT_PAGE = "has_next_page"

    MAL_ID = "mal_id"
    TITLE = "title"
    TITLE_ENGLISH = "title_english"
    TITLE_JAPANESE = "title_japanese"
    IMAGES = "images"
    JPG = "jpg"
    IMAGE_URL = "image_url"
    LARGE_IMAGE_URL = "large_image_url"
    TRAILER = "trailer"
    YOUTUBE_ID = "youtube_id"
    URL = "url"
    EMBED_URL = "embed_url"
    TYPE = "type"
    EPISODES = "episodes"
    STATUS = "status"
    AIRING = "airing"
    DURATION = "duration"
    RATING = "rating"
    SCORE = "score"
    RANK = "rank"
    POPULARITY = "popularity"
    SYNOPSIS = "synopsis"
    SEASON = "season"
    YEAR = "year"
    GENRES = "genres"
    NAME = "name"
