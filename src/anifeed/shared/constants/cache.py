"""
Cache Configuration Constants

This module provides constants for the SQLite anime cache: table
name, schema version and the genre list encoding.
"""


class CacheConfig:
    """SQLite cache configuration."""

    TABLE_NAME = "anime"
    SCHEMA_VERSION = 1
    DEFAULT_PAGE = 1

    # Genres are stored flat, joined with this separator
    GENRE_SEPARATOR = ", "


class CacheColumns:
    """Column order shared by insert and select statements."""

    ALL = (
        "mal_id",
        "title",
        "title_english",
        "title_japanese",
        "episodes",
        "score",
        "synopsis",
        "rating",
        "image_url",
        "large_image_url",
        "trailer_embed_url",
        "trailer_youtube_id",
        "trailer_url",
        "genres",
        "type",
        "status",
        "airing",
        "duration",
        "rank",
        "popularity",
        "season",
        "year",
        "page",
        "last_updated",
    )
