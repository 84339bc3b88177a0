"""Domain models for the anime catalogue."""

from anifeed.domain.models import (
    Anime,
    AnimeRow,
    ExternalLink,
    NoTrailer,
    PaginatedResult,
    PlayableById,
    TrailerReference,
    UnavailableEmbed,
)

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
