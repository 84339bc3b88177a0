"""Models shared across layers (external API records)."""

from anifeed.shared.models.jikan import (
    AnimePageRecord,
    AnimeRecord,
    TrailerRecord,
    parse_detail_payload,
)

__all__ = [
    "AnimePageRecord",
    "AnimeRecord",
    "TrailerRecord",
    "parse_detail_payload",
]
