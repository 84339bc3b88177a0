"""Jikan API Response Models.

These models live in shared so the cache, mappers and protocols can use
them without importing the HTTP client.

This module defines Pydantic models for Jikan v4 responses to ensure type
safety and validation at the external API boundary. Only the fields the
data layer uses are declared; ``extra='ignore'`` lets new Jikan fields pass
without breaking validation.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from anifeed.shared.constants import ErrorMessages, JikanFields
from anifeed.shared.errors import DecodeError, ErrorCode, ErrorContext


class JikanModel(BaseModel):
    """Base for Jikan models; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class JikanImageUrls(JikanModel):
    """``images.jpg`` block."""

    image_url: Optional[StrictStr] = None
    large_image_url: Optional[StrictStr] = None


class JikanImages(JikanModel):
    """``images`` block; only the JPEG variant is used."""

    jpg: Optional[JikanImageUrls] = None


class TrailerRecord(JikanModel):
    """Trailer block; any of the three references may be missing."""

    youtube_id: Optional[StrictStr] = None
    url: Optional[StrictStr] = None
    embed_url: Optional[StrictStr] = None


class AnimeRecord(JikanModel):
    """Single anime entry as returned by ``top/anime`` and ``anime/{id}``.

    Attributes:
        genres: Genre names; Jikan's ``{"mal_id", "name"}`` objects are
            reduced to their name
    """

    mal_id: StrictInt = Field(..., description="MyAnimeList id")
    title: StrictStr = Field(..., description="Default title")
    title_english: Optional[StrictStr] = None
    title_japanese: Optional[StrictStr] = None
    images: Optional[JikanImages] = None
    trailer: Optional[TrailerRecord] = None
    type: Optional[StrictStr] = None
    episodes: Optional[StrictInt] = None
    status: Optional[StrictStr] = None
    airing: Optional[StrictBool] = None
    duration: Optional[StrictStr] = None
    rating: Optional[StrictStr] = None
    score: Optional[Union[StrictFloat, StrictInt]] = None
    rank: Optional[StrictInt] = None
    popularity: Optional[StrictInt] = None
    synopsis: Optional[StrictStr] = None
    season: Optional[StrictStr] = None
    year: Optional[StrictInt] = None
    genres: Optional[list[StrictStr]] = None

    @field_validator("genres", mode="before")
    @classmethod
    def _genre_names(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [
                entry.get(JikanFields.NAME) if isinstance(entry, dict) else entry
                for entry in value
            ]
        return value

    @field_validator("score")
    @classmethod
    def _score_as_float(cls, value: float | int | None) -> float | None:
        return float(value) if value is not None else None

    @property
    def image_url(self) -> str | None:
        jpg = self.images.jpg if self.images is not None else None
        return jpg.image_url if jpg is not None else None

    @property
    def large_image_url(self) -> str | None:
        jpg = self.images.jpg if self.images is not None else None
        return jpg.large_image_url if jpg is not None else None

    @classmethod
    def from_dict(cls, data: Any, url: str = "") -> AnimeRecord:
        """Validate one decoded JSON object.

        Raises:
            DecodeError: If required fields are missing or have the wrong type
        """
        return _validate(cls, data, url)


class JikanPagination(JikanModel):
    """``pagination`` block of list responses."""

    has_next_page: Optional[StrictBool] = None


class AnimePageRecord(JikanModel):
    """One page of ``top/anime``."""

    items: list[AnimeRecord] = Field(default_factory=list)
    has_next_page: StrictBool = False

    @classmethod
    def from_dict(cls, payload: Any, url: str = "") -> AnimePageRecord:
        """Build a page from the decoded response body.

        A missing ``pagination`` block means there is no next page.

        Raises:
            DecodeError: If ``data`` is missing or any entry is malformed
        """
        envelope = _validate(_PageEnvelope, payload, url)
        pagination = envelope.pagination
        return cls(
            items=envelope.data,
            has_next_page=bool(pagination is not None and pagination.has_next_page),
        )


class _PageEnvelope(JikanModel):
    data: list[AnimeRecord]
    pagination: Optional[JikanPagination] = None


class _DetailEnvelope(JikanModel):
    data: AnimeRecord


def parse_detail_payload(payload: Any, url: str = "") -> AnimeRecord:
    """Extract the record from an ``anime/{id}`` response body.

    Raises:
        DecodeError: If ``data`` is missing or malformed
    """
    return _validate(_DetailEnvelope, payload, url).data


def _validate(model: type[JikanModel], payload: Any, url: str) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "body"
        reason = f"{e.error_count()} validation error(s), first at '{location}': {first['msg']}"
        raise DecodeError(
            ErrorCode.DECODE_ERROR,
            ErrorMessages.INVALID_PAYLOAD.format(url=url, reason=reason),
            ErrorContext(operation="decode_response", additional_data={"url": url}),
            original_error=e,
        ) from e


__all__ = [
    "AnimePageRecord",
    "AnimeRecord",
    "JikanImageUrls",
    "JikanImages",
    "TrailerRecord",
    "parse_detail_payload",
]
