"""API configuration models (Jikan).

This module contains configuration models for the external anime API.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from anifeed.shared.constants import JikanConfig


class JikanSettings(BaseModel):
    """Jikan API configuration.

    Jikan is unauthenticated, so there is no key to manage; the settings
    cover the endpoint, request timeout, page size and client-side rate limit.
    """

    base_url: str = Field(
        default=JikanConfig.BASE_URL,
        description="Base URL of the Jikan v4 API (trailing slash required)",
    )
    timeout: float = Field(
        default=JikanConfig.DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )
    page_limit: int = Field(
        default=JikanConfig.DEFAULT_PAGE_SIZE,
        gt=0,
        le=JikanConfig.MAX_PAGE_SIZE,
        description="Items requested per top-list page",
    )
    rate_limit_per_second: float = Field(
        default=JikanConfig.RATE_LIMIT_PER_SECOND,
        gt=0,
        description="Maximum requests per second",
    )
    user_agent: str = Field(
        default=JikanConfig.USER_AGENT,
        description="User-Agent header sent with every request",
    )


class APISettings(BaseModel):
    """API configuration container."""

    jikan: JikanSettings = Field(
        default_factory=JikanSettings,
        description="Jikan API configuration",
    )


__all__ = [
    "APISettings",
    "JikanSettings",
]
