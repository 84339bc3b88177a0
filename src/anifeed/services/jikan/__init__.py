"""Jikan v4 API access."""

from anifeed.services.jikan.client import JikanClient

__all__ = ["JikanClient"]
