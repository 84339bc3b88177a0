"""Configuration domain models."""

from anifeed.config.models.api_settings import APISettings, JikanSettings
from anifeed.config.models.app_settings import AppSettings, LoggingSettings
from anifeed.config.models.cache_settings import CacheSettings, ConnectivitySettings

__all__ = [
    "APISettings",
    "AppSettings",
    "CacheSettings",
    "ConnectivitySettings",
    "JikanSettings",
    "LoggingSettings",
]
