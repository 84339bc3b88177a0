"""AniFeed Configuration Module

This module provides unified access to configuration models and the
settings loader.
"""

from __future__ import annotations

from .loader import load_settings
from .models import (
    APISettings,
    AppSettings,
    CacheSettings,
    ConnectivitySettings,
    JikanSettings,
    LoggingSettings,
)
from .models.settings import Settings

__all__ = [
    "APISettings",
    "AppSettings",
    "CacheSettings",
    "ConnectivitySettings",
    "JikanSettings",
    "LoggingSettings",
    "Settings",
    "load_settings",
]
