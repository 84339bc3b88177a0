"""Cache and connectivity configuration models.

This module contains the cache location and the reachability check settings.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from anifeed.shared.constants import ConnectivityConfig, FileSystem


def _default_db_path() -> Path:
    return Path.home() / FileSystem.HOME_DIR / FileSystem.CACHE_DIRECTORY / FileSystem.CACHE_DB_NAME


class CacheSettings(BaseModel):
    """SQLite cache configuration."""

    db_path: Path = Field(
        default_factory=_default_db_path,
        description="Path of the SQLite cache database",
    )


class ConnectivitySettings(BaseModel):
    """Reachability check configuration."""

    check_host: str = Field(
        default=ConnectivityConfig.CHECK_HOST,
        description="Host used to check connectivity",
    )
    check_port: int = Field(
        default=ConnectivityConfig.CHECK_PORT,
        gt=0,
        le=65535,
        description="TCP port used to check connectivity",
    )
    check_timeout: float = Field(
        default=ConnectivityConfig.CHECK_TIMEOUT,
        gt=0,
        description="Connect timeout for the check in seconds",
    )
    poll_interval: float = Field(
        default=ConnectivityConfig.POLL_INTERVAL,
        gt=0,
        description="Seconds between checks while observing changes",
    )


__all__ = [
    "CacheSettings",
    "ConnectivitySettings",
]
