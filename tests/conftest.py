"""
Pytest configuration and shared fixtures for AniFeed tests.

Payload, record and row factories live in ``tests.factories``.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from anifeed.services.sqlite_cache import AnimeCacheDB


@pytest.fixture
def cache_db(tmp_path: Path) -> Generator[AnimeCacheDB, None, None]:
    """Real SQLite cache in a temporary directory."""
    cache = AnimeCacheDB(tmp_path / "anime_cache.db")
    yield cache
    cache.close()
