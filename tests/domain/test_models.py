"""Tests for domain models."""

from __future__ import annotations

import dataclasses

import pytest

from anifeed.domain.models import Anime, AnimeRow, NoTrailer, PaginatedResult


class TestAnime:
    def test_defaults(self) -> None:
        anime = Anime(id=1, title="One")

        assert anime.genres == ()
        assert anime.trailer == NoTrailer()
        assert anime.airing is None

    def test_frozen(self) -> None:
        anime = Anime(id=1, title="One")

        with pytest.raises(dataclasses.FrozenInstanceError):
            anime.title = "Two"  # type: ignore[misc]


class TestAnimeRow:
    def test_defaults(self) -> None:
        row = AnimeRow(mal_id=1, title="One")

        assert row.page == 1
        assert row.last_updated == 0
        assert row.genres is None


class TestPaginatedResult:
    def test_equality(self) -> None:
        items = (Anime(id=1, title="One"),)

        assert PaginatedResult(items, 1, True) == PaginatedResult(items, 1, True)
