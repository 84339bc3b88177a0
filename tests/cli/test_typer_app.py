"""End-to-end tests for the typer CLI against a temporary cache."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from anifeed.cli.common.context import clear_cli_context
from anifeed.cli.common.error_handler import EXIT_CONFIG_ERROR, EXIT_FAILURE
from anifeed.cli.typer_app import app
from anifeed.services.sqlite_cache import AnimeCacheDB
from anifeed.shared.constants import Application, ErrorMessages
from tests.factories import make_row

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_cli_context():
    yield
    clear_cli_context()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    db_path = tmp_path / "cache" / "anime_cache.db"
    path = tmp_path / "config.toml"
    path.write_text(
        f'[logging]\nlevel = "ERROR"\n\n[cache]\ndb_path = "{db_path.as_posix()}"\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def populated_cache(tmp_path: Path, config_file: Path) -> Path:
    db = AnimeCacheDB(tmp_path / "cache" / "anime_cache.db")
    try:
        db.upsert_many([make_row(1), make_row(2), make_row(3, page=2)])
    finally:
        db.close()
    return config_file


def _invoke(config: Path, *args: str):
    return runner.invoke(app, ["--log-level", "CRITICAL", "--config", str(config), *args])


class TestGlobalOptions:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert Application.VERSION in result.stdout

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path / "missing.toml", "cache", "stats", "--json")

        assert result.exit_code == EXIT_CONFIG_ERROR


class TestTopCommand:
    def test_offline_reads_every_cached_page(self, populated_cache: Path) -> None:
        # When
        result = _invoke(populated_cache, "top", "--offline", "--json")

        # Then
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["success"] is True
        assert payload["command"] == "top"
        assert [item["id"] for item in payload["data"]["items"]] == [1, 2, 3]
        assert payload["data"]["current_page"] == 2
        assert payload["data"]["has_next_page"] is False
        assert payload["data"]["items"][0]["trailer"] == {"kind": "playable", "youtube_id": "yt1"}

    def test_offline_with_empty_cache(self, config_file: Path) -> None:
        result = _invoke(config_file, "top", "--offline", "--json")

        assert result.exit_code == EXIT_FAILURE
        payload = json.loads(result.stdout)
        assert payload["success"] is False
        assert payload["errors"] == [ErrorMessages.NO_DATA_LIST]

    def test_offline_table(self, populated_cache: Path) -> None:
        result = _invoke(populated_cache, "top", "--offline")

        assert result.exit_code == 0
        assert "English" in result.stdout


class TestDetailCommand:
    def test_offline_cache_hit(self, populated_cache: Path) -> None:
        result = _invoke(populated_cache, "detail", "2", "--offline", "--json")

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["data"]["id"] == 2
        assert payload["data"]["genres"] == ["Action", "Drama"]

    def test_offline_cache_miss(self, populated_cache: Path) -> None:
        result = _invoke(populated_cache, "detail", "99", "--offline", "--json")

        assert result.exit_code == EXIT_FAILURE
        assert json.loads(result.stdout)["errors"] == [ErrorMessages.NO_DATA_DETAIL]

    def test_rejects_non_positive_id(self, config_file: Path) -> None:
        result = _invoke(config_file, "detail", "0")

        assert result.exit_code != 0


class TestCacheCommands:
    def test_stats(self, populated_cache: Path) -> None:
        result = _invoke(populated_cache, "cache", "stats", "--json")

        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["total_entries"] == 3
        assert data["max_page"] == 2
        assert data["pages"] == {"1": 2, "2": 1}

    def test_clear_with_yes(self, populated_cache: Path) -> None:
        # When
        cleared = _invoke(populated_cache, "cache", "clear", "--yes", "--json")
        stats = _invoke(populated_cache, "cache", "stats", "--json")

        # Then
        assert cleared.exit_code == 0
        assert json.loads(cleared.stdout)["data"] == {"cleared": 3}
        assert json.loads(stats.stdout)["data"]["total_entries"] == 0

    def test_clear_aborted_keeps_rows(self, populated_cache: Path) -> None:
        result = runner.invoke(
            app,
            ["--log-level", "CRITICAL", "--config", str(populated_cache), "cache", "clear"],
            input="n\n",
        )
        stats = _invoke(populated_cache, "cache", "stats", "--json")

        assert result.exit_code == 1
        assert json.loads(stats.stdout)["data"]["total_entries"] == 3
