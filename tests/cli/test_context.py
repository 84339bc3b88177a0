"""Tests for the CLI context holder."""

from __future__ import annotations

from pathlib import Path

from anifeed.cli.common.context import (
    CliContext,
    LogLevel,
    clear_cli_context,
    get_cli_context,
    set_cli_context,
)


class TestCliContext:
    def test_defaults_when_unset(self) -> None:
        clear_cli_context()

        context = get_cli_context()

        assert context.log_level is None
        assert context.config_path is None

    def test_set_and_clear(self) -> None:
        set_cli_context(CliContext(log_level=LogLevel.DEBUG, config_path=Path("a.toml")))
        assert get_cli_context().log_level is LogLevel.DEBUG
        assert get_cli_context().config_path == Path("a.toml")

        clear_cli_context()
        assert get_cli_context().log_level is None
