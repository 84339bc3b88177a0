"""Tests for CLI rendering helpers."""

from __future__ import annotations

import json

import pytest

from anifeed.cli.common.error_handler import (
    EXIT_CONFIG_ERROR,
    EXIT_FAILURE,
    EXIT_NO_DATA,
    handle_cli_error,
)
from anifeed.cli.common.output import anime_to_dict, format_json_output, trailer_label
from anifeed.domain.models import Anime, ExternalLink, NoTrailer, PlayableById, UnavailableEmbed
from anifeed.shared.errors import create_config_error, create_no_data_error


class TestFormatJsonOutput:
    def test_errors_force_failure(self) -> None:
        payload = json.loads(format_json_output(True, "top", errors=["boom"]))

        assert payload["success"] is False
        assert payload["errors"] == ["boom"]
        assert payload["warnings"] == []
        assert payload["command"] == "top"

    def test_success_payload(self) -> None:
        payload = json.loads(format_json_output(True, "detail", data={"id": 1}))

        assert payload["success"] is True
        assert payload["data"] == {"id": 1}


class TestTrailerRendering:
    @pytest.mark.parametrize(
        ("trailer", "label"),
        [
            (PlayableById("abc"), "https://www.youtube.com/watch?v=abc"),
            (ExternalLink("https://example.com/t"), "https://example.com/t"),
            (UnavailableEmbed("https://www.youtube.com/embed/abc"), "unavailable (embed only)"),
            (NoTrailer(), "none"),
        ],
    )
    def test_label(self, trailer, label: str) -> None:
        assert trailer_label(trailer) == label

    def test_anime_to_dict(self) -> None:
        anime = Anime(id=7, title="Seven", genres=("Action",), trailer=ExternalLink("https://x"))

        data = anime_to_dict(anime)

        assert data["id"] == 7
        assert data["genres"] == ["Action"]
        assert data["trailer"] == {"kind": "external", "url": "https://x"}
        assert data["score"] is None


class TestHandleCliError:
    @pytest.mark.parametrize(
        ("error", "exit_code"),
        [
            (create_no_data_error("nothing"), EXIT_NO_DATA),
            (create_config_error("bad config"), EXIT_CONFIG_ERROR),
            (RuntimeError("unexpected"), EXIT_FAILURE),
        ],
    )
    def test_exit_codes(self, error: Exception, exit_code: int) -> None:
        assert handle_cli_error(error, "top") == exit_code

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        handle_cli_error(RuntimeError("kaboom"), "detail", json_output=True)

        payload = json.loads(capsys.readouterr().out)
        assert payload["success"] is False
        assert payload["data"] == {"error_code": "CLI_UNEXPECTED_ERROR"}
        assert payload["errors"] == ["Unexpected error: kaboom"]
