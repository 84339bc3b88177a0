"""Settings loader.

This module handles:
- Environment variable loading from an optional .env file
- Configuration file discovery and TOML loading

There is no global settings instance; callers pass the loaded ``Settings``
to the container explicitly.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from dotenv import load_dotenv
from pydantic import ValidationError

from anifeed.config.models.settings import Settings
from anifeed.shared.constants import FileSystem
from anifeed.shared.errors import create_config_error

logger = logging.getLogger(__name__)


def default_config_paths() -> list[Path]:
    """Candidate configuration files, in lookup order."""
    return [
        Path("config") / FileSystem.CONFIG_FILE,
        Path(FileSystem.CONFIG_FILE),
        Path.home() / FileSystem.HOME_DIR / FileSystem.CONFIG_FILE,
    ]


def _load_env_file(env_file: Path = Path(".env")) -> None:
    """Load variables from ``.env`` if it exists. Existing variables win."""
    if env_file.exists():
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment from %s", env_file)


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML file or the environment.

    Args:
        config_path: Explicit TOML file. If None, the default locations are
            tried and the environment is used when none exists.

    Returns:
        Settings instance

    Raises:
        ApplicationError: If the explicit file is missing or any source
            holds invalid values
    """
    _load_env_file()

    try:
        if config_path is not None:
            return Settings.from_toml_file(config_path)

        for candidate in default_config_paths():
            if candidate.exists():
                return Settings.from_toml_file(candidate)

        return Settings()
    except FileNotFoundError as e:
        raise create_config_error(
            str(e),
            config_key="config_path",
            operation="load_settings",
            original_error=e,
        ) from e
    except toml.TomlDecodeError as e:
        raise create_config_error(
            f"Invalid TOML in configuration file: {e}",
            config_key="config_path",
            operation="load_settings",
            original_error=e,
        ) from e
    except ValidationError as e:
        raise create_config_error(
            f"Invalid configuration: {e.error_count()} validation error(s)",
            operation="load_settings",
            original_error=e,
        ) from e


__all__ = [
    "default_config_paths",
    "load_settings",
]
