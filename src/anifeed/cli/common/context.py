"""
CLI Context Management Module

This module holds the global CLI options parsed by the main callback in a
Pydantic model stored in a ContextVar, so every command reads the same
typed values.

The context includes:
- log_level: Logging level override (None keeps the configured level)
- config_path: Explicit TOML configuration file
"""

from __future__ import annotations

import contextvars
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Log level enumeration for type safety."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """CLI context model for managing global state.

    Attributes:
        log_level: Logging level override
        config_path: TOML configuration file passed with ``--config``
    """

    log_level: LogLevel | None = Field(
        default=None,
        description="Logging level override",
    )

    config_path: Path | None = Field(
        default=None,
        description="Explicit configuration file",
    )


cli_context_var: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "cli_context",
    default=None,
)


def get_cli_context() -> CliContext:
    """Get the current CLI context, or defaults when no callback ran."""
    context = cli_context_var.get()
    if context is None:
        return CliContext()
    return context


def set_cli_context(context: CliContext) -> None:
    """Set the current CLI context."""
    cli_context_var.set(context)


def clear_cli_context() -> None:
    """Clear the current CLI context."""
    cli_context_var.set(None)
