"""
CLI Error Handling Utilities

Consistent logging, output and exit codes for errors raised by commands.
"""

from __future__ import annotations

import logging

from rich.console import Console

from anifeed.cli.common.output import format_json_output, print_json
from anifeed.shared.errors import (
    AniFeedError,
    ApplicationError,
    ErrorCode,
    ErrorContext,
    NoDataAvailableError,
)
from anifeed.shared.logging import log_operation_error

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NO_DATA = 2
EXIT_CONFIG_ERROR = 3


def _exit_code_for(error: AniFeedError) -> int:
    if isinstance(error, NoDataAvailableError):
        return EXIT_NO_DATA
    if isinstance(error, ApplicationError) and error.code in (
        ErrorCode.CONFIG_ERROR,
        ErrorCode.CONFIG_INVALID,
    ):
        return EXIT_CONFIG_ERROR
    return EXIT_FAILURE


def handle_cli_error(
    error: Exception,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Log and print an error raised by a command.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    if isinstance(error, AniFeedError):
        anifeed_error = error
    else:
        anifeed_error = ApplicationError(
            ErrorCode.CLI_UNEXPECTED_ERROR,
            f"Unexpected error: {error}",
            ErrorContext(operation=command),
            original_error=error,
        )

    log_operation_error(logger, anifeed_error, operation=command)

    if json_output:
        print_json(
            format_json_output(
                success=False,
                command=command,
                data={"error_code": anifeed_error.code.value},
                errors=[anifeed_error.message],
            )
        )
    else:
        Console(stderr=True).print(f"[red]Error:[/red] {anifeed_error.message}", markup=True)

    return _exit_code_for(anifeed_error)
