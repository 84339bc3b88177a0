"""
Reusable Typer Options Module

Options shared by several commands are defined once here and attached
with ``Annotated[type, option] = default`` in command signatures.
"""

from __future__ import annotations

import typer

log_level_option = typer.Option(
    "--log-level",
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). "
    "Default: the configured level.",
)

config_option = typer.Option(
    "--config",
    "-c",
    help="Path of a TOML configuration file.",
    dir_okay=False,
)

json_output_option = typer.Option(
    "--json",
    help="Enable machine-readable JSON output instead of human-readable format.",
)

offline_option = typer.Option(
    "--offline",
    help="Treat the network as unavailable and serve only cached data.",
)
