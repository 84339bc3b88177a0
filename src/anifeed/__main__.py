"""Run the CLI with ``python -m anifeed``."""

from anifeed.cli.typer_app import app

app(prog_name="anifeed")
