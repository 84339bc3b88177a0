"""Per-command wiring: settings, logging and the DI container."""

from __future__ import annotations

import logging

from dependency_injector import providers

from anifeed.cli.common.context import get_cli_context
from anifeed.config.loader import load_settings
from anifeed.containers import Container
from anifeed.services.connectivity import ManualConnectivityOracle
from anifeed.shared.logging import setup_structured_logger

logger = logging.getLogger(__name__)


def create_container(*, offline: bool = False) -> Container:
    """Build a container for one CLI command.

    Settings are loaded from ``--config`` (or the default locations), the
    ``anifeed`` logger is configured from them and the ``--log-level``
    override, and ``offline`` swaps in a connectivity oracle that always
    reports the network as down.

    Raises:
        ApplicationError: If the configuration cannot be loaded
    """
    context = get_cli_context()
    settings = load_settings(context.config_path)

    level = context.log_level.value if context.log_level else settings.logging.level
    setup_structured_logger(
        level=level,
        log_file=settings.logging.file,
        use_rich_console=settings.logging.console_output,
    )

    container = Container()
    container.settings.override(providers.Object(settings))
    if offline:
        container.connectivity.override(
            providers.Singleton(ManualConnectivityOracle, available=False)
        )
        logger.debug("Offline mode: network treated as unavailable")
    return container
