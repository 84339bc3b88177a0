"""Dependency Injection container for AniFeed.

This module wires the data layer with dependency-injector. Nothing is a
module-level global: each ``Container`` instance owns its own settings,
cache connection, HTTP client and repository.

The container manages:
- Settings (Singleton, overridable with an already-loaded instance)
- SQLite cache store (Singleton; one connection per container)
- Jikan client (Singleton; one HTTP session per container)
- Connectivity oracle (Singleton; overridable for offline use)
- Repository (Singleton) and list/detail sessions (Factory)
"""

from __future__ import annotations

from dependency_injector import containers, providers

from anifeed.config.loader import load_settings
from anifeed.services import (
    AnimeCacheDB,
    AnimeDetailSession,
    AnimeListSession,
    AnimeRepository,
    JikanClient,
    SocketConnectivityOracle,
)


class Container(containers.DeclarativeContainer):
    """Dependency Injection container for AniFeed services.

    Example:
        >>> container = Container()
        >>> container.settings.override(providers.Object(load_settings("config.toml")))
        >>> session = container.list_session()
        >>> await session.start()
    """

    # Configuration
    settings = providers.Singleton(load_settings)

    # Cache store
    cache_db = providers.Singleton(
        AnimeCacheDB,
        db_path=providers.Callable(lambda settings: settings.cache.db_path, settings=settings),
    )

    # Remote source
    jikan_client = providers.Singleton(
        JikanClient,
        settings=providers.Callable(lambda settings: settings.api.jikan, settings=settings),
    )

    # Connectivity
    connectivity = providers.Singleton(
        SocketConnectivityOracle,
        host=providers.Callable(
            lambda settings: settings.connectivity.check_host, settings=settings
        ),
        port=providers.Callable(
            lambda settings: settings.connectivity.check_port, settings=settings
        ),
        timeout=providers.Callable(
            lambda settings: settings.connectivity.check_timeout, settings=settings
        ),
        poll_interval=providers.Callable(
            lambda settings: settings.connectivity.poll_interval, settings=settings
        ),
    )

    # Repository
    repository = providers.Singleton(
        AnimeRepository,
        remote=jikan_client,
        cache=cache_db,
        connectivity=connectivity,
        page_limit=providers.Callable(
            lambda settings: settings.api.jikan.page_limit, settings=settings
        ),
    )

    # Sessions
    list_session = providers.Factory(
        AnimeListSession,
        repository=repository,
        connectivity=connectivity,
    )

    detail_session = providers.Factory(
        AnimeDetailSession,
        repository=repository,
    )
