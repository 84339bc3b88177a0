"""AniFeed data services.

Cache store, Jikan client, connectivity oracles, the repository and the
list/detail sessions built on top of it.
"""

from anifeed.services.connectivity import ManualConnectivityOracle, SocketConnectivityOracle
from anifeed.services.detail import AnimeDetailSession, DetailSnapshot, DetailState
from anifeed.services.jikan import JikanClient
from anifeed.services.pagination import AnimeListSession, ListSnapshot, ListState
from anifeed.services.repository import AnimeRepository
from anifeed.services.sqlite_cache import AnimeCacheDB

__all__ = [
    "AnimeCacheDB",
    "AnimeDetailSession",
    "AnimeListSession",
    "AnimeRepository",
    "DetailSnapshot",
    "DetailState",
    "JikanClient",
    "ListSnapshot",
    "ListState",
    "ManualConnectivityOracle",
    "SocketConnectivityOracle",
]
