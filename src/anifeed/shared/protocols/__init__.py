"""Protocol interfaces consumed by the data layer."""

from anifeed.shared.protocols.services import (
    CacheStoreProtocol,
    ConnectivityOracleProtocol,
    RemoteSourceProtocol,
)

__all__ = [
    "CacheStoreProtocol",
    "ConnectivityOracleProtocol",
    "RemoteSourceProtocol",
]
