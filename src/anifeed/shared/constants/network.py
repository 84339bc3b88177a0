"""
Network Connectivity Constants

Defaults for the TCP reachability check.
"""

from .system import BASE_SECOND


class ConnectivityConfig:
    """Connectivity check defaults."""

    CHECK_HOST = "api.jikan.moe"
    CHECK_PORT = 443
    CHECK_TIMEOUT = 3.0 * BASE_SECOND
    POLL_INTERVAL = 5.0 * BASE_SECOND
