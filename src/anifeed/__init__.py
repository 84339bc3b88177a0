"""
AniFeed - network-first anime catalogue with offline cache.

The top anime list and per-title details are served from the Jikan API
when reachable and from a local SQLite cache otherwise, with pagination
accumulated across fetches.
"""

from anifeed.shared.constants import Application

__version__ = Application.VERSION
__author__ = "AniFeed Team"

__all__ = ["__version__"]
