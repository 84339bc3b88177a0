"""
System Constants

Application identity and filesystem locations.
"""

# Base time unit
BASE_SECOND = 1


class Application:
    """Application identity constants."""

    NAME = "AniFeed"
    VERSION = "0.1.0"
    DESCRIPTION = "Network-first anime catalogue with offline cache"


class FileSystem:
    """Filesystem location constants."""

    HOME_DIR = ".anifeed"
    CACHE_DIRECTORY = "cache"
    CACHE_DB_NAME = "anime_cache.db"
    CONFIG_FILE = "config.toml"
