"""SQLite anime cache.

``AnimeCacheDB`` is the facade; the subpackages hold schema migration,
transaction handling and the individual query/insert/delete operations.
"""

from anifeed.services.sqlite_cache.cache_db import AnimeCacheDB

__all__ = ["AnimeCacheDB"]
