"""
Client caching package.

Provides the in-process TTL cache used by the client services to avoid
redundant network calls for read-heavy reference and search data. Prefer
the named TTL tiers and explicit invalidation over ad hoc durations.
"""

from .cache_store import CacheEntry, CacheStore, DEFAULT_TTL
from .keys import CacheKeys, drop_unspecified, generate_cache_key
from .namespaces import CacheNamespace, CacheRegistry, CacheTTL

__all__ = [
    "CacheEntry",
    "CacheKeys",
    "CacheNamespace",
    "CacheRegistry",
    "CacheStore",
    "CacheTTL",
    "DEFAULT_TTL",
    "drop_unspecified",
    "generate_cache_key",
]
