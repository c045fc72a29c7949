"""
In-process TTL cache store for client services.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar

from shared.logging import get_logger


T = TypeVar("T")

DEFAULT_TTL = 300.0


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Cached value with its absolute expiry time."""
    data: T
    expiry: float


class CacheStore:
    """Expiry-based key/value cache for one namespace.

    Entries are evicted lazily when a read observes them expired, or in bulk
    by ``cleanup``. An entry is fresh while ``clock() < expiry``.

    All operations except ``get_or_set`` are synchronous and never suspend,
    so they are atomic with respect to each other on a single event loop.
    ``get_or_set`` suspends while awaiting its fetcher; unless
    ``dedupe_inflight`` is enabled, concurrent calls for the same key may
    each run their fetcher and the last one to finish wins.
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
        *,
        name: str = "general",
        dedupe_inflight: bool = False,
    ):
        self.name = name
        self.default_ttl = default_ttl
        self.dedupe_inflight = dedupe_inflight
        self.logger = get_logger("leads.cache")

        self._clock = clock
        self._entries: Dict[str, CacheEntry[Any]] = {}
        self._inflight: Dict[str, "asyncio.Task[Any]"] = {}
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def _read_fresh(self, key: str) -> Optional[CacheEntry[Any]]:
        """Return the entry for key if fresh, evicting it if expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() >= entry.expiry:
            del self._entries[key]
            return None

        return entry

    def set(self, key: str, data: Any, ttl: Optional[float] = None) -> None:
        """Store data under key, replacing any previous entry."""
        cache_ttl = self.default_ttl if ttl is None else ttl
        self._entries[key] = CacheEntry(data=data, expiry=self._clock() + cache_ttl)
        self.logger.debug("Cached value", namespace=self.name, key=key, ttl=cache_ttl)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a fresh value, or default when absent or expired."""
        entry = self._read_fresh(key)
        if entry is None:
            self._misses += 1
            return default

        self._hits += 1
        return entry.data

    def has(self, key: str) -> bool:
        """Check whether key holds a fresh entry."""
        return self._read_fresh(key) is not None

    def delete(self, key: str) -> None:
        """Remove key if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every entry in this namespace."""
        count = len(self._entries)
        self._entries.clear()
        self.logger.info("Cleared cache namespace", namespace=self.name, keys_count=count)

    def cleanup(self) -> int:
        """Remove all expired entries. Returns the number removed."""
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if now >= entry.expiry]
        for key in expired:
            del self._entries[key]

        if expired:
            self.logger.debug("Removed expired entries", namespace=self.name, keys_count=len(expired))
        return len(expired)

    async def get_or_set(
        self,
        key: str,
        fetcher: Callable[[], Awaitable[T]],
        ttl: Optional[float] = None,
    ) -> T:
        """Return the cached value for key, fetching and storing it on a miss.

        Exceptions raised by ``fetcher`` propagate unchanged and leave the
        key unpopulated.
        """
        entry = self._read_fresh(key)
        if entry is not None:
            self._hits += 1
            self.logger.debug("Cache hit", namespace=self.name, key=key)
            return entry.data

        self._misses += 1
        self.logger.debug("Cache miss, fetching", namespace=self.name, key=key)

        if not self.dedupe_inflight:
            data = await fetcher()
            self.set(key, data, ttl)
            return data

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_store(key, fetcher, ttl))
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._release_inflight(key, done))
        else:
            self.logger.debug("Joining in-flight fetch", namespace=self.name, key=key)

        # A cancelled waiter must not cancel the fetch other waiters share.
        return await asyncio.shield(task)

    async def _fetch_and_store(
        self,
        key: str,
        fetcher: Callable[[], Awaitable[T]],
        ttl: Optional[float],
    ) -> T:
        data = await fetcher()
        self.set(key, data, ttl)
        return data

    def _release_inflight(self, key: str, task: "asyncio.Task[Any]") -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        # Mark the failure as retrieved when every waiter has gone away.
        if not task.cancelled():
            task.exception()

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics for this namespace."""
        return {
            "namespace": self.name,
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "inflight": len(self._inflight),
        }
