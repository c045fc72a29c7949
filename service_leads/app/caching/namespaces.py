"""
Cache namespaces and TTL tiers.
"""

import asyncio
import time
from typing import Any, Callable, Dict, Optional

from shared.logging import get_logger
from shared.errors import ValidationError
from .cache_store import CacheStore, DEFAULT_TTL


class CacheTTL:
    """Named freshness tiers, in seconds."""
    SHORT = 60
    MEDIUM = 300
    LONG = 900
    VERY_LONG = 3600


class CacheNamespace:
    """Logical data domains with independently clearable stores."""
    LEADS = "leads"
    INDUSTRIES = "industries"
    GENERAL = "general"

    ALL = (LEADS, INDUSTRIES, GENERAL)


class CacheRegistry:
    """Owns one CacheStore per namespace."""

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
        *,
        dedupe_inflight: bool = False,
    ):
        self.logger = get_logger("leads.cache_registry")
        self._stores: Dict[str, CacheStore] = {
            name: CacheStore(default_ttl, clock, name=name, dedupe_inflight=dedupe_inflight)
            for name in CacheNamespace.ALL
        }

        # Cleanup task
        self._cleanup_task: Optional[asyncio.Task] = None
        self.running = False

    def store(self, namespace: str) -> CacheStore:
        """Get the store for a namespace."""
        try:
            return self._stores[namespace]
        except KeyError:
            raise ValidationError(
                f"Unknown cache namespace: {namespace}",
                details={"namespace": namespace, "known": list(self._stores)}
            ) from None

    @property
    def leads(self) -> CacheStore:
        return self._stores[CacheNamespace.LEADS]

    @property
    def industries(self) -> CacheStore:
        return self._stores[CacheNamespace.INDUSTRIES]

    @property
    def general(self) -> CacheStore:
        return self._stores[CacheNamespace.GENERAL]

    def clear(self, namespace: str) -> None:
        """Clear a single namespace, leaving the others intact."""
        self.store(namespace).clear()

    def clear_all(self) -> None:
        for cache_store in self._stores.values():
            cache_store.clear()

    def cleanup_all(self) -> Dict[str, int]:
        """Remove expired entries from every namespace."""
        return {name: cache_store.cleanup() for name, cache_store in self._stores.items()}

    def stats(self) -> Dict[str, Dict[str, Any]]:
        return {name: cache_store.stats() for name, cache_store in self._stores.items()}

    async def start_cleanup(self, interval_seconds: float) -> None:
        """Start periodic cleanup. A non-positive interval leaves it disabled."""
        if interval_seconds <= 0 or self._cleanup_task is not None:
            return

        self.running = True
        self._cleanup_task = asyncio.create_task(self._cleanup_loop(interval_seconds))
        self.logger.info("Cache cleanup started", interval_seconds=interval_seconds)

    async def stop_cleanup(self) -> None:
        """Stop periodic cleanup."""
        self.running = False
        if self._cleanup_task:
            self._cleanup_task.cancel()
            try:
                await self._cleanup_task
            except asyncio.CancelledError:
                pass
            self._cleanup_task = None

        self.logger.info("Cache cleanup stopped")

    async def _cleanup_loop(self, interval_seconds: float) -> None:
        while self.running:
            await asyncio.sleep(interval_seconds)
            removed = self.cleanup_all()
            if any(removed.values()):
                self.logger.debug("Periodic cache cleanup", removed=removed)
