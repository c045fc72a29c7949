"""
Composition root for the client services.

Builds the cache registry, the backend client, and the services once, and
hands them to callers explicitly instead of relying on module-level
singletons.
"""

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

import httpx

from shared.config import ClientConfig, get_config
from shared.logging import clear_context, configure_logging, get_logger, set_request_id, set_user_context
from .adapters.api_client import LeadsApiClient
from .caching import CacheRegistry
from .services import IndustriesService, LeadsService


@dataclass
class ServiceContainer:
    """Wired client services and the caches they share."""
    config: ClientConfig
    caches: CacheRegistry
    api_client: LeadsApiClient
    leads: LeadsService
    industries: IndustriesService

    async def start(self) -> None:
        await self.caches.start_cleanup(self.config.cache_cleanup_interval_seconds)

    async def aclose(self) -> None:
        await self.caches.stop_cleanup()
        await self.api_client.aclose()

    @contextmanager
    def request_scope(
        self,
        request_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Iterator[str]:
        """Tag logs and errors raised inside the block with a request ID."""
        request_id = set_request_id(request_id)
        set_user_context(user_id)
        try:
            yield request_id
        finally:
            clear_context()


def build_container(
    config: Optional[ClientConfig] = None,
    *,
    clock: Callable[[], float] = time.monotonic,
    http_client: Optional[httpx.AsyncClient] = None,
    configure_logs: bool = True,
) -> ServiceContainer:
    """Create the client services from configuration."""
    config = config or get_config()
    if configure_logs:
        configure_logging("leads", config.log_level)

    caches = CacheRegistry(
        config.cache_default_ttl_seconds,
        clock,
        dedupe_inflight=config.cache_dedupe_inflight,
    )
    api_client = LeadsApiClient(
        config.api_url,
        timeout=config.http_timeout_seconds,
        client=http_client,
    )

    get_logger("leads.container").info(
        "Client services created",
        env=config.env,
        api_url=config.api_url,
        default_ttl=config.cache_default_ttl_seconds,
        dedupe_inflight=config.cache_dedupe_inflight,
    )
    return ServiceContainer(
        config=config,
        caches=caches,
        api_client=api_client,
        leads=LeadsService(api_client, caches.leads),
        industries=IndustriesService(api_client, caches.industries),
    )
