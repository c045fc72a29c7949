"""
Lead search and detail lookups with read-through caching.
"""

from typing import Any, Dict, Union

from shared.logging import get_logger
from ..adapters.api_client import LeadsApiClient
from ..caching import CacheKeys, CacheStore, CacheTTL, drop_unspecified, generate_cache_key
from ..models import LeadSearchRequest


SearchParams = Union[LeadSearchRequest, Dict[str, Any]]


def _as_request(params: SearchParams) -> LeadSearchRequest:
    if isinstance(params, LeadSearchRequest):
        return params
    return LeadSearchRequest(**params)


class LeadsService:
    """Lead lookups cached in the leads namespace."""

    def __init__(self, api_client: LeadsApiClient, cache: CacheStore):
        self.api_client = api_client
        self.cache = cache
        self.logger = get_logger("leads.service")

    async def search(self, params: SearchParams) -> Dict[str, Any]:
        """Search leads. Each distinct filter and page combination is cached."""
        request = _as_request(params)
        query = drop_unspecified(request.model_dump())
        cache_key = generate_cache_key(CacheKeys.LEADS_SEARCH, query)
        self.logger.debug("Searching leads", filters=query)

        return await self.cache.get_or_set(
            cache_key,
            lambda: self.api_client.get_json("/leads", params=query),
            CacheTTL.MEDIUM,
        )

    async def get_by_id(self, lead_id: Union[int, str]) -> Dict[str, Any]:
        return await self.cache.get_or_set(
            CacheKeys.lead_detail(lead_id),
            lambda: self.api_client.get_json(f"/leads/{lead_id}"),
            CacheTTL.MEDIUM,
        )

    async def get_usage(self) -> Dict[str, Any]:
        # Usage counters must always be fresh.
        return await self.api_client.get_json("/user/usage")

    async def preview(self, params: SearchParams) -> Dict[str, Any]:
        """Preview aggregate counts for a search without pagination.

        Previews do not consume credits and change slowly, so they use the
        long tier and ignore ``page``/``limit`` in the key.
        """
        filters = drop_unspecified(_as_request(params).filters())
        cache_key = generate_cache_key(CacheKeys.LEADS_PREVIEW, filters)

        return await self.cache.get_or_set(
            cache_key,
            lambda: self.api_client.get_json("/leads/preview", params=filters),
            CacheTTL.LONG,
        )

    def clear_cache(self) -> None:
        """Drop cached leads, e.g. after an export or a significant filter change."""
        self.cache.clear()
