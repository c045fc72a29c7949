"""
Industry catalog lookups with read-through caching.
"""

from typing import Any, Dict, List, Optional

from shared.logging import get_logger
from ..adapters.api_client import LeadsApiClient
from ..caching import CacheKeys, CacheStore, CacheTTL, generate_cache_key


class IndustriesService:
    """Industry reference data cached in the industries namespace."""

    def __init__(self, api_client: LeadsApiClient, cache: CacheStore):
        self.api_client = api_client
        self.cache = cache
        self.logger = get_logger("leads.industries_service")

    async def get_all_industries(self) -> Dict[str, Any]:
        """Get all industries grouped by category."""
        return await self.cache.get_or_set(
            CacheKeys.INDUSTRIES_ALL,
            lambda: self.api_client.get_json("/api/v1/industries"),
            CacheTTL.VERY_LONG,
        )

    async def get_industry(self, industry_id: str) -> Dict[str, Any]:
        return await self.cache.get_or_set(
            CacheKeys.industry(industry_id),
            lambda: self.api_client.get_json(f"/api/v1/industries/{industry_id}"),
            CacheTTL.VERY_LONG,
        )

    async def get_industries_list(self) -> List[Dict[str, Any]]:
        """Flat list of all industries, for simple dropdowns."""
        response = await self.get_all_industries()
        return [
            industry
            for category in (response or {}).get("categories") or []
            for industry in category.get("industries") or []
        ]

    async def get_industries_with_leads(
        self,
        country: Optional[str] = None,
        city: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Industries that currently have leads, with counts.

        Counts change frequently, so this uses the medium tier.
        """
        filters = {"country": country or None, "city": city or None}
        cache_key = generate_cache_key(CacheKeys.INDUSTRIES_WITH_LEADS, filters)
        self.logger.debug("Fetching industries with leads", country=country, city=city)

        return await self.cache.get_or_set(
            cache_key,
            lambda: self.api_client.get_json("/api/v1/industries/with-leads", params=filters),
            CacheTTL.MEDIUM,
        )

    async def get_sub_niches(self, industry_id: str) -> Dict[str, Any]:
        return await self.cache.get_or_set(
            CacheKeys.sub_niches(industry_id),
            lambda: self.api_client.get_json(f"/api/v1/industries/{industry_id}/sub-niches"),
            CacheTTL.VERY_LONG,
        )

    def clear_cache(self) -> None:
        self.cache.clear()
