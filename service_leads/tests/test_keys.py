"""
Unit tests for canonical cache key construction.
"""

import pytest

from service_leads.app.caching.keys import CacheKeys, drop_unspecified, generate_cache_key
from service_leads.app.models import LeadSearchRequest


class TestGenerateCacheKey:
    """Test cases for generate_cache_key."""

    def test_parameter_order_does_not_matter(self):
        """Test equal bags in different insertion order give equal keys."""
        first = generate_cache_key("leads:search", {"country": "US", "industry": "tech", "page": 2})
        second = generate_cache_key("leads:search", {"page": 2, "industry": "tech", "country": "US"})

        assert first == second

    def test_empty_values_are_ignored(self):
        """Test None and empty-string parameters do not affect the key."""
        base = generate_cache_key("industries", {})

        assert generate_cache_key("industries", {"country": None}) == base
        assert generate_cache_key("industries", {"country": None, "city": ""}) == base
        assert generate_cache_key("industries") == base

    @pytest.mark.parametrize("empty", [None, ""])
    def test_dropping_one_empty_entry_keeps_key(self, empty):
        """Test a bag differing only by one empty entry yields the same key."""
        params = {"country": "US", "page": 1}

        assert generate_cache_key("leads:search", {**params, "city": empty}) == generate_cache_key("leads:search", params)

    def test_empty_bag_is_stable(self):
        """Test the no-filter key is identical across calls."""
        assert generate_cache_key("industries", {}) == "industries:{}"
        assert generate_cache_key("industries", {}) == generate_cache_key("industries", {})

    def test_format_is_prefix_and_sorted_json(self):
        """Test the serialized form of a key."""
        key = generate_cache_key("leads:search", {"page": 1, "country": "US", "verified": True})

        assert key == 'leads:search:{"country":"US","page":1,"verified":true}'

    def test_falsy_non_empty_values_are_kept(self):
        """Test False and 0 are meaningful and change the key."""
        base = generate_cache_key("leads:search", {})

        assert generate_cache_key("leads:search", {"has_email": False}) != base
        assert generate_cache_key("leads:search", {"page": 0}) != base

    def test_primitive_types_are_preserved(self):
        """Test 1 and "1" produce different keys."""
        assert generate_cache_key("leads", {"page": 1}) != generate_cache_key("leads", {"page": "1"})

    def test_different_values_give_different_keys(self):
        """Test any differing non-empty value changes the key."""
        us = generate_cache_key("leads:search", {"country": "US"})
        de = generate_cache_key("leads:search", {"country": "DE"})

        assert us != de

    def test_different_prefixes_give_different_keys(self):
        """Test the prefix participates in the key."""
        params = {"country": "US"}

        assert generate_cache_key("leads:search", params) != generate_cache_key("leads:preview", params)

    def test_nested_values_are_not_reordered(self):
        """Test nested structures are serialized as given."""
        first = generate_cache_key("leads", {"filters": {"a": 1, "b": 2}})
        second = generate_cache_key("leads", {"filters": {"b": 2, "a": 1}})

        assert first == 'leads:{"filters":{"a":1,"b":2}}'
        assert first != second

    def test_accepts_pydantic_model(self):
        """Test request models are canonicalized like dicts."""
        request = LeadSearchRequest(country="US", industry="tech", page=1)

        assert generate_cache_key("leads:search", request) == generate_cache_key(
            "leads:search", {"industry": "tech", "page": 1, "country": "US"}
        )


class TestDropUnspecified:
    """Test cases for drop_unspecified."""

    def test_removes_none_and_empty_string_only(self):
        """Test None and "" are removed while False and 0 are kept."""
        params = {"country": "US", "city": "", "industry": None, "has_email": False, "page": 0}

        assert drop_unspecified(params) == {"country": "US", "has_email": False, "page": 0}

    def test_does_not_mutate_input(self):
        """Test the caller's bag is left untouched."""
        params = {"city": ""}

        drop_unspecified(params)

        assert params == {"city": ""}


class TestCacheKeys:
    """Test cases for the fixed key table."""

    def test_entity_keys(self):
        """Test per-entity key builders."""
        assert CacheKeys.lead_detail(42) == "leads:42"
        assert CacheKeys.industry("tech") == "industry:tech"
        assert CacheKeys.sub_niches("tech") == "sub-niches:tech"
        assert CacheKeys.INDUSTRIES_ALL == "industries:all"
        assert CacheKeys.LEADS_SEARCH == "leads:search"
        assert CacheKeys.LEADS_PREVIEW == "leads:preview"
        assert CacheKeys.INDUSTRIES_WITH_LEADS == "industries:with-leads"
