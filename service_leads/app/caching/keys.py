"""
Canonical cache key construction.
"""

import json
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel


def _is_unspecified(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def drop_unspecified(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of params without entries set to ``None`` or ``""``."""
    return {name: value for name, value in params.items() if not _is_unspecified(value)}


def generate_cache_key(
    prefix: str,
    params: Optional[Union[Mapping[str, Any], BaseModel]] = None,
) -> str:
    """Build a deterministic cache key from a prefix and a parameter bag.

    Parameters set to ``None`` or ``""`` are treated as not specified and
    dropped, and the remaining names are sorted, so equivalent bags always
    produce the same key. Only the top level is canonicalized: nested dicts
    and lists are serialized in the order given.

    >>> generate_cache_key("leads:search", {"page": 1, "country": "US", "city": None})
    'leads:search:{"country":"US","page":1}'
    """
    if params is None:
        params = {}
    elif isinstance(params, BaseModel):
        params = params.model_dump()

    specified = drop_unspecified(params)
    canonical: Dict[str, Any] = {name: specified[name] for name in sorted(specified)}
    serialized = json.dumps(canonical, separators=(",", ":"), ensure_ascii=False, default=str)
    return f"{prefix}:{serialized}"


class CacheKeys:
    """Fixed cache key names and builders used by the client services."""

    INDUSTRIES_ALL = "industries:all"

    # Prefixes for generate_cache_key
    LEADS_SEARCH = "leads:search"
    LEADS_PREVIEW = "leads:preview"
    INDUSTRIES_WITH_LEADS = "industries:with-leads"

    @staticmethod
    def lead_detail(lead_id: Union[int, str]) -> str:
        return f"leads:{lead_id}"

    @staticmethod
    def industry(industry_id: str) -> str:
        return f"industry:{industry_id}"

    @staticmethod
    def sub_niches(industry_id: str) -> str:
        return f"sub-niches:{industry_id}"
