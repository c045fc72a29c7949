"""
Adapters for the backend HTTP API.
"""

from .api_client import LeadsApiClient

__all__ = ["LeadsApiClient"]
