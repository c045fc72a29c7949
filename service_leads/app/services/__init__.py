"""
Read-heavy client services backed by the namespace caches.
"""

from .industries import IndustriesService
from .leads import LeadsService

__all__ = ["IndustriesService", "LeadsService"]
