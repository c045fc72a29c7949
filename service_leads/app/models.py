"""
Request models for the client services.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class LeadSearchRequest(BaseModel):
    """Lead search filters plus pagination."""

    model_config = ConfigDict(extra="forbid")

    industry: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    has_email: Optional[bool] = None
    has_phone: Optional[bool] = None
    verified: Optional[bool] = None
    page: Optional[int] = None
    limit: Optional[int] = None

    def filters(self) -> dict:
        """Search filters without pagination."""
        return self.model_dump(exclude={"page", "limit"})
