"""
Backend API client for the leads client services.
"""

from typing import Any, Dict, Optional
import httpx

from shared.logging import get_logger
from shared.errors import ExternalServiceError, NotFoundError


class LeadsApiClient:
    """Thin async JSON client for the leads backend."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.logger = get_logger("leads.api_client")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a path and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        query = {key: value for key, value in (params or {}).items() if value is not None}

        try:
            response = await self._client.get(url, params=query)
        except httpx.HTTPError as exc:
            self.logger.error("Backend request error", url=url, params=query, error=str(exc))
            raise ExternalServiceError(
                service="leads_api",
                message=str(exc),
                details={"url": url, "params": query}
            ) from exc

        if response.status_code == 200:
            self.logger.debug("Backend response retrieved", url=url, params=query)
            return response.json()

        if response.status_code == 404:
            self.logger.info("Backend resource not found", url=url, params=query)
            raise NotFoundError(f"Not found: {path}", details={"url": url})

        self.logger.error(
            "Backend request failed",
            url=url,
            params=query,
            status_code=response.status_code,
            response=response.text
        )
        raise ExternalServiceError(
            service="leads_api",
            message=f"Unexpected status {response.status_code}",
            details={"status_code": response.status_code, "body": response.text}
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
