"""
Unit tests for the backend API client.
"""

import httpx
import pytest

from service_leads.app.adapters.api_client import LeadsApiClient
from shared.errors import ExternalServiceError, NotFoundError


def make_client(handler) -> LeadsApiClient:
    transport = httpx.MockTransport(handler)
    return LeadsApiClient("http://api.test/", client=httpx.AsyncClient(transport=transport))


class TestLeadsApiClient:
    """Test cases for LeadsApiClient."""

    @pytest.mark.asyncio
    async def test_get_json_success(self):
        """Test a 200 response is decoded and None params are dropped."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"industries": [], "total": 0})

        client = make_client(handler)
        result = await client.get_json("/api/v1/industries/with-leads", params={"country": "US", "city": None})

        assert result == {"industries": [], "total": 0}
        assert seen["url"] == "http://api.test/api/v1/industries/with-leads?country=US"

    @pytest.mark.asyncio
    async def test_get_json_not_found(self):
        """Test 404 raises NotFoundError."""
        client = make_client(lambda request: httpx.Response(404, json={"detail": "missing"}))

        with pytest.raises(NotFoundError) as exc_info:
            await client.get_json("/leads/999")

        assert exc_info.value.code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_get_json_server_error(self):
        """Test other statuses raise ExternalServiceError with details."""
        client = make_client(lambda request: httpx.Response(503, text="maintenance"))

        with pytest.raises(ExternalServiceError) as exc_info:
            await client.get_json("/leads")

        assert exc_info.value.details == {"status_code": 503, "body": "maintenance"}
        assert exc_info.value.message == "leads_api: Unexpected status 503"

    @pytest.mark.asyncio
    async def test_transport_error_wrapped(self):
        """Test connection failures become ExternalServiceError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(ExternalServiceError) as exc_info:
            await client.get_json("/leads")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_aclose_leaves_injected_client_open(self):
        """Test an injected HTTP client is owned by the caller."""
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
        client = LeadsApiClient("http://api.test", client=http_client)

        await client.aclose()

        assert http_client.is_closed is False
        await http_client.aclose()

    def test_error_response(self):
        """Test errors convert to the standard response model."""
        error = NotFoundError("Not found: /leads/1", details={"url": "http://api.test/leads/1"})

        response = error.to_response()

        assert response.code == "NOT_FOUND"
        assert response.message == "Not found: /leads/1"
        assert response.details == {"url": "http://api.test/leads/1"}
