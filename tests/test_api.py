"""Tests for the local data client."""

import httpx
import pytest
from unittest.mock import AsyncMock, patch

from mitoview.api.local_data import LocalDataAPIError, LocalDataClient
from mitoview.models.settings import Settings


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "http://localhost:3000/api/variants")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


class TestLocalDataClient:
    """Tests for LocalDataClient."""

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test async context manager."""
        async with LocalDataClient() as client:
            assert client._client is not None

        # Client should be closed after exit
        assert client._client is None

    @pytest.mark.asyncio
    async def test_fetch_endpoints(self):
        """Test that each collaborator call hits its endpoint."""
        client = LocalDataClient(base_url="http://localhost:3000/api/")

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = [{"samples": []}, [{"position": 1}], {"s1": []}]

            assert await client.load_settings() == {"samples": []}
            assert await client.get_variants() == [{"position": 1}]
            assert await client.get_deletions() == {"s1": []}

            paths = [call.args[1] for call in mock_request.call_args_list]
            assert paths == ["/settings", "/variants", "/deletions"]

        await client.close()

    @pytest.mark.asyncio
    async def test_empty_responses(self):
        """Test that empty bodies load as empty collections."""
        client = LocalDataClient()

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = None

            assert await client.load_settings() == {}
            assert await client.get_variants() == []
            assert await client.get_deletions() == {}

        await client.close()

    @pytest.mark.asyncio
    async def test_http_error_wrapped(self):
        """Test that HTTP errors surface as LocalDataAPIError."""
        client = LocalDataClient()

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = _status_error(500)

            with pytest.raises(LocalDataAPIError, match="HTTP error fetching variants: 500"):
                await client.get_variants()

        await client.close()

    @pytest.mark.asyncio
    async def test_connection_error_wrapped(self):
        """Test that transport errors surface as LocalDataAPIError."""
        client = LocalDataClient()

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.ConnectError("connection refused")

            with pytest.raises(LocalDataAPIError, match="Failed to fetch settings"):
                await client.load_settings()

        await client.close()

    @pytest.mark.asyncio
    async def test_save_settings(self):
        """Test that settings are posted with their original key names."""
        client = LocalDataClient()
        settings = Settings.model_validate({"igvHost": "http://igv", "samples": [{"id": "s1", "bamDir": "/b/"}]})

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.save_settings_to_local(settings)

            method, path = mock_request.call_args.args
            body = mock_request.call_args.kwargs["json"]
            assert (method, path) == ("POST", "/settings")
            assert body["igvHost"] == "http://igv"
            assert body["samples"][0]["bamDir"] == "/b/"

        await client.close()

    @pytest.mark.asyncio
    async def test_save_settings_error(self):
        """Test that a rejected save raises LocalDataAPIError."""
        client = LocalDataClient()

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = _status_error(503)

            with pytest.raises(LocalDataAPIError, match="HTTP error saving settings: 503"):
                await client.save_settings_to_local(Settings())

        await client.close()

    @pytest.mark.asyncio
    async def test_request_decodes_json(self):
        """Test the raw request against a mock transport."""
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/variants"
            return httpx.Response(200, json=[{"position": 73}])

        client = LocalDataClient()
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

        assert await client._request("GET", "/variants") == [{"position": 73}]

        await client.close()
