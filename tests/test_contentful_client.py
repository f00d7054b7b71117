"""Tests for ContentfulClient and fetch_content_types"""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, Mock, patch

import aiohttp
import pytest
import requests

from contentful_schema.client import ContentfulClient, fetch_content_types
from contentful_schema.reporting import ContentfulAPIError


@pytest.fixture
def client():
    return ContentfulClient(space_id="space123", access_token="token", environment="staging")


class TestClientSetup:
    """Test URL and header construction"""

    def test_base_url(self, client):
        assert client.base_url == "https://cdn.contentful.com/spaces/space123/environments/staging"

    def test_headers(self, client):
        assert client.headers["Authorization"] == "Bearer token"

    def test_from_config(self, plugin_config):
        client = ContentfulClient.from_config(plugin_config)

        assert client.space_id == "space123"
        assert client.environment == "master"
        assert client.access_token == "token"


class TestRequest:
    """Test blocking requests"""

    def test_returns_json(self, client):
        with patch("requests.get") as mock_get:
            mock_get.return_value = Mock(status_code=200, json=Mock(return_value={"items": []}))

            result = client.request("/content_types", {"limit": 10})

        assert result == {"items": []}
        mock_get.assert_called_once()
        assert mock_get.call_args[0][0] == f"{client.base_url}/content_types"
        assert mock_get.call_args[1]["params"] == {"limit": 10}

    def test_http_error_returns_none(self, client):
        with patch("requests.get") as mock_get:
            mock_get.return_value = Mock(status_code=401, text="Unauthorized")

            assert client.request("/content_types") is None

    def test_connection_error_returns_none(self, client):
        with patch("requests.get", side_effect=requests.exceptions.ConnectionError("down")):
            assert client.request("/content_types", context="listing") is None

    def test_timeout_returns_none(self, client):
        with patch("requests.get", side_effect=requests.exceptions.Timeout("slow")):
            assert client.request("/content_types") is None

    def test_get_content_types_pages(self, client):
        pages = [
            {"items": [{"sys": {"id": "a"}}, {"sys": {"id": "b"}}], "total": 3},
            {"items": [{"sys": {"id": "c"}}], "total": 3},
        ]
        client.request = MagicMock(side_effect=pages)

        result = client.get_content_types(page_limit=2)

        assert [c["sys"]["id"] for c in result] == ["a", "b", "c"]
        assert client.request.call_count == 2
        assert client.request.call_args_list[1][0][1] == {"skip": 2, "limit": 2}

    def test_get_content_types_failure(self, client):
        client.request = MagicMock(return_value=None)

        assert client.get_content_types() is None


class TestRequestAsync:
    """Test error handling in request_async"""

    @pytest.mark.asyncio
    async def test_returns_json(self, client):
        async with aiohttp.ClientSession() as session:
            mock_response = AsyncMock()
            mock_response.status = 200
            mock_response.json = AsyncMock(return_value={"items": [], "total": 0})

            with patch.object(session, "get") as mock_get:
                mock_get.return_value.__aenter__.return_value = mock_response

                result = await client.request_async(session, "/content_types")

        assert result == {"items": [], "total": 0}

    @pytest.mark.asyncio
    async def test_http_error_status_code(self, client):
        async with aiohttp.ClientSession() as session:
            mock_response = AsyncMock()
            mock_response.status = 404
            mock_response.text = AsyncMock(return_value="Not Found")

            with patch.object(session, "get") as mock_get:
                mock_get.return_value.__aenter__.return_value = mock_response

                with pytest.raises(ContentfulAPIError, match="HTTP Error 404") as exc_info:
                    await client.request_async(session, "/content_types")

        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_connection_error_with_context(self, client):
        async with aiohttp.ClientSession() as session:
            with patch.object(session, "get", side_effect=aiohttp.ClientConnectionError("Connection failed")):
                with pytest.raises(aiohttp.ClientConnectionError, match=r"Connection error \[listing\]"):
                    await client.request_async(session, "/content_types", context="listing")

    @pytest.mark.asyncio
    async def test_timeout_error_with_context(self, client):
        async with aiohttp.ClientSession() as session:
            with patch.object(session, "get", side_effect=aiohttp.ServerTimeoutError("too slow")):
                with pytest.raises(aiohttp.ServerTimeoutError, match="Request timeout"):
                    await client.request_async(session, "/content_types", context="listing")

    @pytest.mark.asyncio
    async def test_total_timeout_logged_with_context(self, client, caplog):
        async with aiohttp.ClientSession() as session:
            with patch.object(session, "get", side_effect=asyncio.TimeoutError()):
                with caplog.at_level(logging.ERROR):
                    with pytest.raises(asyncio.TimeoutError):
                        await client.request_async(session, "/content_types", context="listing")

        assert "Request timeout [listing]" in caplog.text

    @pytest.mark.asyncio
    async def test_client_error_reraised(self, client):
        async with aiohttp.ClientSession() as session:
            with patch.object(session, "get", side_effect=aiohttp.ClientError("Client error")):
                with pytest.raises(aiohttp.ClientError, match="Client error"):
                    await client.request_async(session, "/content_types")

    @pytest.mark.asyncio
    async def test_paged_get_follows_total(self, client):
        client.request_async = AsyncMock(
            side_effect=[
                {"items": [{"sys": {"id": "a"}}], "total": 2},
                {"items": [{"sys": {"id": "b"}}], "total": 2},
            ]
        )

        result = await client.paged_get_async(MagicMock(), "/content_types", page_limit=1)

        assert result == [{"sys": {"id": "a"}}, {"sys": {"id": "b"}}]
        assert client.request_async.await_count == 2
        assert client.request_async.call_args_list[1][1]["params"]["skip"] == 1

    @pytest.mark.asyncio
    async def test_paged_get_stops_on_empty_page(self, client):
        client.request_async = AsyncMock(return_value={"items": [], "total": 10})

        assert await client.paged_get_async(MagicMock(), "/content_types") == []
        client.request_async.assert_awaited_once()


class TestFetchContentTypes:
    """Test the fetch collaborator"""

    @pytest.mark.asyncio
    async def test_fetches_with_config_page_limit(self, plugin_config, reporter, content_types):
        with patch.object(ContentfulClient, "paged_get_async", new_callable=AsyncMock) as mock_paged:
            mock_paged.return_value = content_types

            result = await fetch_content_types(plugin_config, reporter)

        assert result == content_types
        mock_paged.assert_awaited_once()
        assert mock_paged.call_args[0][1] == "/content_types"
        assert mock_paged.call_args[0][2] == plugin_config.page_limit
        assert reporter.verbose.call_count == 2 + len(content_types)

    @pytest.mark.asyncio
    async def test_errors_propagate(self, plugin_config, reporter):
        with patch.object(ContentfulClient, "paged_get_async", new_callable=AsyncMock) as mock_paged:
            mock_paged.side_effect = ContentfulAPIError("HTTP Error 401", status=401)

            with pytest.raises(ContentfulAPIError):
                await fetch_content_types(plugin_config, reporter)
