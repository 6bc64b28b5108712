"""
Tests for the Untappd API client.
"""

import httpx
import pytest

from mcp_untappd.client import UntappdClient
from mcp_untappd.exceptions import UntappdAPIError


class TestRequests:
    """Tests for the requests the client sends."""

    @pytest.mark.asyncio
    async def test_get_beer_info(
        self, config, make_transport, sent_requests, beer_info_body
    ):
        client = UntappdClient(config, transport=make_transport(json=beer_info_body))

        data = await client.get_beer_info("123")

        assert data == beer_info_body
        request = sent_requests[0]
        assert request.method == "GET"
        assert request.url.host == "api.untappd.com"
        assert request.url.path == "/v4/beer/info/123"

    @pytest.mark.asyncio
    async def test_credentials_on_every_request(
        self, config, make_transport, sent_requests
    ):
        client = UntappdClient(config, transport=make_transport(json={}))

        await client.get_beer_info("1")
        await client.search_beer("pale")
        await client.get_user_checkins()

        assert len(sent_requests) == 3
        for request in sent_requests:
            assert request.url.params["client_id"] == "test-client-id"
            assert request.url.params["client_secret"] == "test-secret"

    @pytest.mark.asyncio
    async def test_search_beer(self, config, make_transport, sent_requests):
        client = UntappdClient(config, transport=make_transport(json={}))

        await client.search_beer("Heady Topper")

        request = sent_requests[0]
        assert request.url.path == "/v4/search/beer"
        assert request.url.params["q"] == "Heady Topper"

    @pytest.mark.asyncio
    async def test_user_checkins_limit(self, config, make_transport, sent_requests):
        client = UntappdClient(config, transport=make_transport(json={}))

        await client.get_user_checkins(limit=10)
        await client.get_user_checkins()
        await client.get_user_checkins(limit=10.0)
        await client.get_user_checkins(limit=2.5)

        assert sent_requests[0].url.path == "/v4/user/checkins"
        assert sent_requests[0].url.params["limit"] == "10"
        assert sent_requests[1].url.params["limit"] == "25"
        assert sent_requests[2].url.params["limit"] == "10"
        assert sent_requests[3].url.params["limit"] == "2.5"

    @pytest.mark.asyncio
    async def test_beer_id_stays_in_one_segment(
        self, config, make_transport, sent_requests
    ):
        client = UntappdClient(config, transport=make_transport(json={}))

        await client.get_beer_info("../user/checkins")

        raw_path = sent_requests[0].url.raw_path
        assert raw_path.startswith(b"/v4/beer/info/..%2Fuser%2Fcheckins")


class TestErrors:
    """Tests for mapping failures to UntappdAPIError."""

    @pytest.mark.asyncio
    async def test_error_detail(self, config, make_transport):
        transport = make_transport(
            status_code=404,
            json={"meta": {"code": 404, "error_detail": "Beer not found"}},
        )
        client = UntappdClient(config, transport=transport)

        with pytest.raises(UntappdAPIError) as exc_info:
            await client.get_beer_info("999999")

        assert str(exc_info.value) == "Beer not found"
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Beer not found"

    @pytest.mark.asyncio
    async def test_missing_error_detail(self, config, make_transport):
        client = UntappdClient(
            config, transport=make_transport(status_code=500, json={"meta": {}})
        )

        with pytest.raises(UntappdAPIError) as exc_info:
            await client.search_beer("anything")

        assert str(exc_info.value) == "Request failed with status code 500"
        assert exc_info.value.detail is None

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, config, make_transport):
        client = UntappdClient(
            config,
            transport=make_transport(status_code=502, content=b"<html>Bad Gateway</html>"),
        )

        with pytest.raises(UntappdAPIError, match="status code 502"):
            await client.get_user_checkins()

    @pytest.mark.asyncio
    async def test_secret_not_in_message(self, config, make_transport):
        client = UntappdClient(config, transport=make_transport(status_code=401, json={}))

        with pytest.raises(UntappdAPIError) as exc_info:
            await client.get_beer_info("1")

        assert "test-secret" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error(self, config, make_transport):
        transport = make_transport(exc=httpx.ConnectError("Connection refused"))
        client = UntappdClient(config, transport=transport)

        with pytest.raises(UntappdAPIError, match="Connection refused") as exc_info:
            await client.get_beer_info("1")

        assert exc_info.value.status_code is None
