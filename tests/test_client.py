"""Tests for client.py: the single HTTP call helper."""
import httpx
import pytest

from productplan_mcp.client import ProductPlanAPIError


class TestRequest:
    @pytest.mark.asyncio
    async def test_builds_url_and_headers(self, api):
        await api.client.request("GET", "/roadmaps")
        request = api.last_request
        assert str(request.url) == "https://app.productplan.com/api/v2/roadmaps"
        assert request.method == "GET"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_no_body_without_payload(self, api):
        await api.client.request("GET", "/users")
        assert api.last_request.content == b""

    @pytest.mark.asyncio
    async def test_serializes_body(self, api):
        await api.client.request("POST", "/discovery/ideas", {"title": "Dark mode"})
        assert api.last_body == {"title": "Dark mode"}

    @pytest.mark.asyncio
    async def test_empty_body_is_still_sent(self, api):
        await api.client.request("PATCH", "/bars/b1", {})
        assert api.last_body == {}

    @pytest.mark.asyncio
    async def test_returns_parsed_json(self, api):
        api.respond(200, json=[{"id": "r1"}])
        assert await api.client.request("GET", "/roadmaps") == [{"id": "r1"}]


class TestErrors:
    @pytest.mark.asyncio
    async def test_non_success_keeps_raw_body(self, api):
        api.respond(404, text="not found")
        with pytest.raises(ProductPlanAPIError) as excinfo:
            await api.client.request("GET", "/roadmaps/missing")
        assert excinfo.value.status_code == 404
        assert excinfo.value.body == "not found"
        assert str(excinfo.value) == "API error 404: not found"

    @pytest.mark.asyncio
    async def test_invalid_json_on_success_raises(self, api):
        api.respond(200, text="<html>oops</html>")
        with pytest.raises(ValueError):
            await api.client.request("GET", "/status")

    @pytest.mark.asyncio
    async def test_network_error_propagates(self, api):
        api.fail_with(httpx.ConnectError("connection refused"))
        with pytest.raises(httpx.ConnectError):
            await api.client.request("GET", "/status")
