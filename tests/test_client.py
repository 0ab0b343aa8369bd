"""Tests for the upstream client."""

import httpx
import pytest

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.config import UpstreamConfig
from chembl_mcp.core.exceptions import ConfigurationError, UpstreamError
from chembl_mcp.core.types import UpstreamQuery


class TestConfig:
    def test_defaults(self):
        config = UpstreamConfig()
        assert config.base_url == "https://www.ebi.ac.uk/chembl/api/data"
        assert config.timeout == 30.0
        assert config.headers == {
            "User-Agent": "ChEMBL-MCP-Server/1.0.0",
            "Accept": "application/json",
        }

    def test_trailing_slash_stripped(self):
        assert UpstreamConfig(base_url="https://chembl.test/api/").base_url == "https://chembl.test/api"

    def test_rejects_non_http_base_url(self):
        with pytest.raises(ConfigurationError) as exc:
            UpstreamConfig(base_url="ftp://chembl.test/api")
        assert exc.value.details == {"setting": "CHEMBL_MCP_UPSTREAM_BASE_URL"}

    def test_rejects_base_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("CHEMBL_MCP_UPSTREAM_BASE_URL", "chembl.test")
        with pytest.raises(ConfigurationError):
            UpstreamConfig()


class TestChemblClient:
    @pytest.mark.asyncio
    async def test_get_sends_headers_and_drops_none(self, client, upstream):
        upstream.add("/molecule.json", {"molecules": []})
        body = await client.get("/molecule.json", {"limit": 1, "q": None})

        assert body == {"molecules": []}
        request = upstream.requests[0]
        assert request.method == "GET"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == "ChEMBL-MCP-Server/1.0.0"
        assert dict(request.url.params) == {"limit": "1"}

    @pytest.mark.asyncio
    async def test_http_status_error(self, client, upstream):
        upstream.add("/molecule/CHEMBL1.json", {"error": "boom"}, status=500)
        with pytest.raises(UpstreamError) as exc:
            await client.fetch(UpstreamQuery(path="/molecule/CHEMBL1.json"))
        assert exc.value.message == "Request failed with status code 500"
        assert exc.value.status_code == 500
        assert exc.value.path == "/molecule/CHEMBL1.json"

    @pytest.mark.asyncio
    async def test_timeout(self, client, upstream):
        def timeout(request):
            raise httpx.ReadTimeout("timed out", request=request)

        upstream.add_handler("/activity.json", timeout)
        with pytest.raises(UpstreamError) as exc:
            await client.get("/activity.json")
        assert exc.value.message == "timeout of 30s exceeded"
        assert exc.value.status_code is None

    @pytest.mark.asyncio
    async def test_network_error(self, client, upstream):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        upstream.add_handler("/target.json", refuse)
        with pytest.raises(UpstreamError) as exc:
            await client.get("/target.json")
        assert exc.value.message == "Connection refused"

    @pytest.mark.asyncio
    async def test_non_json_body(self, client, upstream):
        upstream.add_text("/assay/CHEMBL1.json", "<html>maintenance</html>")
        with pytest.raises(UpstreamError) as exc:
            await client.get("/assay/CHEMBL1.json")
        assert exc.value.message == "Upstream returned a non-JSON response"

    @pytest.mark.asyncio
    async def test_fetch_optional_swallows_upstream_errors(self, client, upstream):
        upstream.add("/mechanism.json", {}, status=503)
        assert await client.fetch_optional(UpstreamQuery(path="/mechanism.json")) is None

    @pytest.mark.asyncio
    async def test_fetch_optional_returns_body(self, client, upstream):
        upstream.add("/mechanism.json", {"mechanisms": []})
        assert await client.fetch_optional(UpstreamQuery(path="/mechanism.json")) == {"mechanisms": []}

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, upstream):
        async with ChemblClient(
            UpstreamConfig(base_url="https://chembl.test/api/data"),
            transport=httpx.MockTransport(upstream.handler),
        ) as client:
            assert client.base_url == "https://chembl.test/api/data"
        assert client._http.is_closed
