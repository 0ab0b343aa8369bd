"""Tests for the MCP server bindings."""

import json

import pytest
from mcp import types
from mcp.shared.exceptions import McpError

from chembl_mcp.server import create_server


@pytest.fixture
def server(executor):
    return create_server(executor)


class TestMCPServer:
    @pytest.mark.asyncio
    async def test_list_tools(self, server):
        handler = server.request_handlers[types.ListToolsRequest]
        result = await handler(types.ListToolsRequest(method="tools/list"))
        tools = result.root.tools
        assert len(tools) == 27
        assert all(tool.inputSchema["type"] == "object" for tool in tools)

    @pytest.mark.asyncio
    async def test_call_tool(self, server, upstream, aspirin):
        upstream.add("/molecule/CHEMBL25.json", aspirin)
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(
            types.CallToolRequest(
                method="tools/call",
                params=types.CallToolRequestParams(
                    name="get_compound_info", arguments={"chembl_id": "CHEMBL25"}
                ),
            )
        )
        assert result.root.isError is False
        assert json.loads(result.root.content[0].text) == aspirin

    @pytest.mark.asyncio
    async def test_call_tool_error(self, server, upstream):
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(
            types.CallToolRequest(
                method="tools/call",
                params=types.CallToolRequestParams(name="search_activities", arguments={"limit": 10}),
            )
        )
        assert result.root.isError is True
        assert result.root.content[0].text.startswith("Error executing tool search_activities:")
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_list_resource_templates(self, server):
        handler = server.request_handlers[types.ListResourceTemplatesRequest]
        result = await handler(types.ListResourceTemplatesRequest(method="resources/templates/list"))
        assert [t.uriTemplate for t in result.root.resourceTemplates][0] == "chembl://compound/{chembl_id}"

    @pytest.mark.asyncio
    async def test_read_resource(self, server, upstream):
        upstream.add("/assay/CHEMBL1614421.json", {"assay_chembl_id": "CHEMBL1614421"})
        handler = server.request_handlers[types.ReadResourceRequest]
        result = await handler(
            types.ReadResourceRequest(
                method="resources/read",
                params=types.ReadResourceRequestParams(uri="chembl://assay/CHEMBL1614421"),
            )
        )
        contents = result.root.contents
        assert contents[0].mimeType == "application/json"
        assert json.loads(contents[0].text) == {"assay_chembl_id": "CHEMBL1614421"}

    @pytest.mark.asyncio
    async def test_read_unknown_uri_is_invalid_request(self, server, upstream):
        handler = server.request_handlers[types.ReadResourceRequest]
        with pytest.raises(McpError) as exc:
            await handler(
                types.ReadResourceRequest(
                    method="resources/read",
                    params=types.ReadResourceRequestParams(uri="chembl://nothing/1"),
                )
            )
        assert exc.value.error.code == types.INVALID_REQUEST
        assert exc.value.error.message == "Invalid URI format: chembl://nothing/1"
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_read_upstream_failure_is_internal_error(self, server):
        handler = server.request_handlers[types.ReadResourceRequest]
        with pytest.raises(McpError) as exc:
            await handler(
                types.ReadResourceRequest(
                    method="resources/read",
                    params=types.ReadResourceRequestParams(uri="chembl://compound/CHEMBL0"),
                )
            )
        assert exc.value.error.code == types.INTERNAL_ERROR
        assert exc.value.error.message.startswith("Failed to fetch compound CHEMBL0")
