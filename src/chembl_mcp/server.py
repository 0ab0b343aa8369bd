"""
MCP stdio server.

Binds the operation executor and the resource resolver to the MCP
low-level server. Stdout carries the protocol, so all logging goes to
stderr.
"""

from __future__ import annotations

from typing import Any

import mcp.server.stdio
from mcp import types
from mcp.server import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from chembl_mcp.core.config import get_config
from chembl_mcp.core.exceptions import InvalidRequestError, ToolError, UpstreamError
from chembl_mcp.core.logging import configure_logging, get_logger
from chembl_mcp.resources import RESOURCE_TEMPLATES, ResourceResolver
from chembl_mcp.tools import ToolExecutor, get_executor

logger = get_logger(__name__)


def create_server(
    executor: ToolExecutor | None = None,
    resolver: ResourceResolver | None = None,
) -> Server:
    """
    Build the MCP server.

    Args:
        executor: Tool executor (defaults to the global executor)
        resolver: Resource resolver (defaults to one sharing the executor's client)
    """
    config = get_config()
    executor = executor or get_executor()
    resolver = resolver or ResourceResolver(executor.client)
    server: Server = Server(config.server_name)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=schema["name"],
                description=schema["description"],
                inputSchema=schema["inputSchema"],
            )
            for schema in executor.registry.get_mcp_schemas()
        ]

    # Arguments are validated by each operation's own shape
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await executor.call(name, arguments)
        if result.is_error:
            # The SDK reports a raised exception as an isError result
            raise ToolError(result.text)
        return [types.TextContent(type="text", text=item.text) for item in result.content]

    @server.list_resource_templates()
    async def list_resource_templates() -> list[types.ResourceTemplate]:
        return [
            types.ResourceTemplate(**template.to_mcp_schema())
            for template in RESOURCE_TEMPLATES
        ]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        try:
            content = await resolver.read(str(uri))
        except InvalidRequestError as e:
            raise McpError(types.ErrorData(code=types.INVALID_REQUEST, message=e.message)) from e
        except UpstreamError as e:
            raise McpError(types.ErrorData(code=types.INTERNAL_ERROR, message=e.message)) from e
        return [ReadResourceContents(content=content.text, mime_type=content.mime_type)]

    return server


async def run_stdio() -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    config = get_config()
    configure_logging(config)

    executor = get_executor()
    server = create_server(executor)
    logger.info(
        "server_starting",
        name=config.server_name,
        version=config.server_version,
        tools=len(executor.registry),
        upstream=executor.client.base_url,
    )

    try:
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=config.server_name,
                    server_version=config.server_version,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )
    finally:
        await executor.client.aclose()
        logger.info("server_stopped")
