"""Core chembl-mcp components."""

from chembl_mcp.core.types import (
    CompoundProperties,
    TextContent,
    ToolRequest,
    ToolResult,
    UpstreamQuery,
)

__all__ = [
    "CompoundProperties",
    "TextContent",
    "ToolRequest",
    "ToolResult",
    "UpstreamQuery",
]
