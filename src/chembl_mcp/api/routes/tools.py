"""
Tool endpoints.

Provides APIs for listing, describing, and invoking tools.
"""

from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from chembl_mcp.api.dependencies import get_tool_executor
from chembl_mcp.core.logging import get_logger
from chembl_mcp.tools.executor import ToolExecutor
from chembl_mcp.tools.registry import Operation

logger = get_logger(__name__)

router = APIRouter()


class ToolInfo(BaseModel):
    """Information about a registered tool."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")
    tags: list[str]

    @classmethod
    def from_operation(cls, op: Operation) -> ToolInfo:
        schema = op.to_mcp_schema()
        return cls(
            name=op.name,
            description=op.description,
            input_schema=schema["inputSchema"],
            tags=sorted(op.tags),
        )


class ToolInvokeRequest(BaseModel):
    """Request to invoke a tool directly."""

    name: str = Field(..., description="Tool name")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Tool arguments")


class ToolInvokeResponse(BaseModel):
    """Response from tool invocation."""

    model_config = ConfigDict(populate_by_name=True)

    tool_name: str
    content: list[dict[str, Any]]
    is_error: bool = Field(alias="isError")
    execution_time_ms: float


@router.get("/tools", response_model_by_alias=True)
async def list_tools(
    tag: str | None = None,
    executor: ToolExecutor = Depends(get_tool_executor),
) -> list[ToolInfo]:
    """
    List all registered tools.

    Optionally filter by tag.
    """
    tags_filter = {tag} if tag else None
    return [ToolInfo.from_operation(op) for op in executor.registry.list(tags=tags_filter)]


@router.get("/tools/{tool_name}", response_model_by_alias=True)
async def get_tool(
    tool_name: str,
    executor: ToolExecutor = Depends(get_tool_executor),
) -> ToolInfo:
    """
    Get information about a specific tool.
    """
    if tool_name not in executor.registry:
        raise HTTPException(status_code=404, detail=f"Tool not found: {tool_name}")

    return ToolInfo.from_operation(executor.registry.get(tool_name))


@router.post("/tools/invoke", response_model_by_alias=True)
async def invoke_tool(
    request: ToolInvokeRequest,
    executor: ToolExecutor = Depends(get_tool_executor),
) -> ToolInvokeResponse:
    """
    Invoke a tool directly.

    Failures are reported in the result (`isError`), exactly as over MCP.
    """
    if request.name not in executor.registry:
        raise HTTPException(status_code=404, detail=f"Tool not found: {request.name}")

    logger.info("tool_invoke_request", tool=request.name)

    start_time = time.perf_counter()
    result = await executor.call(request.name, request.arguments)

    wire = result.to_wire()
    return ToolInvokeResponse(
        tool_name=request.name,
        content=wire["content"],
        is_error=wire["isError"],
        execution_time_ms=(time.perf_counter() - start_time) * 1000,
    )
