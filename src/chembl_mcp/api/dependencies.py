"""Request dependencies shared by the API routes."""

from __future__ import annotations

from fastapi import Request

from chembl_mcp.resources import ResourceResolver
from chembl_mcp.tools.executor import ToolExecutor


def get_tool_executor(request: Request) -> ToolExecutor:
    return request.app.state.executor


def get_resource_resolver(request: Request) -> ResourceResolver:
    return request.app.state.resolver
