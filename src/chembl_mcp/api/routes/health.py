"""Health check endpoints."""

from fastapi import APIRouter, Depends

from chembl_mcp import __version__
from chembl_mcp.api.dependencies import get_tool_executor
from chembl_mcp.core.config import get_config
from chembl_mcp.tools.executor import ToolExecutor

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/info")
async def info(executor: ToolExecutor = Depends(get_tool_executor)) -> dict:
    """Server information endpoint."""
    config = get_config()
    return {
        "name": config.server_name,
        "version": __version__,
        "upstream": executor.client.base_url,
        "tools": len(executor.registry),
    }
