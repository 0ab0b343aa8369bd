"""
FastAPI application factory.

Creates the HTTP inspection API with:
- Tool listing, schemas and invocation
- Resource templates and resource reads
- Health and info endpoints
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chembl_mcp import __version__
from chembl_mcp.api.routes import health, resources, tools
from chembl_mcp.core.config import get_config
from chembl_mcp.core.exceptions import (
    ChemblMCPError,
    InvalidRequestError,
    NotFoundError,
    ToolError,
    UpstreamError,
)
from chembl_mcp.core.logging import configure_logging, get_logger
from chembl_mcp.resources import ResourceResolver
from chembl_mcp.tools.executor import ToolExecutor, get_executor

logger = get_logger(__name__)


def _status_for(exc: ChemblMCPError) -> int:
    if isinstance(exc, (InvalidRequestError, ToolError)):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, UpstreamError):
        return 502
    return 500


def create_app(executor: ToolExecutor | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        executor: Tool executor to serve (defaults to the global executor)

    Returns:
        Configured FastAPI instance
    """
    config = get_config()
    executor = executor or get_executor()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging()
        logger.info(
            "server_starting",
            debug=config.debug,
            upstream=executor.client.base_url,
            tools=len(executor.registry),
        )
        yield
        await executor.client.aclose()
        logger.info("server_stopping")

    app = FastAPI(
        title="ChEMBL MCP",
        description="ChEMBL REST API exposed as MCP tools and resources",
        version=__version__,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
        lifespan=lifespan,
    )
    app.state.executor = executor
    app.state.resolver = ResourceResolver(executor.client)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(ChemblMCPError)
    async def chembl_error_handler(request: Request, exc: ChemblMCPError) -> JSONResponse:
        logger.error(
            "api_error",
            error_type=type(exc).__name__,
            message=exc.message,
            details=exc.details,
        )
        return JSONResponse(
            status_code=_status_for(exc),
            content={
                "error": {
                    "type": type(exc).__name__,
                    "message": exc.message,
                    "details": exc.details,
                }
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error", error=str(exc))
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "type": "InternalError",
                    "message": "An unexpected error occurred",
                }
            },
        )

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(tools.router, prefix="/v1", tags=["Tools"])
    app.include_router(resources.router, prefix="/v1", tags=["Resources"])

    return app
