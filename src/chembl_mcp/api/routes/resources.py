"""Resource template and resource read endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from chembl_mcp.api.dependencies import get_resource_resolver
from chembl_mcp.resources import ResourceResolver

router = APIRouter()


@router.get("/resources/templates")
async def list_resource_templates(
    resolver: ResourceResolver = Depends(get_resource_resolver),
) -> list[dict[str, Any]]:
    """List the addressable resource URI templates."""
    return [template.to_mcp_schema() for template in resolver.templates]


@router.get("/resources")
async def read_resource(
    uri: str = Query(..., description="Resource URI, e.g. chembl://compound/CHEMBL25"),
    resolver: ResourceResolver = Depends(get_resource_resolver),
) -> dict[str, Any]:
    """
    Read a resource.

    Unknown URIs and upstream failures are reported through the
    application's error handler.
    """
    content = await resolver.read(uri)
    return {"contents": [content.to_wire()]}
