"""
Addressable ChEMBL resources.

Five URI templates map directly onto upstream records:

    chembl://compound/{chembl_id}
    chembl://target/{chembl_id}
    chembl://assay/{chembl_id}
    chembl://activity/{activity_id}
    chembl://search/{query}

Reading a resource issues one GET and returns the body as pretty-printed
JSON text.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import unquote

from pydantic import BaseModel, ConfigDict, Field

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.exceptions import InvalidRequestError, UpstreamError
from chembl_mcp.core.logging import get_logger
from chembl_mcp.core.types import UpstreamQuery
from chembl_mcp.tools.arguments import DEFAULT_LIMIT

logger = get_logger(__name__)

MIME_TYPE = "application/json"


@dataclass(frozen=True)
class ResourceTemplate:
    """A URI template and the upstream query it resolves to."""

    uri_template: str
    name: str
    description: str
    pattern: re.Pattern[str]
    build_query: Callable[[str], UpstreamQuery]
    failure: Callable[[str], str]

    def to_mcp_schema(self) -> dict[str, Any]:
        return {
            "uriTemplate": self.uri_template,
            "name": self.name,
            "mimeType": MIME_TYPE,
            "description": self.description,
        }


def _search_query(raw: str) -> UpstreamQuery:
    return UpstreamQuery(
        path="/molecule/search.json",
        params={"q": unquote(raw), "limit": DEFAULT_LIMIT},
    )


RESOURCE_TEMPLATES: tuple[ResourceTemplate, ...] = (
    ResourceTemplate(
        uri_template="chembl://compound/{chembl_id}",
        name="ChEMBL compound entry",
        description="Complete compound information for a ChEMBL ID",
        pattern=re.compile(r"^chembl://compound/([A-Z0-9]+)$"),
        build_query=lambda chembl_id: UpstreamQuery(path=f"/molecule/{chembl_id}.json"),
        failure=lambda chembl_id: f"Failed to fetch compound {chembl_id}",
    ),
    ResourceTemplate(
        uri_template="chembl://target/{chembl_id}",
        name="ChEMBL target entry",
        description="Complete target information for a ChEMBL target ID",
        pattern=re.compile(r"^chembl://target/([A-Z0-9]+)$"),
        build_query=lambda chembl_id: UpstreamQuery(path=f"/target/{chembl_id}.json"),
        failure=lambda chembl_id: f"Failed to fetch target {chembl_id}",
    ),
    ResourceTemplate(
        uri_template="chembl://assay/{chembl_id}",
        name="ChEMBL assay entry",
        description="Complete assay information for a ChEMBL assay ID",
        pattern=re.compile(r"^chembl://assay/([A-Z0-9]+)$"),
        build_query=lambda chembl_id: UpstreamQuery(path=f"/assay/{chembl_id}.json"),
        failure=lambda chembl_id: f"Failed to fetch assay {chembl_id}",
    ),
    ResourceTemplate(
        uri_template="chembl://activity/{activity_id}",
        name="ChEMBL activity entry",
        description="Bioactivity measurement data for an activity ID",
        pattern=re.compile(r"^chembl://activity/([0-9]+)$"),
        build_query=lambda activity_id: UpstreamQuery(path=f"/activity/{activity_id}.json"),
        failure=lambda activity_id: f"Failed to fetch activity {activity_id}",
    ),
    ResourceTemplate(
        uri_template="chembl://search/{query}",
        name="ChEMBL search results",
        description="Search results for compounds matching the query",
        pattern=re.compile(r"^chembl://search/(.+)$"),
        build_query=_search_query,
        failure=lambda _: "Failed to search compounds",
    ),
)


class ResourceContent(BaseModel):
    """Contents of a resource read."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uri: str
    mime_type: str = Field(default=MIME_TYPE, alias="mimeType")
    text: str

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def match_resource(uri: str) -> tuple[ResourceTemplate, str]:
    """
    Find the template a URI belongs to.

    Returns:
        The template and the captured identifier or query

    Raises:
        InvalidRequestError: If the URI matches no template
    """
    for template in RESOURCE_TEMPLATES:
        match = template.pattern.match(uri)
        if match:
            return template, match.group(1)
    raise InvalidRequestError(uri)


def resolve_resource(uri: str) -> UpstreamQuery:
    """Translate a resource URI into its upstream query."""
    template, value = match_resource(uri)
    return template.build_query(value)


class ResourceResolver:
    """Reads resources through the shared upstream client."""

    def __init__(self, client: ChemblClient) -> None:
        self._client = client

    @property
    def templates(self) -> tuple[ResourceTemplate, ...]:
        return RESOURCE_TEMPLATES

    async def read(self, uri: str) -> ResourceContent:
        """
        Read a resource.

        Raises:
            InvalidRequestError: If the URI matches no template
            UpstreamError: If the upstream call fails
        """
        template, value = match_resource(uri)
        try:
            body = await self._client.fetch(template.build_query(value))
        except UpstreamError as e:
            logger.error("resource_read_failed", uri=uri, error=e.message)
            raise UpstreamError(
                f"{template.failure(value)}: {e.message}",
                status_code=e.status_code,
                path=e.path,
                cause=e,
            ) from e

        logger.debug("resource_read", uri=uri, template=template.uri_template)
        return ResourceContent(uri=uri, text=json.dumps(body, indent=2))
