"""
ChEMBL REST API client.

One configured `httpx.AsyncClient` is shared by every operation. It is
the only I/O boundary of the gateway: every translated query is issued
here as a GET, and every failure leaves as an UpstreamError.

API Documentation:
- https://chembl.gitbook.io/chembl-interface-documentation/web-services
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from chembl_mcp.core.config import UpstreamConfig, get_config
from chembl_mcp.core.exceptions import UpstreamError
from chembl_mcp.core.logging import get_logger
from chembl_mcp.core.types import UpstreamQuery

logger = get_logger(__name__)


class ChemblClient:
    """
    Async client for the ChEMBL data API.

    Stateless apart from the underlying connection pool, so a single
    instance is safely reused across concurrent tool calls.
    """

    def __init__(
        self,
        config: UpstreamConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Upstream settings (defaults to global configuration)
            transport: Optional httpx transport, used to stub the API in tests
        """
        self._config = config or get_config().upstream
        self._http = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            headers=self._config.headers,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def timeout(self) -> float:
        return self._config.timeout

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Args:
            path: Path relative to the base URL (e.g. "/molecule/CHEMBL25.json")
            params: Query parameters; None values are dropped

        Returns:
            Decoded JSON body

        Raises:
            UpstreamError: On HTTP error status, network failure, timeout
                or an undecodable body
        """
        clean = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug("upstream_request", path=path, params=clean)

        try:
            response = await self._http.get(path, params=clean)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise UpstreamError(
                f"timeout of {self._config.timeout:g}s exceeded",
                path=path,
                cause=e,
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise UpstreamError(
                f"Request failed with status code {status}",
                status_code=status,
                path=path,
                cause=e,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(str(e) or type(e).__name__, path=path, cause=e) from e

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                "Upstream returned a non-JSON response",
                status_code=response.status_code,
                path=path,
                cause=e,
            ) from e

    async def fetch(self, query: UpstreamQuery) -> Any:
        """Execute a translated query."""
        return await self.get(query.path, query.params)

    async def fetch_optional(self, query: UpstreamQuery) -> Any | None:
        """
        Execute a query whose failure must not fail the calling operation.

        Returns:
            Decoded JSON body, or None if the call failed
        """
        try:
            return await self.fetch(query)
        except UpstreamError as e:
            logger.warning(
                "optional_upstream_failed",
                path=query.path,
                error=e.message,
                status_code=e.status_code,
            )
            return None

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> ChemblClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
