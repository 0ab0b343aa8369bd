"""
Tool execution engine.

Dispatches a ToolRequest through its operation's pipeline:
- Operation lookup
- Argument validation (before any upstream call)
- Handler execution against the shared upstream client
- Conversion of every failure into an error ToolResult
"""

from __future__ import annotations

import time
from typing import Any

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.exceptions import (
    ChemblMCPError,
    InvalidParametersError,
    UnknownOperationError,
    UpstreamError,
)
from chembl_mcp.core.logging import bind_context, clear_context, get_logger
from chembl_mcp.core.types import ToolRequest, ToolResult
from chembl_mcp.tools.registry import OperationRegistry, get_registry

logger = get_logger(__name__)


class ToolExecutor:
    """
    Executes tool requests with validation and error reporting.

    Holds no per-request state; one executor serves every call.
    """

    def __init__(
        self,
        client: ChemblClient,
        registry: OperationRegistry | None = None,
    ) -> None:
        """
        Initialize the tool executor.

        Args:
            client: Upstream client shared by all operations
            registry: Operation registry to use (defaults to global)
        """
        self._client = client
        self._registry = registry or get_registry()

    @property
    def registry(self) -> OperationRegistry:
        return self._registry

    @property
    def client(self) -> ChemblClient:
        return self._client

    async def call(self, operation: str, arguments: Any = None) -> ToolResult:
        """Convenience wrapper building the ToolRequest. Only None means no arguments."""
        if arguments is None:
            arguments = {}
        return await self.execute(ToolRequest(operation=operation, arguments=arguments))

    async def execute(self, request: ToolRequest) -> ToolResult:
        """
        Execute a tool request.

        Args:
            request: The tool request to execute

        Returns:
            ToolResult with the JSON payload, or an error result
        """
        name = request.operation
        start_time = time.perf_counter()
        bind_context(request_id=request.id, tool=name)

        try:
            operation = self._registry.get(name)
            args = operation.parse(request.arguments)
            payload = await operation.run(self._client, args)

            logger.debug(
                "tool_executed",
                execution_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            return ToolResult.from_payload(payload)

        except UnknownOperationError as e:
            logger.warning("tool_not_found")
            return ToolResult.from_error(name, e.message)

        except InvalidParametersError as e:
            logger.warning("tool_validation_error", errors=e.validation_errors)
            return ToolResult.from_error(name, e.message)

        except UpstreamError as e:
            logger.error(
                "tool_upstream_error",
                error=e.message,
                status_code=e.status_code,
                path=e.path,
                execution_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            return ToolResult.from_error(name, e.message)

        except ChemblMCPError as e:
            logger.error("tool_execution_error", error=str(e))
            return ToolResult.from_error(name, e.message)

        except Exception as e:
            logger.error("tool_unexpected_error", error=str(e), exc_info=True)
            return ToolResult.from_error(name, f"Unexpected error: {e}")

        finally:
            clear_context()


# Default executor instance
_executor: ToolExecutor | None = None


def get_executor() -> ToolExecutor:
    """Get the global tool executor, creating its client on first use."""
    global _executor
    if _executor is None:
        _executor = ToolExecutor(ChemblClient())
    return _executor
