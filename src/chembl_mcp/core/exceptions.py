"""
Custom exceptions for chembl-mcp.

All exceptions inherit from ChemblMCPError for consistent error handling.
"""

from __future__ import annotations

from typing import Any


class ChemblMCPError(Exception):
    """Base exception for all chembl-mcp errors."""

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | details={self.details}"
        return self.message


# Configuration errors
class ConfigurationError(ChemblMCPError):
    """Invalid or missing configuration."""

    pass


# Tool errors
class ToolError(ChemblMCPError):
    """Base class for tool-related errors."""

    pass


class UnknownOperationError(ToolError):
    """Requested operation is not registered."""

    def __init__(self, operation: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown tool: {operation}", **kwargs)
        self.operation = operation


class InvalidParametersError(ToolError):
    """Tool arguments failed validation before any upstream call."""

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        validation_errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(f"Invalid {operation} arguments: {message}", **kwargs)
        self.operation = operation
        self.validation_errors = validation_errors or []


# Upstream errors
class UpstreamError(ChemblMCPError):
    """The ChEMBL API call failed (HTTP error, network failure or timeout)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        path: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.path = path


class NotFoundError(UpstreamError):
    """An upstream lookup succeeded but matched nothing."""

    pass


# Resource errors
class InvalidRequestError(ChemblMCPError):
    """A resource URI does not match any known template."""

    def __init__(self, uri: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid URI format: {uri}", **kwargs)
        self.uri = uri
