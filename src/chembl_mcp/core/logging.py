"""
Structured logging for chembl-mcp.

Everything is written to stderr: stdout carries the MCP stdio protocol
and must never receive log lines. The stream is looked up on every
write, so a redirected sys.stderr is honored after configuration.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.types import Processor

from chembl_mcp.core.config import ChemblMCPConfig, get_config

_configured = False


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(sys.stderr)


def _processors(fmt: str) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if fmt == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _apply(level: int, fmt: str) -> None:
    global _configured
    structlog.configure(
        processors=_processors(fmt),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
    _configured = True


def configure_logging(config: ChemblMCPConfig | None = None) -> None:
    """Configure level and renderer from the logging section of the config."""
    config = config or get_config()
    _apply(_level(config.logging.level), config.logging.format)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a structured logger.

    Before configure_logging runs, lines are rendered for the console at
    the level named by CHEMBL_MCP_LOG_LEVEL.
    """
    if not _configured:
        _apply(_level(os.environ.get("CHEMBL_MCP_LOG_LEVEL", "INFO")), "console")
    return structlog.get_logger(name)


def bind_context(**context: Any) -> None:
    """Tag every subsequent log line in this context (e.g. with a request id)."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
