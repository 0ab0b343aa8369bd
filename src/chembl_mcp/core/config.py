"""
Configuration management for chembl-mcp.

Settings come from CHEMBL_MCP_* environment variables, falling back
to the defaults below. An unusable upstream URL fails at load time
with ConfigurationError.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chembl_mcp.core.exceptions import ConfigurationError


class UpstreamConfig(BaseSettings):
    """ChEMBL REST API connection settings."""

    model_config = SettingsConfigDict(env_prefix="CHEMBL_MCP_UPSTREAM_")

    base_url: str = "https://www.ebi.ac.uk/chembl/api/data"
    timeout: float = 30.0
    user_agent: str = "ChEMBL-MCP-Server/1.0.0"

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        """Require an http(s) URL; paths are joined with a leading slash."""
        if not v.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Upstream base URL must be http or https: {v!r}",
                details={"setting": "CHEMBL_MCP_UPSTREAM_BASE_URL"},
            )
        return v.rstrip("/")

    @property
    def headers(self) -> dict[str, str]:
        """Fixed request headers sent with every upstream call."""
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }


class ServerConfig(BaseSettings):
    """HTTP inspection API configuration."""

    model_config = SettingsConfigDict(env_prefix="CHEMBL_MCP_SERVER_")

    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="CHEMBL_MCP_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"


class ChemblMCPConfig(BaseSettings):
    """
    Root configuration for chembl-mcp.

    All configuration values can be set via environment variables
    with the CHEMBL_MCP_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHEMBL_MCP_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    server_name: str = "chembl-server"
    server_version: str = "1.0.0"
    debug: bool = False

    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_config() -> ChemblMCPConfig:
    """
    Get the global configuration.

    This is cached for performance. Call `get_config.cache_clear()`
    to reload configuration.
    """
    return ChemblMCPConfig()
