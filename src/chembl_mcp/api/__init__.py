"""HTTP inspection API."""

from chembl_mcp.api.app import create_app

__all__ = ["create_app"]
