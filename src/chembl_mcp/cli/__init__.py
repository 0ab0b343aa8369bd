"""
chembl-mcp CLI.

Server launchers and direct tool invocation from a shell.
"""

from chembl_mcp.cli.main import cli, main

__all__ = ["cli", "main"]
