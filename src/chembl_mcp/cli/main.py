"""
chembl-mcp CLI - Main entry point.

Runs the MCP stdio server or the HTTP inspection API, and exposes the
toolset for direct use from a shell.
"""

from __future__ import annotations

import asyncio
import json
import sys

import click

from chembl_mcp import __version__
from chembl_mcp.cli.ui import (
    S_PRIMARY,
    S_SECONDARY,
    console,
    create_table,
    print_error_block,
    print_header,
    print_info,
    print_json,
)
from chembl_mcp.core.config import get_config
from chembl_mcp.core.exceptions import ChemblMCPError, InvalidRequestError
from chembl_mcp.core.logging import configure_logging


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx, version):
    """
    CHEMBL-MCP - ChEMBL REST API over the Model Context Protocol

    \b
    Commands:
      chembl-mcp serve        MCP server on stdin/stdout
      chembl-mcp serve-http   HTTP inspection API
      chembl-mcp tools        List available tools
      chembl-mcp call         Invoke a tool
      chembl-mcp read         Read a chembl:// resource
    """
    if version:
        console.print(f"chembl-mcp {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# =============================================================================
# SERVERS
# =============================================================================

@cli.command()
def serve():
    """
    Run the MCP server over stdio.

    Stdout carries the protocol; logs go to stderr.
    """
    from chembl_mcp.server import run_stdio

    asyncio.run(run_stdio())


@cli.command("serve-http")
@click.option("--host", default=None, help="Bind address (default: from configuration)")
@click.option("--port", "-p", default=None, type=int, help="Port (default: from configuration)")
def serve_http(host, port):
    """
    Run the HTTP inspection API.

    \b
    Examples:
      chembl-mcp serve-http
      chembl-mcp serve-http --host 0.0.0.0 -p 9000
    """
    import uvicorn

    config = get_config()
    uvicorn.run(
        "chembl_mcp.api.app:create_app",
        factory=True,
        host=host or config.server.host,
        port=port or config.server.port,
        log_level=config.logging.level.lower(),
    )


# =============================================================================
# TOOLS
# =============================================================================

@cli.command()
@click.option("--tag", "-t", default=None, help="Only tools with this tag")
def tools(tag):
    """List available tools."""
    from chembl_mcp.tools import get_registry

    operations = get_registry().list(tags={tag} if tag else None)

    print_header("Tools", f"{len(operations)} available")
    table = create_table()
    table.add_column("Name", style=S_PRIMARY)
    table.add_column("Tags", style=S_SECONDARY)
    table.add_column("Description")
    for op in operations:
        table.add_row(op.name, ", ".join(sorted(op.tags)), op.description)
    console.print(table)


@cli.command()
@click.argument("name")
@click.option("--args", "-a", "raw_args", default="{}", help="Tool arguments as a JSON object")
def call(name, raw_args):
    """
    Invoke a tool and print its result.

    \b
    Examples:
      chembl-mcp call get_compound_info --args '{"chembl_id": "CHEMBL25"}'
      chembl-mcp call advanced_search -a '{"max_mw": 350, "max_logp": 3}'
    """
    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--args") from e

    configure_logging()
    result = asyncio.run(_call(name, arguments))

    if result.is_error:
        print_error_block("ToolError", result.text)
        sys.exit(1)
    print_json(result.text)


async def _call(name, arguments):
    from chembl_mcp.client import ChemblClient
    from chembl_mcp.tools import ToolExecutor

    async with ChemblClient() as client:
        return await ToolExecutor(client).call(name, arguments)


# =============================================================================
# RESOURCES
# =============================================================================

@cli.command()
@click.argument("uri")
def read(uri):
    """
    Read a chembl:// resource.

    \b
    Examples:
      chembl-mcp read chembl://compound/CHEMBL25
      chembl-mcp read chembl://search/aspirin
    """
    configure_logging()
    try:
        content = asyncio.run(_read(uri))
    except InvalidRequestError as e:
        print_error_block(type(e).__name__, e.message, resolution=_uri_hint())
        sys.exit(1)
    except ChemblMCPError as e:
        print_error_block(type(e).__name__, e.message)
        sys.exit(1)

    print_info(f"{content.uri} ({content.mime_type})")
    print_json(content.text)


def _uri_hint():
    from chembl_mcp.resources import RESOURCE_TEMPLATES

    return "Use one of: " + ", ".join(t.uri_template for t in RESOURCE_TEMPLATES)


async def _read(uri):
    from chembl_mcp.client import ChemblClient
    from chembl_mcp.resources import ResourceResolver

    async with ChemblClient() as client:
        return await ResourceResolver(client).read(uri)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
