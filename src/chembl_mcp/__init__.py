"""
chembl-mcp: the ChEMBL REST API as Model Context Protocol tools.

Provides:

- 27 validated tools over compounds, targets, bioactivities and drugs
- Derived-property estimates (drug-likeness, solubility, ADMET)
- chembl:// resource templates for direct record reads
- An MCP stdio server, an HTTP inspection API and a CLI
"""

__version__ = "1.0.0"

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.types import ToolRequest, ToolResult
from chembl_mcp.resources import ResourceResolver
from chembl_mcp.tools import ToolExecutor, get_executor, get_registry

__all__ = [
    "__version__",
    "ChemblClient",
    "ResourceResolver",
    "ToolExecutor",
    "ToolRequest",
    "ToolResult",
    "get_executor",
    "get_registry",
]
