"""Operation registry and execution system."""

from chembl_mcp.tools.registry import (
    Operation,
    OperationRegistry,
    get_registry,
    operation,
    query_operation,
)
from chembl_mcp.tools.executor import ToolExecutor, get_executor

# Importing the toolset registers every ChEMBL operation
from chembl_mcp.tools import chembl

__all__ = [
    "Operation",
    "OperationRegistry",
    "ToolExecutor",
    "chembl",
    "get_executor",
    "get_registry",
    "operation",
    "query_operation",
]
