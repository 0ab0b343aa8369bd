"""
Operation registry for the ChEMBL toolset.

Every tool is registered here as an `Operation`: an argument shape, an
async handler, and, for single-request tools, the query builder the
handler uses. The registry provides:
- Operation registration via decorators
- MCP-compatible tool definitions (name, description, inputSchema)
- Lookup by operation identifier and tag filtering
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from chembl_mcp.core.exceptions import UnknownOperationError
from chembl_mcp.core.logging import get_logger
from chembl_mcp.core.types import UpstreamQuery
from chembl_mcp.tools.arguments import ToolArguments, parse_arguments

if TYPE_CHECKING:
    from chembl_mcp.client import ChemblClient

logger = get_logger(__name__)

Handler = Callable[["ChemblClient", Any], Awaitable[Any]]
QueryBuilder = Callable[[Any], UpstreamQuery]
Shaper = Callable[[Any, Any], Any]


def _simplify_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Collapse pydantic's Optional encoding into a plain JSON Schema property."""
    schema = dict(schema)
    options = schema.pop("anyOf", None)
    if options is not None:
        non_null = [o for o in options if o.get("type") != "null"]
        if len(non_null) == 1:
            schema = {**non_null[0], **schema}
        else:
            schema["anyOf"] = non_null
    schema.pop("title", None)
    if schema.get("default", 0) is None:
        schema.pop("default")
    if "items" in schema:
        schema["items"] = _simplify_schema(schema["items"])
    return schema


def input_schema(model: type[ToolArguments]) -> dict[str, Any]:
    """
    Build the JSON Schema advertised to callers for an argument shape.

    Args:
        model: The argument shape

    Returns:
        An object schema with properties, bounds, enums and required fields
    """
    raw = model.model_json_schema()
    properties = {
        name: _simplify_schema(prop)
        for name, prop in raw.get("properties", {}).items()
    }
    return {
        "type": "object",
        "properties": properties,
        "required": list(raw.get("required", [])),
    }


@dataclass
class Operation:
    """
    A registered tool.

    Operations are typed pipelines with:
    - An argument shape validated before any I/O
    - An async handler that talks to the upstream client
    - An optional query builder, exposed for single-request tools
    """

    name: str
    description: str
    arguments: type[ToolArguments]
    handler: Handler
    build_query: QueryBuilder | None = None
    tags: set[str] = field(default_factory=set)

    def parse(self, raw: Any) -> ToolArguments:
        """Validate raw arguments; raises InvalidParametersError."""
        return parse_arguments(self.arguments, raw, self.name)

    async def run(self, client: ChemblClient, args: ToolArguments) -> Any:
        """Execute the operation with validated arguments."""
        return await self.handler(client, args)

    def to_mcp_schema(self) -> dict[str, Any]:
        """Convert to an MCP tool definition."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": input_schema(self.arguments),
        }


class OperationRegistry:
    """
    Central registry for all available operations.

    The only place that knows every operation identifier.
    """

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {}
        self._tags: dict[str, set[str]] = {}  # tag -> operation names

    def _add(self, operation: Operation) -> None:
        self._operations[operation.name] = operation
        for tag in operation.tags:
            self._tags.setdefault(tag, set()).add(operation.name)
        logger.debug("operation_registered", name=operation.name, tags=sorted(operation.tags))

    def operation(
        self,
        name: str,
        arguments: type[ToolArguments],
        *,
        description: str | None = None,
        tags: set[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """
        Decorator registering an async handler `(client, args) -> payload`.

        Use for operations that issue several upstream calls or need
        custom control flow.
        """

        def decorator(func: Handler) -> Handler:
            self._add(
                Operation(
                    name=name,
                    description=(description or func.__doc__ or "").strip(),
                    arguments=arguments,
                    handler=func,
                    tags=tags or set(),
                )
            )
            return func

        return decorator

    def query(
        self,
        name: str,
        arguments: type[ToolArguments],
        *,
        shape: Shaper | None = None,
        description: str | None = None,
        tags: set[str] | None = None,
    ) -> Callable[[QueryBuilder], QueryBuilder]:
        """
        Decorator registering a single-request operation from its query builder.

        The upstream body is returned verbatim unless a `shape(args, body)`
        function is given.
        """

        def decorator(build: QueryBuilder) -> QueryBuilder:
            async def handler(client: ChemblClient, args: Any) -> Any:
                body = await client.fetch(build(args))
                return shape(args, body) if shape else body

            self._add(
                Operation(
                    name=name,
                    description=(description or build.__doc__ or "").strip(),
                    arguments=arguments,
                    handler=handler,
                    build_query=build,
                    tags=tags or set(),
                )
            )
            return build

        return decorator

    def get(self, name: str) -> Operation:
        """
        Get an operation by name.

        Raises:
            UnknownOperationError: If no operation has this name
        """
        if name not in self._operations:
            raise UnknownOperationError(name)
        return self._operations[name]

    def list(self, tags: set[str] | None = None) -> list[Operation]:
        """
        List registered operations, optionally only those with ALL given tags.
        """
        if tags is None:
            return list(self._operations.values())

        matching_names: set[str] | None = None
        for tag in tags:
            tag_ops = self._tags.get(tag, set())
            if matching_names is None:
                matching_names = tag_ops.copy()
            else:
                matching_names &= tag_ops

        if not matching_names:
            return []

        return [op for name, op in self._operations.items() if name in matching_names]

    def get_mcp_schemas(self, names: list[str] | None = None) -> list[dict[str, Any]]:
        """
        Get MCP tool definitions.

        Args:
            names: Specific operations to include (all if None)
        """
        if names is None:
            operations = self._operations.values()
        else:
            operations = [self._operations[n] for n in names if n in self._operations]
        return [op.to_mcp_schema() for op in operations]

    def __contains__(self, name: str) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)


# Global registry instance
_registry: OperationRegistry | None = None


def get_registry() -> OperationRegistry:
    """Get the global operation registry."""
    global _registry
    if _registry is None:
        _registry = OperationRegistry()
    return _registry


def operation(
    name: str,
    arguments: type[ToolArguments],
    *,
    description: str | None = None,
    tags: set[str] | None = None,
) -> Callable[[Handler], Handler]:
    """Register a custom handler in the global registry."""
    return get_registry().operation(name, arguments, description=description, tags=tags)


def query_operation(
    name: str,
    arguments: type[ToolArguments],
    *,
    shape: Shaper | None = None,
    description: str | None = None,
    tags: set[str] | None = None,
) -> Callable[[QueryBuilder], QueryBuilder]:
    """
    Register a single-request operation in the global registry.

    Example:
        @query_operation("get_target_info", IdentifierArgs, tags={"target"})
        def get_target_info(args: IdentifierArgs) -> UpstreamQuery:
            '''Get detailed information for a specific target.'''
            return UpstreamQuery(path=f"/target/{args.chembl_id}.json")
    """
    return get_registry().query(
        name, arguments, shape=shape, description=description, tags=tags
    )
