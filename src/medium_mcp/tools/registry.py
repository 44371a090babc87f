"""ToolRegistry owns the immutable catalog and projects the capability schema."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from medium_mcp.protocol.models import (
    MCPTool,
    ToolDefinition,
    ToolInputSchema,
    ToolProperty,
    ToolsListResult,
)
from medium_mcp.tools.catalog import TOOL_CATALOG


class ToolRegistry:
    """Read-only catalog of :class:`ToolDefinition` entries.

    The ``tools/list`` projection is recomputed on every call; since the
    catalog never changes the output is identical each time.
    """

    def __init__(self, definitions: Iterable[ToolDefinition] = TOOL_CATALOG) -> None:
        self._definitions = tuple(definitions)
        self._by_name: dict[str, ToolDefinition] = {}
        for definition in self._definitions:
            key = definition.name.lower()
            if key in self._by_name:
                msg = f"Duplicate tool name: {definition.name}"
                raise ValueError(msg)
            self._by_name[key] = definition

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_name

    def definitions(self) -> tuple[ToolDefinition, ...]:
        return self._definitions

    def names(self) -> list[str]:
        return [d.name for d in self._definitions]

    def get(self, name: str) -> ToolDefinition | None:
        """Case-insensitive lookup."""
        return self._by_name.get(name.lower())

    def list_tools(self) -> list[MCPTool]:
        """Project every definition into its ``tools/list`` shape."""
        return [self._to_mcp_tool(d) for d in self._definitions]

    def schema_payload(self) -> dict[str, Any]:
        """Return the ``tools/list`` result as a wire dict."""
        return ToolsListResult(tools=self.list_tools()).model_dump(by_alias=True)

    @staticmethod
    def _to_mcp_tool(definition: ToolDefinition) -> MCPTool:
        return MCPTool(
            name=definition.name,
            description=definition.description,
            input_schema=ToolInputSchema(
                type="object",
                properties={
                    name: ToolProperty(type=param.type, description=param.description)
                    for name, param in definition.parameters.items()
                },
                required=definition.required_parameters,
            ),
        )
