"""Tool layer: catalog, registry, argument accessors and dispatcher."""

from medium_mcp.tools.arguments import ToolArguments
from medium_mcp.tools.catalog import TOOL_CATALOG
from medium_mcp.tools.dispatcher import ToolDispatcher
from medium_mcp.tools.errors import MissingParameterError, ToolError, ToolNotFoundError
from medium_mcp.tools.registry import ToolRegistry

__all__ = [
    "TOOL_CATALOG",
    "MissingParameterError",
    "ToolArguments",
    "ToolDispatcher",
    "ToolError",
    "ToolNotFoundError",
    "ToolRegistry",
]
