"""Protocol layer: JSON-RPC models, stdio transport and the message loop."""

from medium_mcp.protocol.engine import ProtocolEngine, SessionState, build_identity
from medium_mcp.protocol.errors import (
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
)
from medium_mcp.protocol.models import (
    JsonRpcError,
    JsonRpcMessage,
    JsonRpcResponse,
    MCPTool,
    ToolDefinition,
    ToolParameter,
)
from medium_mcp.protocol.transport import LineTransport, StdioTransport

__all__ = [
    "InternalError",
    "InvalidParamsError",
    "JsonRpcError",
    "JsonRpcMessage",
    "JsonRpcResponse",
    "LineTransport",
    "MCPTool",
    "MethodNotFoundError",
    "ParseError",
    "ProtocolEngine",
    "ProtocolError",
    "SessionState",
    "StdioTransport",
    "ToolDefinition",
    "ToolParameter",
    "build_identity",
]
