"""Protocol models for JSON-RPC 2.0 envelopes and MCP payloads.

Implements the message shapes exchanged over stdio: the inbound message
(request or notification), the outbound response/error envelope, and the
payloads of ``initialize``, ``tools/list`` and ``tools/call``.
"""

from __future__ import annotations

import json
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, model_validator

JSONRPC_VERSION = "2.0"

MessageId = Union[StrictInt, StrictFloat, StrictStr]

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcMessage(BaseModel):
    """An inbound JSON-RPC 2.0 message.

    A message without an ``id`` (absent or null) is a notification and is never
    answered; anything else is a request owed exactly one response.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: MessageId | None = None
    method: StrictStr = ""
    params: dict[str, Any] | None = None

    @property
    def is_notification(self) -> bool:
        return self.id is None


class JsonRpcError(BaseModel):
    """A JSON-RPC error object with a short string ``code`` token."""

    code: str
    message: str


class JsonRpcResponse(BaseModel):
    """An outbound JSON-RPC 2.0 response carrying exactly one of result/error."""

    jsonrpc: str = JSONRPC_VERSION
    id: MessageId | None = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _one_of_result_or_error(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "a response carries exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    def to_wire(self) -> dict[str, Any]:
        """Return the wire dict; ``id`` is always present, null for uncorrelated errors."""
        wire: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            wire["error"] = self.error.model_dump()
        else:
            wire["result"] = self.result
        return wire

    def to_line(self) -> str:
        return dumps_line(self.to_wire())


def dumps_line(payload: Any) -> str:
    """Serialize *payload* as one compact, strict JSON line (no embedded newlines, no NaN)."""
    return json.dumps(payload, separators=(",", ":"), allow_nan=False)


# ---------------------------------------------------------------------------
# initialize
# ---------------------------------------------------------------------------


class ServerInfo(BaseModel):
    name: str
    version: str


class ToolsCapability(BaseModel):
    """Signals tool support; carries no extra flags."""


class ServerCapabilities(BaseModel):
    tools: ToolsCapability = Field(default_factory=ToolsCapability)


class InitializeResult(BaseModel):
    """Server identity returned by ``initialize`` (and the optional startup announcement)."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(alias="protocolVersion")
    server_info: ServerInfo = Field(alias="serverInfo")
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)


# ---------------------------------------------------------------------------
# Tool definitions and tools/list
# ---------------------------------------------------------------------------


class ToolParameter(BaseModel):
    """One parameter of a tool definition."""

    model_config = ConfigDict(frozen=True)

    type: str
    description: str
    required: bool = False


class ToolDefinition(BaseModel):
    """A catalog entry: unique name, description and ordered parameters."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: dict[str, ToolParameter] = Field(default_factory=dict)

    @property
    def required_parameters(self) -> list[str]:
        return [name for name, param in self.parameters.items() if param.required]


class ToolProperty(BaseModel):
    type: str
    description: str


class ToolInputSchema(BaseModel):
    type: str = "object"
    properties: dict[str, ToolProperty] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class MCPTool(BaseModel):
    """A tool as advertised by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    input_schema: ToolInputSchema = Field(default_factory=ToolInputSchema, alias="inputSchema")


class ToolsListResult(BaseModel):
    tools: list[MCPTool] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# tools/call
# ---------------------------------------------------------------------------


class ContentItem(BaseModel):
    type: str = "text"
    text: str


class ToolCallResult(BaseModel):
    content: list[ContentItem] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> ToolCallResult:
        return cls(content=[ContentItem(type="text", text=text)])
