"""Tests for JSON-RPC envelopes and MCP payload models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from medium_mcp.protocol.models import (
    InitializeResult,
    JsonRpcError,
    JsonRpcMessage,
    JsonRpcResponse,
    MCPTool,
    ServerInfo,
    ToolCallResult,
    ToolDefinition,
    ToolParameter,
    dumps_line,
)


class TestJsonRpcMessage:
    def test_request(self) -> None:
        msg = JsonRpcMessage.model_validate({"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert msg.id == 1
        assert not msg.is_notification

    def test_missing_id_is_notification(self) -> None:
        msg = JsonRpcMessage.model_validate({"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert msg.is_notification

    def test_string_id_not_coerced(self) -> None:
        msg = JsonRpcMessage.model_validate({"id": "1", "method": "ping"})
        assert msg.id == "1"
        assert isinstance(msg.id, str)

    def test_boolean_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcMessage.model_validate({"id": True, "method": "ping"})

    def test_params_must_be_object(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcMessage.model_validate({"id": 1, "method": "tools/call", "params": [1]})


class TestJsonRpcResponse:
    def test_result_wire_form(self) -> None:
        resp = JsonRpcResponse(id=1, result={})
        assert resp.to_line() == '{"jsonrpc":"2.0","id":1,"result":{}}'

    def test_error_wire_form_keeps_null_id(self) -> None:
        resp = JsonRpcResponse(id=None, error=JsonRpcError(code="parse_error", message="bad"))
        assert resp.to_wire() == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": "parse_error", "message": "bad"},
        }

    def test_requires_result_or_error(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcResponse(id=1)

    def test_rejects_both_result_and_error(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcResponse(id=1, result={}, error=JsonRpcError(code="x", message="y"))


class TestDumpsLine:
    def test_compact_single_line(self) -> None:
        line = dumps_line({"text": "a\nb", "n": [1, 2]})
        assert "\n" not in line
        assert line == '{"text":"a\\nb","n":[1,2]}'

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_numbers(self, value: float) -> None:
        with pytest.raises(ValueError, match="JSON compliant"):
            dumps_line({"x": value})


class TestInitializeResult:
    def test_dumps_camel_case(self) -> None:
        result = InitializeResult(protocol_version="2024-11-05", server_info=ServerInfo(name="s", version="1"))
        assert result.model_dump(by_alias=True) == {
            "protocolVersion": "2024-11-05",
            "serverInfo": {"name": "s", "version": "1"},
            "capabilities": {"tools": {}},
        }

    def test_accepts_aliases(self) -> None:
        result = InitializeResult.model_validate(
            {"protocolVersion": "x", "serverInfo": {"name": "n", "version": "v"}}
        )
        assert result.protocol_version == "x"


class TestToolDefinition:
    def test_required_parameters_in_declaration_order(self) -> None:
        definition = ToolDefinition(
            name="t",
            description="d",
            parameters={
                "b": ToolParameter(type="string", description="", required=True),
                "a": ToolParameter(type="integer", description=""),
                "c": ToolParameter(type="string", description="", required=True),
            },
        )
        assert definition.required_parameters == ["b", "c"]

    def test_frozen(self) -> None:
        definition = ToolDefinition(name="t", description="d")
        with pytest.raises(ValidationError):
            definition.name = "other"  # type: ignore[misc]


class TestMCPTool:
    def test_input_schema_alias(self) -> None:
        tool = MCPTool(name="t")
        assert "inputSchema" in tool.model_dump(by_alias=True)


class TestToolCallResult:
    def test_from_text(self) -> None:
        assert ToolCallResult.from_text('{"a":1}').model_dump() == {
            "content": [{"type": "text", "text": '{"a":1}'}]
        }
