"""Protocol-level error types.

Each error carries the short string ``code`` token written to the wire, so the
engine can turn any of them into a :class:`JsonRpcError` without a lookup table.
"""

from __future__ import annotations

from medium_mcp.protocol.models import JsonRpcError

PARSE_ERROR = "parse_error"
METHOD_NOT_FOUND = "method_not_found"
INVALID_PARAMS = "invalid_params"
INTERNAL_ERROR = "internal_error"


class ProtocolError(Exception):
    """Base error for all failures reported as a JSON-RPC error object."""

    code: str = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_error(self) -> JsonRpcError:
        return JsonRpcError(code=self.code, message=self.message)


class ParseError(ProtocolError):
    """An input line is not a JSON-RPC message."""

    code = PARSE_ERROR


class MethodNotFoundError(ProtocolError):
    """A request named a method the server does not implement."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unknown method: {method}")


class InvalidParamsError(ProtocolError):
    """A request's ``params`` are missing a required member or are mis-shaped."""

    code = INVALID_PARAMS


class InternalError(ProtocolError):
    """An unexpected failure while handling a request."""

    code = INTERNAL_ERROR
