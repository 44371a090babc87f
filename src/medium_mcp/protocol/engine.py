"""ProtocolEngine is the stdio JSON-RPC message loop.

Reads one line at a time, classifies it as a request or a notification,
routes it by method and writes back at most one response line. Messages are
processed strictly one after another, so responses leave in the order their
requests arrived.

Lifecycle::

    UNINITIALIZED --(initialize answered + notifications/initialized)--> READY
    any state --(end of input or stop event)--> TERMINAL
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import math
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from medium_mcp.protocol.errors import (
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
)
from medium_mcp.protocol.models import (
    InitializeResult,
    JsonRpcMessage,
    JsonRpcResponse,
    ServerInfo,
    ToolCallResult,
    dumps_line,
)
from medium_mcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_RPC_ID,
    ATTR_RPC_METHOD,
    ATTR_RPC_NOTIFICATION,
    get_tracer,
)

if TYPE_CHECKING:
    from medium_mcp.protocol.transport import LineTransport
    from medium_mcp.tools.dispatcher import ToolDispatcher
    from medium_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

DEFAULT_PROTOCOL_VERSION = "2024-11-05"
DEFAULT_SERVER_NAME = "medium-stats"
DEFAULT_SERVER_VERSION = "1.0.0"

MethodHandler = Callable[[JsonRpcMessage], Awaitable[dict[str, Any]]]


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    TERMINAL = "terminal"


def build_identity(
    name: str = DEFAULT_SERVER_NAME,
    version: str = DEFAULT_SERVER_VERSION,
    protocol_version: str = DEFAULT_PROTOCOL_VERSION,
) -> InitializeResult:
    """Return the server identity sent in reply to ``initialize``."""
    return InitializeResult(
        protocol_version=protocol_version,
        server_info=ServerInfo(name=name, version=version),
    )


class ProtocolEngine:
    """Drives one client connection over a :class:`LineTransport`.

    Usage::

        engine = ProtocolEngine(StdioTransport(), registry, dispatcher)
        await engine.run(stop_event)
    """

    def __init__(
        self,
        transport: LineTransport,
        registry: ToolRegistry,
        dispatcher: ToolDispatcher,
        *,
        identity: InitializeResult | None = None,
        announce_on_startup: bool = False,
        log: logging.Logger | None = None,
    ) -> None:
        self._transport = transport
        self._registry = registry
        self._dispatcher = dispatcher
        self._identity = identity or build_identity()
        self._announce = announce_on_startup
        self._log = log or logger
        self._state = SessionState.UNINITIALIZED
        self._initialize_answered = False
        self._methods: dict[str, MethodHandler] = {
            "initialize": self._handle_initialize,
            "notifications/initialized": self._handle_initialized,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
            "ping": self._handle_ping,
        }

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def identity(self) -> InitializeResult:
        return self._identity

    # -- loop ----------------------------------------------------------------

    async def run(self, stop: asyncio.Event | None = None) -> None:
        """Serve until end of input or until *stop* is set."""
        stop = stop or asyncio.Event()
        await self._transport.connect()
        self._log.info(
            "%s %s listening (protocol %s, %d tools)",
            self._identity.server_info.name,
            self._identity.server_info.version,
            self._identity.protocol_version,
            len(self._registry),
        )

        try:
            if self._announce:
                self._log.debug("Sending startup announcement")
                self._write(dumps_line(self._identity.model_dump(by_alias=True)))

            while not stop.is_set():
                try:
                    line = await self._next_line(stop)
                except ParseError as exc:
                    self._send(JsonRpcResponse(id=None, error=exc.to_error()))
                    continue
                if line is None:
                    break
                await self.handle_line(line)
        except Exception:
            self._log.critical("Fatal error in message loop", exc_info=True)
            raise
        finally:
            self._state = SessionState.TERMINAL
            await self._transport.close()
            self._log.info("Message loop stopped")

    async def _next_line(self, stop: asyncio.Event) -> str | None:
        """Wait for the next line, giving up if *stop* fires first."""
        read = asyncio.ensure_future(self._transport.receive())
        stopped = asyncio.ensure_future(stop.wait())
        done, _ = await asyncio.wait({read, stopped}, return_when=asyncio.FIRST_COMPLETED)

        if read in done:
            stopped.cancel()
            return read.result()

        self._log.info("Stop requested, abandoning pending read")
        read.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await read
        return None

    async def handle_line(self, line: str) -> None:
        """Process one raw input line, writing a response if one is owed."""
        if not line.strip():
            return

        self._log.debug("<<< %s", line)
        try:
            message = self._parse(line)
        except ParseError as exc:
            self._log.error("Failed to parse request: %s", line)
            self._send(JsonRpcResponse(id=None, error=exc.to_error()))
            return

        response = await self.dispatch(message)
        if response is not None:
            self._send(response)

    @staticmethod
    def _parse(line: str) -> JsonRpcMessage:
        try:
            raw = json.loads(line, parse_constant=_reject_constant, parse_float=_finite_float)
        except ValueError as exc:
            raise ParseError("Invalid JSON request") from exc
        if not isinstance(raw, dict):
            raise ParseError("Invalid JSON request")
        try:
            return JsonRpcMessage.model_validate(raw)
        except ValidationError as exc:
            raise ParseError("Invalid JSON request") from exc

    # -- routing -------------------------------------------------------------

    async def dispatch(self, message: JsonRpcMessage) -> JsonRpcResponse | None:
        """Route *message* and return its response, or ``None`` for notifications."""
        with _tracer.start_as_current_span("mcp.request") as span:
            span.set_attribute(ATTR_RPC_METHOD, message.method)
            span.set_attribute(ATTR_RPC_NOTIFICATION, message.is_notification)
            if message.id is not None:
                span.set_attribute(ATTR_RPC_ID, str(message.id))

            self._log.debug(
                "Handling %s %s (id=%r)",
                "notification" if message.is_notification else "request",
                message.method,
                message.id,
            )
            try:
                handler = self._methods.get(message.method)
                if handler is None:
                    if message.is_notification:
                        self._log.warning("Unknown notification ignored: %s", message.method)
                        return None
                    raise MethodNotFoundError(message.method)
                result = await handler(message)
            except ProtocolError as exc:
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                return self._error_response(message, exc)
            except Exception as exc:
                self._log.exception("Error processing %s", message.method)
                span.set_attribute(ATTR_ERROR_CODE, InternalError.code)
                return self._error_response(message, InternalError(str(exc) or type(exc).__name__))

            if message.is_notification:
                return None
            return JsonRpcResponse(id=message.id, result=result)

    def _error_response(self, message: JsonRpcMessage, exc: ProtocolError) -> JsonRpcResponse | None:
        if message.is_notification:
            self._log.warning("Dropping %s for notification %s: %s", exc.code, message.method, exc.message)
            return None
        self._log.error("Sending %s for %s (id=%r): %s", exc.code, message.method, message.id, exc.message)
        return JsonRpcResponse(id=message.id, error=exc.to_error())

    # -- method handlers -----------------------------------------------------

    async def _handle_initialize(self, message: JsonRpcMessage) -> dict[str, Any]:
        if message.params:
            self._log.debug("Client initialize params: %s", message.params)
        self._initialize_answered = True
        return self._identity.model_dump(by_alias=True)

    async def _handle_initialized(self, message: JsonRpcMessage) -> dict[str, Any]:
        if not self._initialize_answered:
            self._log.warning("notifications/initialized received before initialize")
        self._state = SessionState.READY
        self._log.info("Client initialization complete, session ready")
        return {}

    async def _handle_tools_list(self, message: JsonRpcMessage) -> dict[str, Any]:
        return self._registry.schema_payload()

    async def _handle_tools_call(self, message: JsonRpcMessage) -> dict[str, Any]:
        params = message.params or {}
        if "name" not in params:
            raise InvalidParamsError("Missing 'name' parameter")

        tool_name = _name_text(params["name"])
        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise InvalidParamsError("'arguments' must be an object")

        text = await self._dispatcher.execute(tool_name, arguments)
        return ToolCallResult.from_text(text).model_dump()

    async def _handle_ping(self, message: JsonRpcMessage) -> dict[str, Any]:
        return {}

    # -- output --------------------------------------------------------------

    def _send(self, response: JsonRpcResponse) -> None:
        self._write(response.to_line())

    def _write(self, line: str) -> None:
        self._log.debug(">>> %s", line)
        self._transport.send(line)


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are Python extensions, not JSON.
    msg = f"{token} is not valid JSON"
    raise ValueError(msg)


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        msg = f"{text} overflows a JSON number"
        raise ValueError(msg)
    return value


def _name_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)
