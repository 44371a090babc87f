"""Tracing for the message loop and tool calls.

``mcp.request`` spans wrap each inbound message and ``mcp.tool.execute`` spans
wrap each tool call; the attribute keys below tag them. Until
:func:`configure_telemetry` runs, the OpenTelemetry API hands out no-op
tracers, so instrumented code pays almost nothing when tracing is off.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from opentelemetry import trace

if TYPE_CHECKING:
    from opentelemetry.sdk.trace.export import SpanExporter  # pyright: ignore[reportMissingImports]

# ---------------------------------------------------------------------------
# Semantic attribute keys
# ---------------------------------------------------------------------------

ATTR_RPC_METHOD = "mcp.rpc.method"
ATTR_RPC_ID = "mcp.rpc.id"
ATTR_RPC_NOTIFICATION = "mcp.rpc.notification"
ATTR_ERROR_CODE = "mcp.error.code"
ATTR_TOOL_NAME = "mcp.tool.name"
ATTR_TOOL_SUCCESS = "mcp.tool.success"

_INSTRUMENTATION_NAME = "medium_mcp"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(*, service_name: str = "medium-mcp", otlp_endpoint: str | None = None) -> None:
    """Install an SDK tracer provider for the server's spans.

    Spans go to the OTLP/gRPC collector at *otlp_endpoint* when one is given,
    otherwise they are written as JSON to stderr. Requires the ``otel`` extra.

    Raises:
        ImportError: If ``opentelemetry-sdk`` (or, for OTLP export,
            ``opentelemetry-exporter-otlp``) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        raise ImportError(_missing("opentelemetry-sdk")) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if otlp_endpoint:
        provider.add_span_processor(BatchSpanProcessor(_otlp_exporter(otlp_endpoint)))
    else:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    trace.set_tracer_provider(provider)


def _otlp_exporter(endpoint: str) -> SpanExporter:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        raise ImportError(_missing("opentelemetry-exporter-otlp")) from exc
    return OTLPSpanExporter(endpoint=endpoint)


def _missing(distribution: str) -> str:
    return f"{distribution} is required for tracing; install it with: pip install medium-mcp[otel]"
