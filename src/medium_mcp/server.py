"""Process host wiring: settings -> platform client -> dispatcher -> engine."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
from typing import TYPE_CHECKING

from medium_mcp.capability.service import ContentService
from medium_mcp.platform.client import load_client_factory
from medium_mcp.platform.fixture import FixturePlatformClient
from medium_mcp.protocol.engine import ProtocolEngine, build_identity
from medium_mcp.protocol.transport import StdioTransport
from medium_mcp.tools.dispatcher import ToolDispatcher
from medium_mcp.tools.registry import ToolRegistry
from medium_mcp.utils.telemetry import configure_telemetry

if TYPE_CHECKING:
    from medium_mcp.config import ServerSettings
    from medium_mcp.platform.client import PlatformClient
    from medium_mcp.protocol.transport import LineTransport

logger = logging.getLogger(__name__)

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def build_platform(settings: ServerSettings) -> PlatformClient:
    """Choose the platform client: import path first, then fixture file."""
    if settings.client_factory:
        logger.info("Loading platform client from %s", settings.client_factory)
        return load_client_factory(settings.client_factory)
    if settings.fixture_path is not None:
        logger.info("Serving platform data from fixture %s", settings.fixture_path)
        return FixturePlatformClient.from_path(settings.fixture_path)
    logger.warning("No platform client configured; every lookup will report 'not found'")
    return FixturePlatformClient()


def build_dispatcher(settings: ServerSettings, platform: PlatformClient | None = None) -> ToolDispatcher:
    service = ContentService(platform or build_platform(settings))
    return ToolDispatcher(service, ToolRegistry())


def build_engine(
    settings: ServerSettings,
    *,
    transport: LineTransport | None = None,
    platform: PlatformClient | None = None,
) -> ProtocolEngine:
    dispatcher = build_dispatcher(settings, platform)
    return ProtocolEngine(
        transport or StdioTransport(),
        dispatcher.registry,
        dispatcher,
        identity=build_identity(
            settings.server_name,
            settings.server_version,
            settings.protocol_version,
        ),
        announce_on_startup=settings.announce_on_startup,
    )


async def serve(
    settings: ServerSettings,
    *,
    transport: LineTransport | None = None,
    stop: asyncio.Event | None = None,
) -> None:
    """Run the protocol loop until end of input, SIGINT or SIGTERM."""
    if settings.telemetry.enabled:
        configure_telemetry(
            service_name=settings.server_name,
            otlp_endpoint=settings.telemetry.otlp_endpoint,
        )

    engine = build_engine(settings, transport=transport)
    stop = stop or asyncio.Event()
    loop = asyncio.get_running_loop()

    installed: list[signal.Signals] = []
    for sig in _STOP_SIGNALS:
        # Unsupported on Windows loops and outside the main thread.
        with contextlib.suppress(NotImplementedError, RuntimeError, ValueError):
            loop.add_signal_handler(sig, stop.set)
            installed.append(sig)

    try:
        await engine.run(stop)
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)
