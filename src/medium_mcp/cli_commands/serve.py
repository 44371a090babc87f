"""``medium-mcp serve``: run the stdio JSON-RPC server."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.markup import escape

from medium_mcp.cli_commands._output import console

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="MEDIUM_MCP_CONFIG",
    default=None,
    help="YAML settings file.",
)
@click.option(
    "--fixture",
    "fixture_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="MEDIUM_MCP_FIXTURE",
    default=None,
    help="Serve platform data from a YAML/JSON fixture file.",
)
@click.option("--client", "client_factory", default=None, help="Platform client factory as module:attribute.")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (logs go to stderr).",
)
@click.option(
    "--announce/--no-announce",
    default=None,
    help="Write the server identity once before reading input.",
)
@click.option("--telemetry", is_flag=True, default=False, help="Enable OpenTelemetry tracing.")
def serve(
    config_path: Path | None,
    fixture_path: Path | None,
    client_factory: str | None,
    log_level: str | None,
    announce: bool | None,
    telemetry: bool,
) -> None:
    """Serve the Medium tools over stdin/stdout."""
    from medium_mcp.config import ConfigError, configure_logging, load_settings
    from medium_mcp.platform.errors import PlatformError
    from medium_mcp.server import serve as run_server

    try:
        settings = load_settings(
            config_path,
            fixture_path=fixture_path,
            client_factory=client_factory,
            log_level=log_level.upper() if log_level else None,
            announce_on_startup=announce,
        )
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if telemetry:
        settings.telemetry.enabled = True

    configure_logging(settings.log_level)

    try:
        asyncio.run(run_server(settings))
    except KeyboardInterrupt:
        pass
    except PlatformError as exc:
        console.print(f"[red]Platform client error:[/red] {escape(str(exc))}")
        sys.exit(1)
