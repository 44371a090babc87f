"""``medium-mcp tools``: inspect and invoke tools without the stdio loop."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import click
from rich.markup import escape

from medium_mcp.cli_commands._output import console, print_tools_table


@click.group()
def tools() -> None:
    """List and call tools."""


@tools.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list schema as JSON.")
def list_tools(as_json: bool) -> None:
    """Show the tool catalog."""
    from medium_mcp.tools.registry import ToolRegistry

    registry = ToolRegistry()
    if as_json:
        click.echo(json.dumps(registry.schema_payload(), indent=2))
        return
    print_tools_table(registry.definitions())


@tools.command("call")
@click.argument("name")
@click.option(
    "--arg",
    "-a",
    "args",
    multiple=True,
    metavar="KEY=VALUE",
    help="Tool argument; VALUE is parsed as JSON when possible.",
)
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
def call_tool(
    name: str,
    args: tuple[str, ...],
    config_path: Path | None,
    fixture_path: Path | None,
    client_factory: str | None,
) -> None:
    """Run tool NAME once and print its result text."""
    from medium_mcp.config import ConfigError, load_settings
    from medium_mcp.platform.errors import PlatformError
    from medium_mcp.server import build_dispatcher

    try:
        arguments = parse_arguments(args)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--arg") from exc

    try:
        settings = load_settings(config_path, fixture_path=fixture_path, client_factory=client_factory)
        dispatcher = build_dispatcher(settings)
    except (ConfigError, PlatformError) as exc:
        console.print(f"[red]Setup error:[/red] {escape(str(exc))}")
        sys.exit(1)

    click.echo(asyncio.run(dispatcher.execute(name, arguments)))


def parse_arguments(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` pairs into an argument mapping."""
    arguments: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"expected KEY=VALUE, got {pair!r}"
            raise ValueError(msg)
        try:
            arguments[key] = json.loads(value)
        except json.JSONDecodeError:
            arguments[key] = value
    return arguments
