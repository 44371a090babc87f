"""Shared CLI output helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from medium_mcp.protocol.models import ToolDefinition

# Human-facing output goes to stderr so stdout stays clean for piping.
console = Console(stderr=True)


def print_tools_table(definitions: tuple[ToolDefinition, ...], *, target: Console | None = None) -> None:
    """Pretty-print the tool catalog as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Parameters")
    table.add_column("Description")

    for definition in definitions:
        params = ", ".join(
            f"{name}{'*' if param.required else ''}:{param.type}"
            for name, param in definition.parameters.items()
        )
        table.add_row(definition.name, params or "-", _truncate(definition.description))

    (target or Console()).print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
