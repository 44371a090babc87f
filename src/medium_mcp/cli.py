"""medium-mcp CLI entrypoint."""

from __future__ import annotations

import os

import click

from medium_mcp import __version__

MCP_MODE_ENV = "MCP_MODE"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="medium-mcp")
@click.option("--mcp", "mcp_mode", is_flag=True, help=f"Run the stdio server (same as {MCP_MODE_ENV}=true).")
@click.pass_context
def main(ctx: click.Context, mcp_mode: bool) -> None:
    """medium-mcp: Medium content tools over stdio JSON-RPC."""
    if ctx.invoked_subcommand is not None:
        return
    if mcp_mode or os.environ.get(MCP_MODE_ENV, "").lower() == "true":
        from medium_mcp.cli_commands.serve import serve

        # A sub-context parses no args but still resolves serve's envvars.
        with serve.make_context("serve", [], parent=ctx) as serve_ctx:
            serve.invoke(serve_ctx)
        return
    click.echo(ctx.get_help())


# Register subcommands
from medium_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
