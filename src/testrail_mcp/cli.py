"""Root CLI group for testrail-mcp with global flags and command registration."""

from __future__ import annotations

import click

from testrail_mcp import __version__
from testrail_mcp.commands import register_commands
from testrail_mcp.commands._context import AppContext
from testrail_mcp.config.settings import TestRailSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="testrail-mcp")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """testrail-mcp: TestRail tools for MCP hosts."""
    ctx.ensure_object(dict)
    settings = TestRailSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
