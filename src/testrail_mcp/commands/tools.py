"""tools: inspect the catalog and dispatch single operations from the shell."""

from __future__ import annotations

import json
from typing import Any

import click

from testrail_mcp.commands._base import TrGroup
from testrail_mcp.commands._context import AppContext


def _parse_pairs(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``key=value`` pairs into arguments; values are JSON when they parse."""
    parsed: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got '{pair}'", param_hint="--arg")
        try:
            parsed[key] = json.loads(raw)
        except json.JSONDecodeError:
            parsed[key] = raw
    return parsed


@click.group(
    cls=TrGroup,
    examples="""\
  # List every tool, or one category
  testrail-mcp tools list
  testrail-mcp tools list --category cases

  # Show the input schema of one tool
  testrail-mcp tools show add_case

  # Dispatch a tool once
  testrail-mcp tools call get_case -a case_id=123
  testrail-mcp tools call add_case --args '{"section_id": 10, "title": "Login works"}'""",
)
def tools() -> None:
    """Inspect and call TestRail tools."""


@tools.command("list")
@click.option("--category", default=None, help="Only tools in this category.")
@click.pass_obj
def list_tools(app: AppContext, category: str | None) -> None:
    """List registered tools."""
    from testrail_mcp.output.formatters import format_catalog

    registry = app.dispatcher.registry
    if category is not None and category not in registry.categories():
        known = ", ".join(registry.categories())
        raise click.BadParameter(f"unknown category '{category}' (known: {known})")
    operations = registry.by_category(category) if category else list(registry)
    click.echo(format_catalog(operations, json_output=app.settings.json_output))


@tools.command("show")
@click.argument("name")
@click.pass_obj
def show_tool(app: AppContext, name: str) -> None:
    """Print the input schema of one tool."""
    from testrail_mcp.output.formatters import format_schema

    op = app.dispatcher.registry.find(name)
    if op is None:
        click.echo(f"Unknown tool: {name}", err=True)
        raise SystemExit(1)
    click.echo(format_schema(op))


@tools.command("call")
@click.argument("name")
@click.option("--args", "args_json", default=None, help="Arguments as a JSON object.")
@click.option(
    "-a",
    "--arg",
    "pairs",
    multiple=True,
    help="One key=value argument (repeatable, values parsed as JSON when possible).",
)
@click.pass_obj
def call_tool(app: AppContext, name: str, args_json: str | None, pairs: tuple[str, ...]) -> None:
    """Dispatch one tool call and print its result."""
    import anyio

    arguments: dict[str, Any] = {}
    if args_json:
        try:
            loaded = json.loads(args_json)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"invalid JSON: {exc}", param_hint="--args") from exc
        if not isinstance(loaded, dict):
            raise click.BadParameter("must be a JSON object", param_hint="--args")
        arguments.update(loaded)
    arguments.update(_parse_pairs(pairs))

    envelope = anyio.run(app.dispatcher.dispatch, name, arguments)
    app.emit(envelope)
