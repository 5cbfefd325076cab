"""Subcommand modules for testrail-mcp.

Provides register_commands() which uses deferred imports to keep
``testrail-mcp --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    from testrail_mcp.commands.serve import serve
    from testrail_mcp.commands.tools import tools

    cli.add_command(serve)
    cli.add_command(tools)
