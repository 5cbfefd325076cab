"""MCP server setup.

Low-level ``Server`` with two handlers (tool discovery and invocation)
served over stdio.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp.server.lowlevel import Server

from testrail_mcp import __version__

if TYPE_CHECKING:
    from testrail_mcp.config.settings import TestRailSettings
    from testrail_mcp.services.session import SessionStore

__all__ = ["create_server", "serve_stdio"]


def create_server(
    settings: TestRailSettings | None = None,
    *,
    store: SessionStore | None = None,
) -> Server:
    """Create and configure the MCP server.

    Builds a Dispatcher from *settings* (or from a fresh settings
    object read from the environment) and registers the tool handlers.
    """
    from testrail_mcp.config.settings import TestRailSettings
    from testrail_mcp.mcp.tools import register_tools
    from testrail_mcp.services.dispatch import Dispatcher

    if settings is None:
        settings = TestRailSettings.from_cli()
    dispatcher = Dispatcher.from_settings(settings, store=store)

    server: Server = Server(settings.mcp.server_name, version=__version__)
    register_tools(server, dispatcher)
    return server


async def serve_stdio(server: Server) -> None:
    """Run *server* over stdin/stdout until the host disconnects."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
