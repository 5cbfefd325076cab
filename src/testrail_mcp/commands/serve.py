"""serve: run the MCP server over stdio."""

from __future__ import annotations

import click
import structlog

from testrail_mcp.commands._base import TrCommand
from testrail_mcp.commands._context import AppContext

log = structlog.get_logger(__name__)


@click.command(
    cls=TrCommand,
    examples="""\
  # Start the MCP server with credentials from the environment
  TESTRAIL_URL=https://example.testrail.io \\
  TESTRAIL_USERNAME=qa@example.com \\
  TESTRAIL_API_KEY=... testrail-mcp serve

  # JSON logs on stderr for a log collector
  testrail-mcp --log-json serve""",
)
@click.pass_obj
def serve(app: AppContext) -> None:
    """Start the MCP server on stdio."""
    import anyio

    from testrail_mcp.mcp.server import create_server, serve_stdio

    if not app.settings.has_credentials:
        log.warning(
            "serve.unauthenticated",
            hint="set TESTRAIL_URL, TESTRAIL_USERNAME and TESTRAIL_API_KEY",
        )
    server = create_server(app.settings)
    anyio.run(serve_stdio, server)
