"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Dispatcher initialization and
centralized envelope emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from testrail_mcp.output.formatters import format_envelope

if TYPE_CHECKING:
    from testrail_mcp.config.settings import TestRailSettings
    from testrail_mcp.services.dispatch import Dispatcher
    from testrail_mcp.services.result import ResponseEnvelope


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The dispatcher is
    lazily created on first use so ``--help`` and ``--version`` never
    build the HTTP transport.
    """

    def __init__(self, settings: TestRailSettings) -> None:
        self.settings = settings
        self._dispatcher: Dispatcher | None = None

        from testrail_mcp.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def dispatcher(self) -> Dispatcher:
        """The dispatcher instance (created lazily on first access)."""
        if self._dispatcher is None:
            from testrail_mcp.services.dispatch import Dispatcher

            self._dispatcher = Dispatcher.from_settings(self.settings)
        return self._dispatcher

    def emit(self, envelope: ResponseEnvelope) -> None:
        """Format and output an envelope with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_envelope(envelope, json_output=self.settings.json_output)
        if envelope.success:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
