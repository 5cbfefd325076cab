"""Allow ``python -m testrail_mcp``."""

from testrail_mcp.cli import cli

cli()
