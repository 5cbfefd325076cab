"""testrail-mcp: TestRail REST API exposed as MCP tools."""

__version__ = "0.1.0"
