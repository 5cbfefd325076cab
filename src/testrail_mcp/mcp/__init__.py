"""MCP adapter: exposes the operation catalog to a tool-invocation host."""
