"""Infrastructure layer: the HTTP transport to TestRail.

This layer depends on stdlib and httpx.
It must never import from services, commands, output, or mcp.
"""
