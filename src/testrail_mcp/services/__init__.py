"""Service layer: session resolution, dispatch, and the response envelope.

Services may import from domain, catalog, and infrastructure layers.
They must never import from commands, output, or mcp.
"""
