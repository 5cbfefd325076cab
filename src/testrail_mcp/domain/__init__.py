"""Domain layer: errors, operation descriptors, and request building.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
