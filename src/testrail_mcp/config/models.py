"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, testrail-mcp.toml only
contains overrides. Credentials usually come from the environment.
"""

from __future__ import annotations

from pydantic import BaseModel


class HttpConfig(BaseModel):
    """[http] section."""

    model_config = {"frozen": True}

    api_path: str = "index.php?/api/v2"
    timeout: float = 60.0
    verify_tls: bool = True
    user_agent: str = "testrail-mcp"


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    server_name: str = "testrail-mcp"
