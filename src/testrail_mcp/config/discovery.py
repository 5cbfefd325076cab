"""Where testrail-mcp looks for its TOML file.

``--config`` wins and never reaches this module (see
``TestRailSettings.from_cli``). Otherwise ``TESTRAIL_MCP_CONFIG`` names the
file outright, and a set-but-missing path means "no file" rather than a
fallback to discovery. Without either, the nearest ``testrail-mcp.toml``
in the start directory or one of its ancestors is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "testrail-mcp.toml"
CONFIG_ENV_VAR = "TESTRAIL_MCP_CONFIG"


def _ancestors(start: Path) -> list[Path]:
    start = start.resolve()
    return [start, *start.parents]


def find_config(start: Path | None = None) -> Path | None:
    """Resolve the config file for a process started in *start* (default: cwd)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
