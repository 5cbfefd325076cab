"""Unified settings: CLI flags, env vars, .env, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``TESTRAIL_*`` prefix (``TESTRAIL_URL``,
     ``TESTRAIL_USERNAME``, ``TESTRAIL_API_KEY``, ``TESTRAIL_HTTP__TIMEOUT``)
  3. ``.env``: dotenv file in the working directory
  4. TOML file: ``testrail-mcp.toml`` discovered via walk-up
  5. Code defaults baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`testrail_mcp.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from testrail_mcp.config.discovery import find_config
from testrail_mcp.config.models import HttpConfig, McpConfig


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, reporting syntax errors as a click error naming the file."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        import click

        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one ``testrail-mcp.toml`` file, if any."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values = read_toml(path) if path is not None and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


# The TOML path chosen by from_cli(), visible to settings_customise_sources().
_construction = threading.local()


class TestRailSettings(BaseSettings):
    """Unified settings for the testrail-mcp server and CLI.

    Merges CLI flags, environment variables, a ``.env`` file, TOML config
    sections, and code-baked defaults into a single frozen object. Stored
    on the CLI ``AppContext`` and handed to the dispatcher explicitly.

    Attributes:
        url: TestRail base URL, e.g. ``https://example.testrail.io``.
        username: TestRail login (email address).
        api_key: TestRail API key or password.
        config_path: The TOML file that was loaded, if any.
    """

    __test__ = False  # not a pytest test class

    model_config = {
        "frozen": True,
        "env_prefix": "TESTRAIL_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # --- Credentials ---
    url: str | None = None
    username: str | None = None
    api_key: SecretStr | None = None

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    http: HttpConfig = Field(default_factory=HttpConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)

    @property
    def has_credentials(self) -> bool:
        """True when URL, username, and API key are all non-empty."""
        key = self.api_key.get_secret_value() if self.api_key is not None else ""
        return bool(self.url and self.username and key)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init, env, .env, then TOML; file secrets are not used."""
        toml_path = getattr(_construction, "toml_path", None)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TestRailSettings:
        """Construct settings from a CLI invocation.

        Discovers ``testrail-mcp.toml`` via walk-up from *start* (or uses
        the explicit *config_path*) and merges CLI flags as
        highest-priority overrides.
        """
        toml_path: Path | None
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        _construction.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _construction.toml_path = None
