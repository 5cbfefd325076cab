"""Shared pytest fixtures and test helpers for testrail-mcp tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from testrail_mcp.config.settings import TestRailSettings
from testrail_mcp.services.session import Session

BASE_URL = "https://example.testrail.io"
API_PREFIX = f"{BASE_URL}/index.php?/api/v2/"


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials, .env files and config files out of every test."""
    for name in (
        "TESTRAIL_URL",
        "TESTRAIL_USERNAME",
        "TESTRAIL_API_KEY",
        "TESTRAIL_MCP_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> TestRailSettings:
    """Settings carrying a complete set of credentials."""
    return TestRailSettings(url=BASE_URL, username="qa@example.com", api_key="secret-key")


@pytest.fixture
def session() -> Session:
    return Session(base_url=BASE_URL, principal="qa@example.com", secret_key="secret-key")


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class RecordingBackend:
    """httpx.MockTransport handler that records every request it answers."""

    def __init__(
        self,
        status_code: int = 200,
        *,
        json_body: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content, headers=self.headers)
        if self.json_body is None:
            return httpx.Response(self.status_code, headers=self.headers)
        return httpx.Response(self.status_code, json=self.json_body, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def factory(self) -> Callable[[], httpx.AsyncClient]:
        return lambda: httpx.AsyncClient(transport=httpx.MockTransport(self))
