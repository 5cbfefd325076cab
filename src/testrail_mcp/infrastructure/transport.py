"""HTTP transport: executes one :class:`RequestIntent` against TestRail.

Two call shapes share Basic authentication and error mapping: JSON
request/response, and a single-part multipart upload of a local file.
Each call is fire-once; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote

import httpx

from testrail_mcp.domain.errors import (
    AuthenticationError,
    DecodeError,
    LocalIOError,
    TransportError,
)
from testrail_mcp.domain.operations import ResponseKind
from testrail_mcp.domain.requests import RequestIntent, append_query

if TYPE_CHECKING:
    from testrail_mcp.config.models import HttpConfig
    from testrail_mcp.services.session import Session

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED = "Not authenticated. Please configure TestRail credentials."
DEFAULT_API_PATH = "index.php?/api/v2"
ATTACHMENT_FIELD = "attachment"

ClientFactory = Callable[[], httpx.AsyncClient]


def read_attachment(file_path: str) -> tuple[str, bytes, str]:
    """Load a local file into memory as an httpx multipart file tuple."""
    path = Path(file_path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        msg = f"Cannot read attachment file {file_path}: {reason}"
        raise LocalIOError(msg, detail={"file_path": file_path}) from exc
    return path.name, content, "application/octet-stream"


def _remote_error_text(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    text = response.text.strip()
    return text[:200] if text else response.reason_phrase


class TestRailTransport:
    """Async httpx transport bound to one HTTP configuration.

    A fresh ``AsyncClient`` is opened per call, so concurrent dispatches
    share no connection state. Tests inject *client_factory* to supply a
    client backed by ``httpx.MockTransport``.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        http: HttpConfig | None = None,
        *,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._api_path = http.api_path if http is not None else DEFAULT_API_PATH
        self._timeout = http.timeout if http is not None else 60.0
        self._verify = http.verify_tls if http is not None else True
        self._user_agent = http.user_agent if http is not None else "testrail-mcp"
        self._client_factory = client_factory

    def _open_client(self) -> httpx.AsyncClient:
        if self._client_factory is not None:
            return self._client_factory()
        return httpx.AsyncClient(
            timeout=self._timeout,
            verify=self._verify,
            headers={"User-Agent": self._user_agent},
        )

    def url_for(self, session: Session, intent: RequestIntent) -> str:
        return append_query(session.api_url(self._api_path, intent.path), intent.query)

    async def execute(self, session: Session | None, intent: RequestIntent) -> Any:
        """Perform the call described by *intent* and return decoded JSON.

        Raises:
            AuthenticationError: *session* is None.
            LocalIOError: The attachment file cannot be read.
            TransportError: Network failure or non-2xx status.
            DecodeError: Non-empty body that is not JSON.
        """
        if session is None:
            raise AuthenticationError(NOT_AUTHENTICATED)

        url = self.url_for(session, intent)
        kwargs: dict[str, Any] = {"auth": httpx.BasicAuth(session.principal, session.secret_key)}
        if intent.is_multipart:
            assert intent.file_path is not None
            kwargs["files"] = {ATTACHMENT_FIELD: read_attachment(intent.file_path)}
        elif intent.body is not None:
            kwargs["json"] = intent.body
        else:
            kwargs["headers"] = {"Content-Type": "application/json"}

        logger.debug("request %s %s", intent.method.value, intent.path)
        async with self._open_client() as client:
            try:
                response = await client.request(intent.method.value, url, **kwargs)
            except httpx.HTTPError as exc:
                msg = f"Request to {intent.path} failed: {exc}"
                raise TransportError(msg, detail={"path": intent.path}) from exc

        if not response.is_success:
            msg = (
                f"TestRail returned HTTP {response.status_code} for {intent.path}: "
                f"{_remote_error_text(response)}"
            )
            raise TransportError(
                msg, status_code=response.status_code, detail={"path": intent.path}
            )

        if intent.response is ResponseKind.BINARY:
            return {
                "message": "Attachment retrieved successfully",
                "attachment_id": unquote(intent.path.rsplit("/", 1)[-1]),
                "size": len(response.content),
                "content_type": response.headers.get("content-type"),
            }

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            msg = f"Could not decode TestRail response for {intent.path}: {exc}"
            raise DecodeError(msg, detail={"path": intent.path}) from exc
