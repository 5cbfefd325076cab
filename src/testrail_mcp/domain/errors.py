"""Typed exceptions raised while building and executing TestRail calls.

Every exception carries a stable ``code`` that the dispatcher copies into
the failure envelope, so callers can branch on it without parsing text.
"""

from __future__ import annotations

from typing import Any


class TestRailMCPError(Exception):
    """Base exception for all adapter failures.

    Attributes:
        code: Stable machine-readable error code.
        detail: Optional structured context for the envelope.
    """

    __test__ = False  # not a pytest test class

    code = "ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class AuthenticationError(TestRailMCPError):
    """No session could be resolved for an outbound call."""

    code = "NOT_AUTHENTICATED"


class ValidationError(TestRailMCPError):
    """Argument bag does not satisfy the operation's declared parameters."""

    code = "VALIDATION_ERROR"


class UnknownOperationError(ValidationError):
    """Operation name is not present in the registry."""

    code = "UNKNOWN_TOOL"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}", detail={"name": name})
        self.name = name


class TransportError(TestRailMCPError):
    """Network failure or non-2xx reply from TestRail."""

    code = "TRANSPORT_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        merged = dict(detail or {})
        if status_code is not None:
            merged["status_code"] = status_code
        super().__init__(message, detail=merged)
        self.status_code = status_code


class DecodeError(TestRailMCPError):
    """Response body could not be decoded as JSON."""

    code = "DECODE_ERROR"


class LocalIOError(TestRailMCPError):
    """Attachment file could not be read from the local filesystem."""

    code = "LOCAL_IO_ERROR"


class RegistryError(TestRailMCPError):
    """Operation table is internally inconsistent."""

    code = "REGISTRY_ERROR"
