"""ResponseEnvelope and EnvelopeError: the universal dispatch contract.

INVARIANT: Every dispatch resolves to a ResponseEnvelope, success or not.
The MCP adapter and the CLI both consume this type.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field


class EnvelopeError(BaseModel):
    """Structured error payload within a ResponseEnvelope."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ResponseEnvelope(BaseModel):
    """Uniform result of one dispatched operation.

    Attributes:
        success: Whether the remote call completed and decoded.
        op: Name of the dispatched operation (e.g. ``"add_case"``).
        payload: The TestRail JSON response, verbatim, on success.
        error: Structured error if ``success`` is False.
    """

    model_config = {"frozen": True}

    success: bool
    op: str
    payload: Any = None
    error: EnvelopeError | None = None

    @classmethod
    def ok(cls, op: str, payload: Any) -> ResponseEnvelope:
        return cls(success=True, op=op, payload=payload)

    @classmethod
    def fail(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ResponseEnvelope:
        return cls(
            success=False,
            op=op,
            error=EnvelopeError(code=code, message=message, detail=detail or {}),
        )

    @property
    def message(self) -> str | None:
        return self.error.message if self.error is not None else None

    def render(self) -> str:
        """Text for the host's content channel.

        Success is the payload as indented JSON; failure is
        ``Error: <message>``.
        """
        if self.success:
            return json.dumps(self.payload, indent=2, ensure_ascii=False)
        return f"Error: {self.message or 'Unknown error'}"
