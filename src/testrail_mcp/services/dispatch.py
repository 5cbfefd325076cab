"""Dispatcher: operation name plus argument bag in, envelope out.

INVARIANT: dispatch() never raises. Every failure from the registry,
request builder, session resolver, or transport becomes a failure
envelope, because the tool-invocation host expects every call to
resolve to a response.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

from testrail_mcp.catalog import REGISTRY, OperationRegistry
from testrail_mcp.domain.errors import TestRailMCPError
from testrail_mcp.domain.requests import RequestIntent, build_request
from testrail_mcp.infrastructure.transport import TestRailTransport
from testrail_mcp.services.result import ResponseEnvelope
from testrail_mcp.services.session import SessionResolver, SessionStore

if TYPE_CHECKING:
    from testrail_mcp.config.settings import TestRailSettings
    from testrail_mcp.infrastructure.transport import ClientFactory

log = structlog.get_logger(__name__)


class Dispatcher:
    """Route one tool call through registry, builder, session, and transport."""

    def __init__(
        self,
        *,
        registry: OperationRegistry = REGISTRY,
        resolver: SessionResolver | None = None,
        transport: TestRailTransport | None = None,
    ) -> None:
        self.registry = registry
        self.resolver = resolver if resolver is not None else SessionResolver()
        self.transport = transport if transport is not None else TestRailTransport()

    @classmethod
    def from_settings(
        cls,
        settings: TestRailSettings,
        *,
        store: SessionStore | None = None,
        client_factory: ClientFactory | None = None,
    ) -> Dispatcher:
        """Wire a dispatcher from explicit settings."""
        return cls(
            resolver=SessionResolver(settings, store),
            transport=TestRailTransport(settings.http, client_factory=client_factory),
        )

    def prepare(self, name: str, arguments: Mapping[str, Any] | None) -> RequestIntent:
        """Look up *name* and build its request without touching the network."""
        operation = self.registry.get(name)
        return build_request(operation, arguments)

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None) -> ResponseEnvelope:
        """Run one operation and wrap the outcome in a :class:`ResponseEnvelope`."""
        started = time.perf_counter()
        try:
            intent = self.prepare(name, arguments)
            session = self.resolver.resolve()
            data = await self.transport.execute(session, intent)
            payload = self.registry.get(name).acknowledge(data)
        except TestRailMCPError as exc:
            log.warning(
                "dispatch.failed",
                op=name,
                code=exc.code,
                error=exc.message,
                duration_ms=_elapsed_ms(started),
            )
            return ResponseEnvelope.fail(name, exc.code, exc.message, exc.detail)
        except Exception as exc:
            log.exception("dispatch.crashed", op=name)
            return ResponseEnvelope.fail(name, "INTERNAL_ERROR", str(exc) or type(exc).__name__)

        log.debug("dispatch.complete", op=name, duration_ms=_elapsed_ms(started))
        return ResponseEnvelope.ok(name, payload)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
