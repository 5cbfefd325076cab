"""MCP tool handlers: discovery and invocation over the whole catalog.

Each handler has an ``_impl`` function testable without a running host.
``register_tools()`` wraps them with the low-level server decorators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp import types

if TYPE_CHECKING:
    from testrail_mcp.services.dispatch import Dispatcher


def list_tools_impl(dispatcher: Dispatcher) -> list[dict[str, Any]]:
    """Describe every registered operation as a tool definition."""
    return [
        {
            "name": op.name,
            "description": op.description,
            "inputSchema": op.input_schema(),
        }
        for op in dispatcher.registry
    ]


async def call_tool_impl(
    dispatcher: Dispatcher,
    name: str,
    arguments: dict[str, Any] | None,
) -> str:
    """Dispatch one tool call and render its envelope for the content channel."""
    envelope = await dispatcher.dispatch(name, arguments)
    return envelope.render()


def register_tools(server: Any, dispatcher: Dispatcher) -> None:
    """Register the list_tools and call_tool handlers on *server*.

    Host-side input validation is disabled so that missing or ill-typed
    arguments come back as envelope errors from the request builder.
    """

    @server.list_tools()  # type: ignore[untyped-decorator]
    async def list_tools() -> list[types.Tool]:
        return [types.Tool(**tool) for tool in list_tools_impl(dispatcher)]

    @server.call_tool(validate_input=False)  # type: ignore[untyped-decorator]
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        text = await call_tool_impl(dispatcher, name, arguments)
        return [types.TextContent(type="text", text=text)]
