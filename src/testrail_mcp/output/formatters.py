"""Rich/JSON output helpers.

The CLI renders envelopes and catalog listings for humans (Rich tables)
or machines (--json).
"""

from __future__ import annotations

import json as _json
from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from testrail_mcp.output.console import render

if TYPE_CHECKING:
    from testrail_mcp.domain.operations import OperationSpec
    from testrail_mcp.services.result import ResponseEnvelope


def format_envelope(envelope: ResponseEnvelope, *, json_output: bool = False) -> str:
    """Format a ResponseEnvelope for display.

    Args:
        envelope: The dispatch result to format.
        json_output: If True, return the whole envelope as JSON; otherwise
            the payload (success) or an error line (failure).
    """
    if json_output:
        return envelope.model_dump_json(indent=2)
    if envelope.success:
        return envelope.render()
    code = envelope.error.code if envelope.error else "ERROR"
    return f"ERROR: {envelope.op} [{code}] {envelope.message or 'Unknown error'}"


def _signature(op: OperationSpec) -> Text:
    text = Text()
    for index, param in enumerate(op.parameters):
        if index:
            text.append(" ")
        if param.required:
            text.append(param.name, style="tr.required")
        else:
            text.append(f"[{param.name}]", style="tr.optional")
    return text


def format_catalog(
    operations: Iterable[OperationSpec],
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Render operations as a table (human) or a JSON array (machine)."""
    ops = list(operations)
    if json_output:
        rows = [
            {
                "name": op.name,
                "category": op.category,
                "method": op.method.value,
                "description": op.description,
                "required": list(op.required),
            }
            for op in ops
        ]
        return _json.dumps(rows, indent=2)

    table = Table(title=f"{len(ops)} tools", title_justify="left")
    table.add_column("Tool", style="tr.op", no_wrap=True)
    table.add_column("Category", style="tr.category")
    table.add_column("Method")
    table.add_column("Parameters")
    table.add_column("Description")
    for op in ops:
        table.add_row(op.name, op.category, op.method.value, _signature(op), op.description)

    return render(table, no_color=no_color)


def format_schema(op: OperationSpec) -> str:
    """Render one operation's tool definition as JSON."""
    return _json.dumps(
        {"name": op.name, "description": op.description, "inputSchema": op.input_schema()},
        indent=2,
    )
