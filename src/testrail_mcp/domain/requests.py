"""Request builder: argument bag to :class:`RequestIntent`.

Pure functions, no I/O. Presence decides what is sent: a key present in
the argument bag is forwarded (``0``, ``False`` and ``""`` included), an
absent key is never sent. An explicit ``null`` counts as absent except for
body fields declared nullable. Required keys are checked here, before any
network call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from testrail_mcp.domain.errors import ValidationError
from testrail_mcp.domain.operations import (
    Encoding,
    HttpMethod,
    Location,
    OperationSpec,
    ResponseKind,
)


@dataclass(frozen=True)
class RequestIntent:
    """Transport-ready description of one outbound call."""

    method: HttpMethod
    path: str
    query: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] | None = None
    file_path: str | None = None
    encoding: Encoding = Encoding.JSON
    response: ResponseKind = ResponseKind.JSON

    @property
    def is_multipart(self) -> bool:
        return self.encoding is Encoding.MULTIPART


def validate_arguments(operation: OperationSpec, arguments: Any) -> BaseModel:
    """Validate *arguments* against the operation's typed input model.

    Raises:
        ValidationError: Missing required keys or ill-typed values.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        msg = f"Arguments for {operation.name} must be an object"
        raise ValidationError(msg, detail={"operation": operation.name})
    try:
        return operation.input_model.model_validate(dict(arguments))
    except PydanticValidationError as exc:
        raise _translate(operation, exc) from exc


def _translate(operation: OperationSpec, exc: PydanticValidationError) -> ValidationError:
    missing: list[str] = []
    invalid: list[str] = []
    errors: list[dict[str, str]] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        errors.append({"field": loc, "type": err["type"], "message": err["msg"]})
        if err["type"] == "missing":
            missing.append(loc)
        else:
            invalid.append(f"invalid value for '{loc}': {err['msg']}")

    parts: list[str] = []
    if missing:
        parts.append(f"missing required parameter(s): {', '.join(missing)}")
    parts.extend(invalid)
    message = f"Invalid arguments for {operation.name}: " + "; ".join(parts)
    return ValidationError(message, detail={"operation": operation.name, "errors": errors})


def build_request(operation: OperationSpec, arguments: Any) -> RequestIntent:
    """Map a validated argument bag onto method, path, query, and body."""
    supplied = validate_arguments(operation, arguments).model_dump(exclude_unset=True)

    segments = [operation.name]
    query: dict[str, Any] = {}
    body: dict[str, Any] | None = {} if operation.has_body else None
    file_path: str | None = None

    for param in operation.parameters:
        if param.name not in supplied:
            continue
        value = supplied[param.name]
        if param.location is Location.PATH:
            if value is not None:
                segments.append(quote(str(value), safe=""))
        elif param.location is Location.QUERY:
            if value is not None:
                query[param.name] = value
        elif param.location is Location.BODY:
            assert body is not None
            if value is not None or param.nullable:
                body[param.name] = value
        else:
            file_path = str(value)

    return RequestIntent(
        method=operation.method,
        path="/".join(segments),
        query=query,
        body=body,
        file_path=file_path,
        encoding=operation.encoding,
        response=operation.response,
    )


# ---------------------------------------------------------------------------
# Query string helpers
# ---------------------------------------------------------------------------


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_query(params: Mapping[str, Any]) -> str:
    """Encode *params* as ``k=v`` pairs joined by ``&`` (no leading separator)."""
    return "&".join(
        f"{quote(str(key), safe='')}={quote(_query_value(value), safe='')}"
        for key, value in params.items()
    )


def append_query(url: str, params: Mapping[str, Any]) -> str:
    """Append *params* to *url* with one rule for every operation.

    The first separator is ``?`` unless *url* already carries one, in
    which case every filter is joined with ``&``. TestRail's
    ``index.php?/api/v2`` prefix always contains ``?``.
    """
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{encode_query(params)}"
