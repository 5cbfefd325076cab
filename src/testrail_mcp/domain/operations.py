"""Operation and parameter descriptors for the TestRail tool catalog.

An :class:`OperationSpec` is the single source of truth for one tool: its
JSON input schema, its typed pydantic input model, and the placement of
every argument in the outgoing HTTP request are all derived from the same
tuple of :class:`ParameterSpec` rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import cached_property
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, create_model


class ParamKind(StrEnum):
    """JSON value kinds accepted by tool parameters."""

    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class Location(StrEnum):
    """Where an argument lands in the outgoing request."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"
    FILE = "file"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"


class Encoding(StrEnum):
    """Request body encoding."""

    JSON = "json"
    MULTIPART = "multipart"


class ResponseKind(StrEnum):
    """How the transport treats the response body."""

    JSON = "json"
    BINARY = "binary"


_PY_TYPES: dict[ParamKind, Any] = {
    ParamKind.INTEGER: int,
    ParamKind.STRING: str,
    ParamKind.BOOLEAN: bool,
    ParamKind.ARRAY: list[Any],
    ParamKind.OBJECT: dict[str, Any],
}

_INPUT_CONFIG = ConfigDict(extra="ignore", coerce_numbers_to_str=True, frozen=True)

# An empty segment would address a different endpoint.
_PathSegment = Annotated[str, StringConstraints(min_length=1)]


@dataclass(frozen=True)
class ParameterSpec:
    """One declared tool parameter.

    Attributes:
        name: Argument key, identical to the TestRail field name.
        kind: JSON value kind.
        location: Path segment, query filter, body field, or local file.
        description: Human description surfaced in the input schema.
        required: Absence fails validation before any network call.
        items: Element kind for scalar arrays (e.g. lists of case IDs).
        item_fields: Element shape for arrays of objects. Elements are
            forwarded unmodified; the shape only documents them.
        nullable: An explicit ``null`` body value is sent as ``null``.
            Otherwise ``null`` means "leave unset" and is dropped.
    """

    name: str
    kind: ParamKind
    location: Location
    description: str = ""
    required: bool = False
    items: ParamKind | None = None
    item_fields: tuple[ParameterSpec, ...] = ()
    nullable: bool = False

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.kind.value}
        if self.nullable:
            schema["type"] = [self.kind.value, "null"]
        if self.description:
            schema["description"] = self.description
        if self.kind is ParamKind.ARRAY:
            if self.item_fields:
                schema["items"] = {
                    "type": "object",
                    "properties": {f.name: f.json_schema() for f in self.item_fields},
                }
            elif self.items is not None:
                schema["items"] = {"type": self.items.value}
        return schema

    def annotation(self) -> Any:
        """Python type used for the generated input model field."""
        if self.kind is ParamKind.STRING and self.location is Location.PATH:
            return _PathSegment
        if self.kind is ParamKind.ARRAY:
            if self.item_fields:
                return list[dict[str, Any]]
            if self.items is not None:
                return list[_PY_TYPES[self.items]]
        return _PY_TYPES[self.kind]


@dataclass(frozen=True)
class OperationSpec:
    """One supported TestRail capability exposed as a tool.

    The remote path is always ``name`` followed by the supplied path
    parameters in declared order, e.g. ``add_result_for_case/45/67``.
    """

    name: str
    description: str
    method: HttpMethod
    parameters: tuple[ParameterSpec, ...] = ()
    category: str = "general"
    encoding: Encoding = Encoding.JSON
    response: ResponseKind = ResponseKind.JSON
    ack: str | None = None

    def parameter(self, name: str) -> ParameterSpec | None:
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def located(self, location: Location) -> tuple[ParameterSpec, ...]:
        return tuple(p for p in self.parameters if p.location is location)

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters if p.required)

    @property
    def has_body(self) -> bool:
        return self.encoding is Encoding.JSON and bool(self.located(Location.BODY))

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema object advertised to the tool-invocation host."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema

    @cached_property
    def input_model(self) -> type[BaseModel]:
        """Typed input model generated from the parameter rows.

        Optional fields default to ``None`` so an explicit ``null`` is
        accepted; ``model_dump(exclude_unset=True)`` still tells omitted
        fields apart from supplied ones. String path segments must be
        non-empty.
        """
        fields: dict[str, Any] = {}
        for param in self.parameters:
            annotation = param.annotation()
            if param.required:
                fields[param.name] = (annotation, Field(..., description=param.description))
            else:
                fields[param.name] = (
                    annotation | None,
                    Field(default=None, description=param.description),
                )
        model_name = "".join(part.title() for part in self.name.split("_")) + "Input"
        return create_model(model_name, __config__=_INPUT_CONFIG, **fields)

    def acknowledge(self, data: Any) -> Any:
        """Substitute an acknowledgement payload for an empty remote reply."""
        if self.ack is not None and data is None:
            return {"success": True, "message": self.ack}
        return data


# ---------------------------------------------------------------------------
# Table helpers used by the catalog modules
# ---------------------------------------------------------------------------


def path_param(
    name: str,
    description: str,
    kind: ParamKind = ParamKind.INTEGER,
    *,
    required: bool = True,
) -> ParameterSpec:
    return ParameterSpec(name, kind, Location.PATH, description, required=required)


def query_param(
    name: str,
    description: str,
    kind: ParamKind = ParamKind.INTEGER,
    *,
    required: bool = False,
) -> ParameterSpec:
    return ParameterSpec(name, kind, Location.QUERY, description, required=required)


def body_param(
    name: str,
    description: str,
    kind: ParamKind = ParamKind.STRING,
    *,
    required: bool = False,
    items: ParamKind | None = None,
    item_fields: tuple[ParameterSpec, ...] = (),
    nullable: bool = False,
) -> ParameterSpec:
    return ParameterSpec(
        name,
        kind,
        Location.BODY,
        description,
        required=required,
        items=items,
        item_fields=item_fields,
        nullable=nullable,
    )


def item_field(name: str, kind: ParamKind, description: str = "") -> ParameterSpec:
    """Describe one member of an object element inside an array parameter."""
    return ParameterSpec(name, kind, Location.BODY, description)


def file_param(
    name: str = "file_path",
    description: str = "Path to the file to upload",
) -> ParameterSpec:
    return ParameterSpec(name, ParamKind.STRING, Location.FILE, description, required=True)


def read_op(
    name: str,
    description: str,
    *parameters: ParameterSpec,
    category: str,
    response: ResponseKind = ResponseKind.JSON,
) -> OperationSpec:
    """GET operation."""
    return OperationSpec(
        name=name,
        description=description,
        method=HttpMethod.GET,
        parameters=parameters,
        category=category,
        response=response,
    )


def write_op(
    name: str,
    description: str,
    *parameters: ParameterSpec,
    category: str,
    ack: str | None = None,
) -> OperationSpec:
    """POST operation with a JSON body (or no body at all)."""
    return OperationSpec(
        name=name,
        description=description,
        method=HttpMethod.POST,
        parameters=parameters,
        category=category,
        ack=ack,
    )


def upload_op(
    name: str,
    description: str,
    *parameters: ParameterSpec,
    category: str = "attachments",
) -> OperationSpec:
    """POST operation sending one local file as multipart form data."""
    return OperationSpec(
        name=name,
        description=description,
        method=HttpMethod.POST,
        parameters=parameters,
        category=category,
        encoding=Encoding.MULTIPART,
    )
