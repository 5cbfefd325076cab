"""Tests for the operation registry and the shipped catalog."""

from __future__ import annotations

import pytest

from testrail_mcp.catalog import REGISTRY, OperationRegistry
from testrail_mcp.domain.errors import RegistryError, UnknownOperationError, ValidationError
from testrail_mcp.domain.operations import (
    HttpMethod,
    Location,
    OperationSpec,
    ParamKind,
    ParameterSpec,
    body_param,
    file_param,
    path_param,
    read_op,
    upload_op,
    write_op,
)
from testrail_mcp.domain.requests import build_request

EXPECTED_CATEGORIES = [
    "projects",
    "suites",
    "sections",
    "cases",
    "runs",
    "tests",
    "results",
    "plans",
    "milestones",
    "users",
    "reference",
    "attachments",
]


def _sample_value(param: ParameterSpec) -> object:
    if param.kind is ParamKind.INTEGER:
        return 1
    if param.kind is ParamKind.BOOLEAN:
        return True
    if param.kind is ParamKind.ARRAY:
        return [1] if param.items is ParamKind.INTEGER else [{}]
    if param.kind is ParamKind.OBJECT:
        return {}
    return "x"


def _required_arguments(op: OperationSpec) -> dict[str, object]:
    return {p.name: _sample_value(p) for p in op.parameters if p.required}


class TestShippedCatalog:
    def test_operation_count(self) -> None:
        assert len(REGISTRY) == 77

    def test_categories(self) -> None:
        assert sorted(REGISTRY.categories()) == sorted(EXPECTED_CATEGORIES)

    def test_names_are_unique(self) -> None:
        names = REGISTRY.names()
        assert len(names) == len(set(names))

    @pytest.mark.parametrize(
        "name",
        [
            "get_projects",
            "add_case",
            "delete_cases",
            "add_plan_entry",
            "get_user_by_email",
            "add_attachment_to_plan_entry",
            "get_attachments_for_test",
        ],
    )
    def test_contains(self, name: str) -> None:
        assert name in REGISTRY

    def test_every_operation_has_description(self) -> None:
        assert all(op.description for op in REGISTRY)

    def test_get_operations_never_have_bodies(self) -> None:
        for op in REGISTRY:
            if op.method is HttpMethod.GET:
                assert not op.located(Location.BODY), op.name

    def test_schema_properties_match_parameters(self) -> None:
        for op in REGISTRY:
            schema = op.input_schema()
            assert list(schema["properties"]) == [p.name for p in op.parameters], op.name
            assert schema.get("required", []) == list(op.required), op.name


class TestRequiredParameters:
    """Required parameters in the schema and in the builder stay in lockstep."""

    @pytest.mark.parametrize("op", list(REGISTRY), ids=lambda op: op.name)
    def test_required_arguments_suffice(self, op: OperationSpec) -> None:
        intent = build_request(op, _required_arguments(op))
        assert intent.path.startswith(op.name)

    @pytest.mark.parametrize(
        "op",
        [op for op in REGISTRY if op.required],
        ids=lambda op: op.name,
    )
    def test_each_required_parameter_is_enforced(self, op: OperationSpec) -> None:
        full = _required_arguments(op)
        for name in op.required:
            partial = {k: v for k, v in full.items() if k != name}
            with pytest.raises(ValidationError) as excinfo:
                build_request(op, partial)
            fields = [e["field"] for e in excinfo.value.detail["errors"]]
            assert fields == [name]


class TestLookup:
    def test_get(self) -> None:
        assert REGISTRY.get("get_case").name == "get_case"

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(UnknownOperationError, match="Unknown tool: get_nonexistent"):
            REGISTRY.get("get_nonexistent")

    def test_find_unknown_returns_none(self) -> None:
        assert REGISTRY.find("get_nonexistent") is None

    def test_by_category(self) -> None:
        names = [op.name for op in REGISTRY.by_category("milestones")]
        assert names == [
            "get_milestones",
            "get_milestone",
            "add_milestone",
            "update_milestone",
            "delete_milestone",
        ]

    def test_iteration_follows_registration_order(self) -> None:
        registry = OperationRegistry(
            [read_op("get_b", "B", category="x"), read_op("get_a", "A", category="y")]
        )
        assert registry.names() == ["get_b", "get_a"]
        assert registry.categories() == ["x", "y"]


class TestRegistryIntegrity:
    def test_duplicate_operation_name(self) -> None:
        with pytest.raises(RegistryError, match="duplicate operation name 'get_x'"):
            OperationRegistry(
                [read_op("get_x", "X", category="x"), read_op("get_x", "X2", category="x")]
            )

    def test_duplicate_parameter(self) -> None:
        op = read_op(
            "get_x", "X", path_param("x_id", "X"), path_param("x_id", "X"), category="x"
        )
        with pytest.raises(RegistryError, match="duplicate parameters"):
            OperationRegistry([op])

    def test_optional_path_parameter_must_be_last(self) -> None:
        op = read_op(
            "get_x",
            "X",
            path_param("a_id", "A", required=False),
            path_param("b_id", "B"),
            category="x",
        )
        with pytest.raises(RegistryError, match="optional path parameter 'a_id'"):
            OperationRegistry([op])

    def test_multipart_needs_exactly_one_file(self) -> None:
        op = upload_op("add_attachment_to_x", "X", path_param("x_id", "X"))
        with pytest.raises(RegistryError, match="exactly one file"):
            OperationRegistry([op])

    def test_multipart_rejects_body_fields(self) -> None:
        op = upload_op(
            "add_attachment_to_x",
            "X",
            path_param("x_id", "X"),
            file_param(),
            body_param("note", "Note"),
        )
        with pytest.raises(RegistryError, match="cannot declare body fields"):
            OperationRegistry([op])

    def test_file_on_json_operation(self) -> None:
        op = write_op("add_x", "X", file_param(), category="x")
        with pytest.raises(RegistryError, match="non-multipart"):
            OperationRegistry([op])

    def test_get_with_body(self) -> None:
        op = read_op("get_x", "X", body_param("q", "Q"), category="x")
        with pytest.raises(RegistryError, match="GET operations cannot send a body"):
            OperationRegistry([op])

    def test_nullable_outside_body(self) -> None:
        param = ParameterSpec("suite_id", ParamKind.INTEGER, Location.QUERY, nullable=True)
        op = read_op("get_x", "X", param, category="x")
        with pytest.raises(RegistryError, match="only body fields can be nullable"):
            OperationRegistry([op])

    def test_all_problems_reported(self) -> None:
        ops = [
            read_op("get_x", "X", body_param("q", "Q"), category="x"),
            write_op("add_x", "X", file_param(), category="x"),
        ]
        with pytest.raises(RegistryError) as excinfo:
            OperationRegistry(ops)
        assert len(excinfo.value.detail["problems"]) == 2
