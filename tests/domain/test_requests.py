"""Tests for the request builder and query string helpers."""

from __future__ import annotations

import pytest

from testrail_mcp.catalog import REGISTRY
from testrail_mcp.domain.errors import ValidationError
from testrail_mcp.domain.operations import Encoding, HttpMethod, ResponseKind
from testrail_mcp.domain.requests import (
    append_query,
    build_request,
    encode_query,
    validate_arguments,
)


def _build(name: str, arguments: dict | None):
    return build_request(REGISTRY.get(name), arguments)


class TestPathBuilding:
    def test_add_case_path_and_body(self) -> None:
        intent = _build("add_case", {"section_id": 10, "title": "Login works"})
        assert intent.method is HttpMethod.POST
        assert intent.path == "add_case/10"
        assert intent.body == {"title": "Login works"}
        assert intent.query == {}

    def test_path_params_in_declared_order(self) -> None:
        intent = _build("add_result_for_case", {"case_id": 67, "run_id": 45, "status_id": 1})
        assert intent.path == "add_result_for_case/45/67"
        assert intent.body == {"status_id": 1}

    def test_zero_id_appears_in_path(self) -> None:
        assert _build("get_project", {"project_id": 0}).path == "get_project/0"

    def test_string_path_values_are_quoted(self) -> None:
        intent = _build("delete_plan_entry", {"plan_id": 3, "entry_id": "ab/c d"})
        assert intent.path == "delete_plan_entry/3/ab%2Fc%20d"

    def test_optional_path_param_omitted(self) -> None:
        assert _build("get_users", {}).path == "get_users"
        assert _build("get_users", {"project_id": 5}).path == "get_users/5"

    def test_no_parameters(self) -> None:
        intent = _build("get_statuses", None)
        assert intent.path == "get_statuses"
        assert intent.body is None
        assert intent.query == {}


class TestPresence:
    def test_omitted_optionals_are_absent(self) -> None:
        intent = _build("update_case", {"case_id": 1, "title": "Renamed"})
        assert intent.body == {"title": "Renamed"}

    def test_falsy_values_are_forwarded(self) -> None:
        intent = _build(
            "update_case",
            {"case_id": 1, "refs": "", "priority_id": 0, "estimate": ""},
        )
        assert intent.body == {"priority_id": 0, "estimate": "", "refs": ""}

    def test_false_boolean_forwarded(self) -> None:
        intent = _build("add_run", {"project_id": 1, "name": "Nightly", "include_all": False})
        assert intent.body is not None
        assert intent.body["include_all"] is False

    def test_explicit_null_nullable_body_field_is_forwarded(self) -> None:
        intent = _build("move_section", {"section_id": 4, "parent_id": None})
        assert intent.body == {"parent_id": None}

    def test_explicit_null_plain_body_field_is_dropped(self) -> None:
        intent = _build("update_run", {"run_id": 7, "name": None, "description": "Nightly"})
        assert intent.body == {"description": "Nightly"}

    def test_nullable_field_advertises_null_type(self) -> None:
        parent = REGISTRY.get("move_section").parameter("parent_id")
        assert parent is not None
        assert parent.json_schema()["type"] == ["integer", "null"]

    def test_explicit_null_query_is_dropped(self) -> None:
        intent = _build("get_cases", {"project_id": 1, "suite_id": None})
        assert intent.query == {}

    def test_write_without_body_fields(self) -> None:
        intent = _build("close_run", {"run_id": 9})
        assert intent.body is None

    def test_write_with_body_fields_but_none_supplied(self) -> None:
        intent = _build("update_section", {"section_id": 9})
        assert intent.body == {}

    def test_unknown_keys_are_not_sent(self) -> None:
        intent = _build("get_case", {"case_id": 1, "bogus": "x"})
        assert intent.path == "get_case/1"
        assert intent.body is None
        assert intent.query == {}


class TestLocations:
    def test_query_filters(self) -> None:
        intent = _build("get_cases", {"project_id": 1, "suite_id": 2, "section_id": 3})
        assert intent.path == "get_cases/1"
        assert intent.query == {"suite_id": 2, "section_id": 3}

    def test_mixed_path_query_body(self) -> None:
        intent = _build(
            "delete_cases",
            {"project_id": 1, "suite_id": 2, "soft": 1, "case_ids": [5, 6]},
        )
        assert intent.path == "delete_cases/1"
        assert intent.query == {"suite_id": 2, "soft": 1}
        assert intent.body == {"case_ids": [5, 6]}

    def test_upload_intent(self) -> None:
        intent = _build("add_attachment_to_case", {"case_id": 55, "file_path": "/tmp/a.png"})
        assert intent.path == "add_attachment_to_case/55"
        assert intent.file_path == "/tmp/a.png"
        assert intent.encoding is Encoding.MULTIPART
        assert intent.is_multipart is True
        assert intent.body is None

    def test_binary_response_kind(self) -> None:
        intent = _build("get_attachment", {"attachment_id": "abc-123"})
        assert intent.response is ResponseKind.BINARY

    def test_steps_forwarded_unmodified(self) -> None:
        steps = [
            {"content": "Open page", "expected": "Page opens"},
            {"shared_step_id": 12},
        ]
        intent = _build(
            "add_case", {"section_id": 1, "title": "t", "custom_steps_separated": steps}
        )
        assert intent.body == {"title": "t", "custom_steps_separated": steps}


class TestValidation:
    def test_missing_required(self) -> None:
        with pytest.raises(ValidationError, match="missing required parameter\\(s\\): title"):
            _build("add_case", {"section_id": 10})

    def test_all_missing_named(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            _build("add_result_for_case", {})
        assert "run_id, case_id, status_id" in excinfo.value.message
        fields = [e["field"] for e in excinfo.value.detail["errors"]]
        assert fields == ["run_id", "case_id", "status_id"]

    def test_ill_typed_value(self) -> None:
        with pytest.raises(ValidationError, match="invalid value for 'case_id'"):
            _build("get_case", {"case_id": "not-a-number"})

    def test_non_mapping_arguments(self) -> None:
        with pytest.raises(ValidationError, match="must be an object"):
            validate_arguments(REGISTRY.get("get_case"), ["case_id", 1])

    @pytest.mark.parametrize(
        ("name", "arguments"),
        [
            ("delete_plan_entry", {"plan_id": 1, "entry_id": ""}),
            ("update_plan_entry", {"plan_id": 1, "entry_id": ""}),
            ("get_attachment", {"attachment_id": ""}),
            ("delete_attachment", {"attachment_id": ""}),
        ],
    )
    def test_empty_string_path_identifier(self, name: str, arguments: dict) -> None:
        with pytest.raises(ValidationError) as excinfo:
            _build(name, arguments)
        assert excinfo.value.code == "VALIDATION_ERROR"
        assert "invalid value for" in excinfo.value.message

    def test_numeric_path_string_still_coerced(self) -> None:
        intent = _build("get_attachment", {"attachment_id": 987})
        assert intent.path == "get_attachment/987"

    def test_error_code(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            _build("get_case", {})
        assert excinfo.value.code == "VALIDATION_ERROR"
        assert excinfo.value.detail["operation"] == "get_case"


class TestQueryHelpers:
    def test_encode_query(self) -> None:
        assert encode_query({"suite_id": 2, "soft": True, "email": "a b@x.io"}) == (
            "suite_id=2&soft=1&email=a%20b%40x.io"
        )

    def test_false_encodes_as_zero(self) -> None:
        assert encode_query({"is_completed": False}) == "is_completed=0"

    def test_append_uses_ampersand_after_existing_question_mark(self) -> None:
        url = "https://x.io/index.php?/api/v2/get_cases/1"
        assert append_query(url, {"suite_id": 2}) == f"{url}&suite_id=2"

    def test_append_uses_question_mark_first(self) -> None:
        assert append_query("https://x.io/api/get_cases/1", {"a": 1, "b": 2}) == (
            "https://x.io/api/get_cases/1?a=1&b=2"
        )

    def test_append_nothing(self) -> None:
        assert append_query("https://x.io/index.php?/api/v2/get_case/1", {}) == (
            "https://x.io/index.php?/api/v2/get_case/1"
        )
