"""Tests for ResponseEnvelope."""

from __future__ import annotations

import json

import pytest

from testrail_mcp.services.result import EnvelopeError, ResponseEnvelope


class TestResponseEnvelope:
    def test_ok(self) -> None:
        envelope = ResponseEnvelope.ok("get_case", {"id": 1})
        assert envelope.success is True
        assert envelope.op == "get_case"
        assert envelope.payload == {"id": 1}
        assert envelope.error is None
        assert envelope.message is None

    def test_fail(self) -> None:
        envelope = ResponseEnvelope.fail(
            "get_case", "TRANSPORT_ERROR", "boom", {"status_code": 500}
        )
        assert envelope.success is False
        assert envelope.payload is None
        assert envelope.error == EnvelopeError(
            code="TRANSPORT_ERROR", message="boom", detail={"status_code": 500}
        )
        assert envelope.message == "boom"

    def test_fail_default_detail(self) -> None:
        error = ResponseEnvelope.fail("x", "ERROR", "m").error
        assert error is not None
        assert error.detail == {}

    def test_frozen(self) -> None:
        envelope = ResponseEnvelope.ok("get_case", {})
        with pytest.raises(Exception):
            envelope.success = False  # type: ignore[misc]

    def test_render_success_is_indented_json(self) -> None:
        payload = {"id": 1, "title": "Überprüfung"}
        text = ResponseEnvelope.ok("get_case", payload).render()
        assert json.loads(text) == payload
        assert text == json.dumps(payload, indent=2, ensure_ascii=False)

    def test_render_null_payload(self) -> None:
        assert ResponseEnvelope.ok("close_run", None).render() == "null"

    def test_render_failure(self) -> None:
        envelope = ResponseEnvelope.fail("get_case", "NOT_AUTHENTICATED", "Not authenticated.")
        assert envelope.render() == "Error: Not authenticated."

    def test_json_round_trip_shape(self) -> None:
        data = json.loads(ResponseEnvelope.fail("x", "ERROR", "m").model_dump_json())
        assert data == {
            "success": False,
            "op": "x",
            "payload": None,
            "error": {"code": "ERROR", "message": "m", "detail": {}},
        }
