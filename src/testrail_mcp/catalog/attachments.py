"""Attachment upload, listing, download metadata, and deletion."""

from __future__ import annotations

from testrail_mcp.domain.operations import (
    OperationSpec,
    ParamKind,
    ParameterSpec,
    ResponseKind,
    file_param,
    path_param,
    query_param,
    read_op,
    upload_op,
    write_op,
)

ATTACHMENT_ID = path_param("attachment_id", "Attachment ID", ParamKind.STRING)
ENTRY_ID = path_param("entry_id", "Plan entry ID", ParamKind.STRING)
PLAN_ID = path_param("plan_id", "Plan ID")


def _paged(name: str, description: str, parent: ParameterSpec) -> OperationSpec:
    return read_op(
        name,
        description,
        parent,
        query_param("limit", "Limit results (optional)"),
        query_param("offset", "Offset for pagination (optional)"),
        category="attachments",
    )


OPERATIONS = (
    upload_op(
        "add_attachment_to_case",
        "Add an attachment to a test case",
        path_param("case_id", "Case ID"),
        file_param(),
    ),
    upload_op(
        "add_attachment_to_result",
        "Add an attachment to a test result",
        path_param("result_id", "Result ID"),
        file_param(),
    ),
    upload_op(
        "add_attachment_to_run",
        "Add an attachment to a test run",
        path_param("run_id", "Run ID"),
        file_param(),
    ),
    upload_op("add_attachment_to_plan", "Add an attachment to a test plan", PLAN_ID, file_param()),
    upload_op(
        "add_attachment_to_plan_entry",
        "Add an attachment to a test plan entry",
        PLAN_ID,
        ENTRY_ID,
        file_param(),
    ),
    read_op(
        "get_attachment",
        "Get/download an attachment by ID",
        ATTACHMENT_ID,
        category="attachments",
        response=ResponseKind.BINARY,
    ),
    _paged(
        "get_attachments_for_case",
        "Get all attachments for a test case",
        path_param("case_id", "Case ID"),
    ),
    read_op(
        "get_attachments_for_test",
        "Get all attachments for a test",
        path_param("test_id", "Test ID"),
        category="attachments",
    ),
    _paged(
        "get_attachments_for_run",
        "Get all attachments for a test run",
        path_param("run_id", "Run ID"),
    ),
    _paged("get_attachments_for_plan", "Get all attachments for a test plan", PLAN_ID),
    read_op(
        "get_attachments_for_plan_entry",
        "Get all attachments for a test plan entry",
        PLAN_ID,
        ENTRY_ID,
        category="attachments",
    ),
    write_op(
        "delete_attachment",
        "Delete an attachment",
        ATTACHMENT_ID,
        category="attachments",
        ack="Attachment deleted",
    ),
)
