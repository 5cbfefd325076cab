"""Test cases, case metadata, and bulk case operations."""

from __future__ import annotations

from testrail_mcp.domain.operations import (
    ParamKind,
    ParameterSpec,
    body_param,
    item_field,
    path_param,
    query_param,
    read_op,
    write_op,
)

CASE_ID = path_param("case_id", "Case ID")

STEP_FIELDS = (
    item_field("content", ParamKind.STRING, "Step description"),
    item_field("expected", ParamKind.STRING, "Expected result for this step"),
    item_field("additional_info", ParamKind.STRING, "Additional info for this step"),
    item_field(
        "shared_step_id",
        ParamKind.INTEGER,
        "ID of a shared step (use instead of content/expected)",
    ),
)

_STEPS_SEPARATED = body_param(
    "custom_steps_separated",
    "Separated test steps (optional). Array of step objects with "
    "content/expected or shared_step_id",
    ParamKind.ARRAY,
    item_fields=STEP_FIELDS,
)


def _case_fields(*, title_required: bool, for_create: bool) -> tuple[ParameterSpec, ...]:
    fields = [
        body_param("title", "Test case title", required=title_required),
        body_param("template_id", "Template ID (optional)", ParamKind.INTEGER),
        body_param("type_id", "Test case type ID (optional)", ParamKind.INTEGER),
        body_param("priority_id", "Priority ID (optional)", ParamKind.INTEGER),
        body_param("estimate", "Time estimate (optional)"),
    ]
    if for_create:
        fields.append(body_param("milestone_id", "Milestone ID (optional)", ParamKind.INTEGER))
    fields += [
        body_param("refs", "References/Requirements (optional)"),
        body_param("custom_preconds", "Preconditions (optional)"),
        body_param("custom_steps", "Test steps (optional)"),
        body_param("custom_expected", "Expected result (optional)"),
    ]
    if for_create:
        fields.append(
            body_param("custom_autostat", "Automation Status (optional)", ParamKind.INTEGER)
        )
    fields.append(_STEPS_SEPARATED)
    return tuple(fields)


def _case_ids(description: str) -> ParameterSpec:
    return body_param(
        "case_ids", description, ParamKind.ARRAY, required=True, items=ParamKind.INTEGER
    )


OPERATIONS = (
    read_op(
        "get_cases",
        "Get test cases for a project/suite",
        path_param("project_id", "Project ID"),
        query_param("suite_id", "Suite ID (optional)"),
        query_param("section_id", "Section ID (optional)"),
        category="cases",
    ),
    read_op("get_case", "Get a specific test case by ID", CASE_ID, category="cases"),
    write_op(
        "add_case",
        "Create a new test case",
        path_param("section_id", "Section ID"),
        *_case_fields(title_required=True, for_create=True),
        category="cases",
    ),
    write_op(
        "update_case",
        "Update an existing test case",
        CASE_ID,
        *_case_fields(title_required=False, for_create=False),
        category="cases",
    ),
    write_op("delete_case", "Delete a test case", CASE_ID, category="cases", ack="Case deleted"),
    read_op("get_case_types", "Get all available test case types", category="cases"),
    read_op("get_case_fields", "Get all available test case fields", category="cases"),
    read_op(
        "get_history_for_case",
        "Get the edit history for a test case",
        CASE_ID,
        query_param("limit", "Limit results (optional)"),
        query_param("offset", "Offset for pagination (optional)"),
        category="cases",
    ),
    write_op(
        "copy_cases_to_section",
        "Copy test cases to another section",
        path_param("section_id", "Target section ID"),
        _case_ids("Array of case IDs to copy"),
        category="cases",
    ),
    write_op(
        "move_cases_to_section",
        "Move test cases to another section",
        path_param("section_id", "Target section ID"),
        body_param("suite_id", "Target suite ID", ParamKind.INTEGER, required=True),
        _case_ids("Array of case IDs to move"),
        category="cases",
    ),
    write_op(
        "delete_cases",
        "Delete multiple test cases",
        path_param("project_id", "Project ID"),
        query_param("suite_id", "Suite ID (required for multi-suite projects)"),
        query_param("soft", "Set to 1 to preview deletion without executing (optional)"),
        _case_ids("Array of case IDs to delete"),
        category="cases",
    ),
)
