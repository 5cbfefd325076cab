"""Test plans, plan entries, and runs inside plan entries."""

from __future__ import annotations

from testrail_mcp.domain.operations import (
    ParamKind,
    ParameterSpec,
    body_param,
    path_param,
    read_op,
    write_op,
)

PLAN_ID = path_param("plan_id", "Plan ID")
ENTRY_ID = path_param("entry_id", "Plan entry ID", ParamKind.STRING)
RUN_ID = path_param("run_id", "Run ID")


def _ids(name: str, description: str, *, required: bool = False) -> ParameterSpec:
    return body_param(
        name, description, ParamKind.ARRAY, required=required, items=ParamKind.INTEGER
    )


ASSIGNEE = body_param("assignedto_id", "User ID to assign (optional)", ParamKind.INTEGER)
INCLUDE_ALL = body_param("include_all", "Include all test cases (optional)", ParamKind.BOOLEAN)
CASE_IDS = _ids("case_ids", "Specific case IDs (optional)")
REFS = body_param("refs", "References (optional)")

OPERATIONS = (
    read_op(
        "get_plans",
        "Get test plans for a project",
        path_param("project_id", "Project ID"),
        category="plans",
    ),
    read_op("get_plan", "Get a specific test plan by ID", PLAN_ID, category="plans"),
    write_op(
        "add_plan",
        "Create a new test plan",
        path_param("project_id", "Project ID"),
        body_param("name", "Plan name", required=True),
        body_param("description", "Plan description (optional)"),
        body_param("milestone_id", "Milestone ID (optional)", ParamKind.INTEGER),
        body_param("entries", "Array of plan entries/test runs (optional)", ParamKind.ARRAY),
        category="plans",
    ),
    write_op(
        "add_plan_entry",
        "Add test runs to a test plan",
        PLAN_ID,
        body_param("suite_id", "Suite ID", ParamKind.INTEGER, required=True),
        body_param("name", "Entry name (optional)"),
        body_param("description", "Entry description (optional)"),
        ASSIGNEE,
        INCLUDE_ALL,
        CASE_IDS,
        _ids("config_ids", "Configuration IDs (optional)"),
        REFS,
        body_param("runs", "Array of test runs with configurations (optional)", ParamKind.ARRAY),
        category="plans",
    ),
    write_op(
        "add_run_to_plan_entry",
        "Add a test run to an existing plan entry",
        PLAN_ID,
        ENTRY_ID,
        _ids("config_ids", "Configuration IDs", required=True),
        body_param("description", "Run description (optional)"),
        ASSIGNEE,
        INCLUDE_ALL,
        CASE_IDS,
        REFS,
        category="plans",
    ),
    write_op(
        "update_plan",
        "Update an existing test plan",
        PLAN_ID,
        body_param("name", "Plan name (optional)"),
        body_param("description", "Plan description (optional)"),
        body_param("milestone_id", "Milestone ID (optional)", ParamKind.INTEGER),
        category="plans",
    ),
    write_op(
        "update_plan_entry",
        "Update a test plan entry",
        PLAN_ID,
        ENTRY_ID,
        body_param("name", "Entry name (optional)"),
        body_param("description", "Entry description (optional)"),
        ASSIGNEE,
        INCLUDE_ALL,
        CASE_IDS,
        REFS,
        category="plans",
    ),
    write_op(
        "update_run_in_plan_entry",
        "Update a test run inside a plan entry",
        RUN_ID,
        body_param("description", "Run description (optional)"),
        ASSIGNEE,
        INCLUDE_ALL,
        CASE_IDS,
        REFS,
        category="plans",
    ),
    write_op("close_plan", "Close a test plan", PLAN_ID, category="plans"),
    write_op("delete_plan", "Delete a test plan", PLAN_ID, category="plans", ack="Plan deleted"),
    write_op(
        "delete_plan_entry",
        "Delete a test plan entry",
        PLAN_ID,
        ENTRY_ID,
        category="plans",
        ack="Plan entry deleted",
    ),
    write_op(
        "delete_run_from_plan_entry",
        "Delete a test run from a plan entry",
        RUN_ID,
        category="plans",
        ack="Run removed from plan entry",
    ),
)
