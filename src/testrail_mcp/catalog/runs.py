"""Test runs and the tests inside them."""

from __future__ import annotations

from testrail_mcp.domain.operations import (
    ParamKind,
    body_param,
    path_param,
    query_param,
    read_op,
    write_op,
)

PROJECT_ID = path_param("project_id", "Project ID")
RUN_ID = path_param("run_id", "Run ID")

OPERATIONS = (
    read_op("get_runs", "Get test runs for a project", PROJECT_ID, category="runs"),
    read_op("get_run", "Get a specific test run by ID", RUN_ID, category="runs"),
    write_op(
        "add_run",
        "Create a new test run",
        PROJECT_ID,
        body_param("name", "Run name", required=True),
        body_param("suite_id", "Suite ID (optional)", ParamKind.INTEGER),
        body_param("description", "Run description (optional)"),
        body_param("milestone_id", "Milestone ID (optional)", ParamKind.INTEGER),
        body_param("assignedto_id", "User ID to assign (optional)", ParamKind.INTEGER),
        body_param("include_all", "Include all test cases (optional)", ParamKind.BOOLEAN),
        body_param(
            "case_ids", "Specific case IDs (optional)", ParamKind.ARRAY, items=ParamKind.INTEGER
        ),
        category="runs",
    ),
    write_op(
        "update_run",
        "Update an existing test run",
        RUN_ID,
        body_param("name", "Run name (optional)"),
        body_param("description", "Run description (optional)"),
        body_param("milestone_id", "Milestone ID (optional)", ParamKind.INTEGER),
        category="runs",
    ),
    write_op("close_run", "Close a test run", RUN_ID, category="runs"),
    write_op(
        "delete_run",
        "Delete a test run",
        RUN_ID,
        query_param("soft", "Set to 1 to preview deletion without executing (optional)"),
        category="runs",
        ack="Run deleted",
    ),
    read_op("get_tests", "Get tests for a test run", RUN_ID, category="tests"),
    read_op(
        "get_test",
        "Get a specific test by ID",
        path_param("test_id", "Test ID"),
        category="tests",
    ),
)
