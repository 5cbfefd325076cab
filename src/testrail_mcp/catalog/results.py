"""Test results, single and bulk."""

from __future__ import annotations

from testrail_mcp.domain.operations import (
    ParamKind,
    body_param,
    item_field,
    path_param,
    read_op,
    write_op,
)

RUN_ID = path_param("run_id", "Run ID")
TEST_ID = path_param("test_id", "Test ID")

CASE_RESULT_FIELDS = (
    item_field("case_id", ParamKind.INTEGER),
    item_field("status_id", ParamKind.INTEGER),
    item_field("comment", ParamKind.STRING),
)

TEST_RESULT_FIELDS = (
    item_field("test_id", ParamKind.INTEGER, "Test ID"),
    item_field("status_id", ParamKind.INTEGER, "Status ID"),
    item_field("comment", ParamKind.STRING, "Comment (optional)"),
    item_field("elapsed", ParamKind.STRING, "Time elapsed (optional)"),
    item_field("defects", ParamKind.STRING, "Defect IDs (optional)"),
    item_field("version", ParamKind.STRING, "Version (optional)"),
)

OPERATIONS = (
    read_op("get_results", "Get results for a test", TEST_ID, category="results"),
    read_op(
        "get_results_for_case",
        "Get results for a test case in a run",
        RUN_ID,
        path_param("case_id", "Case ID"),
        category="results",
    ),
    read_op("get_results_for_run", "Get results for a test run", RUN_ID, category="results"),
    write_op(
        "add_result",
        "Add a test result",
        TEST_ID,
        body_param(
            "status_id",
            "Status ID (1=Passed, 5=Failed, etc.)",
            ParamKind.INTEGER,
            required=True,
        ),
        body_param("comment", "Comment (optional)"),
        body_param("elapsed", "Time elapsed (optional)"),
        body_param("defects", "Defect IDs (optional)"),
        category="results",
    ),
    write_op(
        "add_result_for_case",
        "Add a test result for a specific case in a run",
        RUN_ID,
        path_param("case_id", "Case ID"),
        body_param("status_id", "Status ID", ParamKind.INTEGER, required=True),
        body_param("comment", "Comment (optional)"),
        body_param("elapsed", "Time elapsed (optional)"),
        category="results",
    ),
    write_op(
        "add_results_for_cases",
        "Add multiple test results for cases in a run",
        RUN_ID,
        body_param(
            "results",
            "Array of results",
            ParamKind.ARRAY,
            required=True,
            item_fields=CASE_RESULT_FIELDS,
        ),
        category="results",
    ),
    write_op(
        "add_results",
        "Add multiple test results by test IDs",
        RUN_ID,
        body_param(
            "results",
            "Array of results",
            ParamKind.ARRAY,
            required=True,
            item_fields=TEST_RESULT_FIELDS,
        ),
        category="results",
    ),
)
