"""Projects and suites."""

from __future__ import annotations

from testrail_mcp.domain.operations import body_param, path_param, read_op, write_op

PROJECT_ID = path_param("project_id", "Project ID")
SUITE_ID = path_param("suite_id", "Suite ID")

OPERATIONS = (
    read_op("get_projects", "Get all TestRail projects", category="projects"),
    read_op("get_project", "Get a specific project by ID", PROJECT_ID, category="projects"),
    read_op("get_suites", "Get all test suites for a project", PROJECT_ID, category="suites"),
    read_op("get_suite", "Get a specific test suite by ID", SUITE_ID, category="suites"),
    write_op(
        "add_suite",
        "Create a new test suite",
        PROJECT_ID,
        body_param("name", "Suite name", required=True),
        body_param("description", "Suite description (optional)"),
        category="suites",
    ),
    write_op(
        "update_suite",
        "Update an existing test suite",
        SUITE_ID,
        body_param("name", "Suite name"),
        body_param("description", "Suite description"),
        category="suites",
    ),
)
