"""Users and reference data (statuses, priorities, templates, fields)."""

from __future__ import annotations

from testrail_mcp.domain.operations import ParamKind, path_param, query_param, read_op

PROJECT_ID = path_param("project_id", "Project ID")

OPERATIONS = (
    read_op("get_user", "Get a user by ID", path_param("user_id", "User ID"), category="users"),
    read_op("get_current_user", "Get the current authenticated user", category="users"),
    read_op(
        "get_user_by_email",
        "Get a user by email address",
        query_param("email", "User email address", ParamKind.STRING, required=True),
        category="users",
    ),
    read_op(
        "get_users",
        "Get all users (optionally filtered by project)",
        path_param(
            "project_id", "Project ID (optional, required for non-admins)", required=False
        ),
        category="users",
    ),
    read_op("get_statuses", "Get all available test result statuses", category="reference"),
    read_op(
        "get_case_statuses",
        "Get all available test case statuses (Enterprise)",
        category="reference",
    ),
    read_op("get_priorities", "Get all available test case priorities", category="reference"),
    read_op("get_templates", "Get all templates for a project", PROJECT_ID, category="reference"),
    read_op(
        "get_configs", "Get all configurations for a project", PROJECT_ID, category="reference"
    ),
    read_op(
        "get_result_fields", "Get all available result custom fields", category="reference"
    ),
)
