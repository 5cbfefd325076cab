"""Milestones."""

from __future__ import annotations

from testrail_mcp.domain.operations import (
    ParamKind,
    body_param,
    path_param,
    read_op,
    write_op,
)

MILESTONE_ID = path_param("milestone_id", "Milestone ID")
PROJECT_ID = path_param("project_id", "Project ID")

OPERATIONS = (
    read_op("get_milestones", "Get milestones for a project", PROJECT_ID, category="milestones"),
    read_op(
        "get_milestone", "Get a specific milestone by ID", MILESTONE_ID, category="milestones"
    ),
    write_op(
        "add_milestone",
        "Create a new milestone",
        PROJECT_ID,
        body_param("name", "Milestone name", required=True),
        body_param("description", "Milestone description (optional)"),
        body_param("due_on", "Due date as UNIX timestamp (optional)", ParamKind.INTEGER),
        body_param(
            "parent_id",
            "Parent milestone ID for sub-milestones (optional)",
            ParamKind.INTEGER,
        ),
        body_param("refs", "References (optional)"),
        body_param("start_on", "Start date as UNIX timestamp (optional)", ParamKind.INTEGER),
        category="milestones",
    ),
    write_op(
        "update_milestone",
        "Update an existing milestone",
        MILESTONE_ID,
        body_param("name", "Milestone name (optional)"),
        body_param("description", "Milestone description (optional)"),
        body_param("due_on", "Due date as UNIX timestamp (optional)", ParamKind.INTEGER),
        body_param("is_completed", "Mark as completed (optional)", ParamKind.BOOLEAN),
        body_param("is_started", "Mark as started (optional)", ParamKind.BOOLEAN),
        body_param("parent_id", "Parent milestone ID (optional)", ParamKind.INTEGER),
        body_param("start_on", "Start date as UNIX timestamp (optional)", ParamKind.INTEGER),
        category="milestones",
    ),
    write_op(
        "delete_milestone",
        "Delete a milestone",
        MILESTONE_ID,
        category="milestones",
        ack="Milestone deleted",
    ),
)
