"""Sections."""

from __future__ import annotations

from testrail_mcp.domain.operations import (
    ParamKind,
    body_param,
    path_param,
    query_param,
    read_op,
    write_op,
)

SECTION_ID = path_param("section_id", "Section ID")

OPERATIONS = (
    read_op(
        "get_sections",
        "Get all sections for a project/suite",
        path_param("project_id", "Project ID"),
        query_param("suite_id", "Suite ID (optional)"),
        category="sections",
    ),
    read_op("get_section", "Get a specific section by ID", SECTION_ID, category="sections"),
    write_op(
        "add_section",
        "Create a new section",
        path_param("project_id", "Project ID"),
        body_param("name", "Section name", required=True),
        body_param("description", "Section description (optional)"),
        body_param("suite_id", "Suite ID (optional)", ParamKind.INTEGER),
        body_param("parent_id", "Parent section ID (optional)", ParamKind.INTEGER),
        category="sections",
    ),
    write_op(
        "update_section",
        "Update an existing section",
        SECTION_ID,
        body_param("name", "Section name"),
        body_param("description", "Section description"),
        category="sections",
    ),
    write_op(
        "delete_section",
        "Delete a section",
        SECTION_ID,
        category="sections",
        ack="Section deleted",
    ),
    write_op(
        "move_section",
        "Move a section to another parent or position",
        SECTION_ID,
        body_param(
            "parent_id",
            "Parent section ID (null for root)",
            ParamKind.INTEGER,
            nullable=True,
        ),
        body_param(
            "after_id",
            "Section ID after which to place this section (optional)",
            ParamKind.INTEGER,
        ),
        category="sections",
    ),
)
