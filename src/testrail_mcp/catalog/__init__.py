"""Operation catalog: every TestRail capability exposed as a tool.

``REGISTRY`` is built and validated at import time; an inconsistent
table is a startup failure.
"""

from __future__ import annotations

from testrail_mcp.catalog import (
    attachments,
    cases,
    milestones,
    plans,
    projects,
    results,
    runs,
    sections,
    users,
)
from testrail_mcp.catalog.registry import OperationRegistry

REGISTRY = OperationRegistry(
    [
        *projects.OPERATIONS,
        *sections.OPERATIONS,
        *cases.OPERATIONS,
        *runs.OPERATIONS,
        *results.OPERATIONS,
        *plans.OPERATIONS,
        *milestones.OPERATIONS,
        *users.OPERATIONS,
        *attachments.OPERATIONS,
    ]
)

__all__ = ["REGISTRY", "OperationRegistry"]
