"""OperationRegistry: the closed, validated catalog of tools."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from testrail_mcp.domain.errors import RegistryError, UnknownOperationError
from testrail_mcp.domain.operations import (
    Encoding,
    HttpMethod,
    Location,
    OperationSpec,
)


def _check_operation(op: OperationSpec) -> list[str]:
    problems: list[str] = []
    names = [p.name for p in op.parameters]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        problems.append(f"{op.name}: duplicate parameters {duplicates}")

    path_params = op.located(Location.PATH)
    for index, param in enumerate(path_params):
        if not param.required and index != len(path_params) - 1:
            problems.append(f"{op.name}: optional path parameter '{param.name}' is not last")

    files = op.located(Location.FILE)
    if op.encoding is Encoding.MULTIPART:
        if len(files) != 1:
            problems.append(f"{op.name}: multipart operations take exactly one file parameter")
        if op.located(Location.BODY):
            problems.append(f"{op.name}: multipart operations cannot declare body fields")
    elif files:
        problems.append(f"{op.name}: file parameter on a non-multipart operation")

    if op.method is HttpMethod.GET and (op.located(Location.BODY) or files):
        problems.append(f"{op.name}: GET operations cannot send a body")
    for param in op.parameters:
        if param.nullable and param.location is not Location.BODY:
            problems.append(f"{op.name}: only body fields can be nullable, not '{param.name}'")
    return problems


class OperationRegistry:
    """Name-keyed lookup over :class:`OperationSpec` entries.

    Construction validates the whole table and raises
    :class:`RegistryError` on any inconsistency, so a broken catalog
    fails at startup rather than at dispatch time.
    """

    def __init__(self, operations: Iterable[OperationSpec]) -> None:
        self._operations: dict[str, OperationSpec] = {}
        problems: list[str] = []
        for op in operations:
            if op.name in self._operations:
                problems.append(f"duplicate operation name '{op.name}'")
                continue
            problems.extend(_check_operation(op))
            self._operations[op.name] = op
        if problems:
            raise RegistryError(
                "Invalid operation registry: " + "; ".join(problems),
                detail={"problems": problems},
            )

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[OperationSpec]:
        return iter(self._operations.values())

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def names(self) -> list[str]:
        return list(self._operations)

    def find(self, name: str) -> OperationSpec | None:
        return self._operations.get(name)

    def get(self, name: str) -> OperationSpec:
        """Look up *name*, raising :class:`UnknownOperationError` if absent."""
        op = self._operations.get(name)
        if op is None:
            raise UnknownOperationError(name)
        return op

    def categories(self) -> list[str]:
        seen: dict[str, None] = {}
        for op in self._operations.values():
            seen.setdefault(op.category, None)
        return list(seen)

    def by_category(self, category: str) -> list[OperationSpec]:
        return [op for op in self._operations.values() if op.category == category]
