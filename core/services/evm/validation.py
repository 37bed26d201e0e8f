from __future__ import annotations

from typing import Dict, Optional, Sequence

from core.domain.wbs import WbsNode
from core.exceptions import StructuralViolationError, ValidationError


def validate_node(node: WbsNode) -> None:
    if node.level <= 0:
        raise ValidationError(
            f"WBS node {node.id} has invalid level {node.level}; levels start at 1.",
            code="WBS_INVALID_LEVEL",
        )
    if node.budgeted_cost.is_negative:
        raise ValidationError(
            f"WBS node {node.id} has a negative budgeted cost.",
            code="WBS_NEGATIVE_BUDGET",
        )
    if node.actual_cost.is_negative:
        raise ValidationError(
            f"WBS node {node.id} has a negative actual cost.",
            code="WBS_NEGATIVE_ACTUAL_COST",
        )
    if not node.percent_complete.is_within_bounds:
        raise ValidationError(
            f"WBS node {node.id} percent complete {node.percent_complete} is outside 0-100.",
            code="WBS_INVALID_PERCENT",
        )
    if node.start_date and node.end_date and node.end_date < node.start_date:
        raise ValidationError(
            f"WBS node {node.id} ends ({node.end_date}) before it starts ({node.start_date}).",
            code="WBS_INVALID_DATES",
        )
    if node.duration is not None and node.duration < 0:
        raise ValidationError(
            f"WBS node {node.id} duration cannot be negative.",
            code="WBS_NEGATIVE_DURATION",
        )


def _check_no_cycles(by_id: Dict[str, WbsNode]) -> None:
    # walk each parent chain once; nodes proven acyclic are remembered
    settled: set[str] = set()
    for start_id in by_id:
        path: list[str] = []
        on_path: set[str] = set()
        current: Optional[str] = start_id
        while current is not None and current not in settled:
            if current in on_path:
                cycle = " -> ".join(path[path.index(current):] + [current])
                raise StructuralViolationError(
                    f"WBS parent chain forms a cycle: {cycle}",
                    code="WBS_CYCLE",
                )
            on_path.add(current)
            path.append(current)
            current = by_id[current].parent_id
        settled.update(path)


def validate_nodes(
    nodes: Sequence[WbsNode],
    *,
    project_id: Optional[str] = None,
    check_cycles: bool = False,
) -> None:
    """
    Fail fast on the first invalid value or structural violation.

    Field checks run before structure checks, so a snapshot is rejected as a
    whole before any rollup is computed.
    """
    for node in nodes:
        validate_node(node)

    by_id: Dict[str, WbsNode] = {}
    for node in nodes:
        if node.id in by_id:
            raise StructuralViolationError(
                f"Duplicate WBS node id {node.id}.", code="WBS_DUPLICATE_ID"
            )
        by_id[node.id] = node

    expected_project = project_id if project_id is not None else (nodes[0].project_id if nodes else None)
    for node in nodes:
        if node.project_id != expected_project:
            raise StructuralViolationError(
                f"WBS node {node.id} belongs to project {node.project_id}, not {expected_project}.",
                code="WBS_FOREIGN_PROJECT",
            )
        if node.parent_id is not None and node.parent_id not in by_id:
            raise StructuralViolationError(
                f"WBS node {node.id} references unknown parent {node.parent_id}.",
                code="WBS_UNKNOWN_PARENT",
            )

    if check_cycles:
        _check_no_cycles(by_id)

    for node in nodes:
        if node.parent_id is None:
            if node.level != 1:
                raise StructuralViolationError(
                    f"Top-level WBS node {node.id} must be level 1, got {node.level}.",
                    code="WBS_LEVEL_MISMATCH",
                )
            continue
        parent = by_id[node.parent_id]
        if node.level != parent.level + 1:
            raise StructuralViolationError(
                f"WBS node {node.id} is level {node.level} but its parent {parent.id} is level {parent.level}.",
                code="WBS_LEVEL_MISMATCH",
            )


__all__ = ["validate_node", "validate_nodes"]
