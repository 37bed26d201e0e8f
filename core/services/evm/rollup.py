from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

from core.domain.enums import WbsNodeType
from core.domain.project import Project
from core.domain.values import Money, Percent
from core.domain.wbs import WbsNode
from core.exceptions import ValidationError
from core.services.evm.earned_value import (
    cost_performance_index,
    cost_variance,
    node_earned_value,
)
from core.services.evm.hierarchy import children_by_parent, descendants
from core.services.evm.models import (
    BudgetAllocation,
    NodeRollup,
    ProjectBudgetUsage,
    RollupTotals,
    WbsRollup,
)


class LevelFilter(Enum):
    LEVEL_1 = 1
    LEVEL_2 = 2
    ALL = None

    @property
    def ceiling(self) -> Optional[int]:
        return self.value

    def includes(self, node: WbsNode) -> bool:
        return self.ceiling is None or node.level <= self.ceiling

    @classmethod
    def parse(cls, value: "LevelFilter | str | int | None") -> "LevelFilter":
        if isinstance(value, LevelFilter):
            return value
        if value is None:
            return cls.ALL
        token = str(value).strip().lower().replace("_", "").replace(" ", "")
        aliases = {
            "1": cls.LEVEL_1,
            "level1": cls.LEVEL_1,
            "2": cls.LEVEL_2,
            "level2": cls.LEVEL_2,
            "all": cls.ALL,
        }
        if token not in aliases:
            raise ValidationError(
                f"Unknown WBS level filter: {value!r}; use level1, level2 or all.",
                code="INVALID_LEVEL_FILTER",
            )
        return aliases[token]


def filter_by_level(nodes: Iterable[WbsNode], level_filter: LevelFilter = LevelFilter.ALL) -> List[WbsNode]:
    return [n for n in nodes if level_filter.includes(n)]


def summarize(nodes: Iterable[WbsNode], currency: Optional[str] = None) -> RollupTotals:
    totals = RollupTotals.zero(currency)
    for node in nodes:
        totals = totals + RollupTotals(
            total_budget=node.budgeted_cost,
            total_actual_cost=node.actual_cost,
            total_earned_value=node_earned_value(node),
        )
    return totals


def rollup(nodes: Sequence[WbsNode], level_filter: LevelFilter = LevelFilter.ALL) -> WbsRollup:
    """
    Project-wide totals plus the display subset for the chosen WBS depth.

    Totals always cover every node so CPI/SPI do not move when the viewed
    depth changes; only `filtered_nodes` honours the level filter.
    """
    return WbsRollup(
        totals=summarize(nodes),
        filtered_nodes=filter_by_level(nodes, level_filter),
    )


def rollup_by_level(nodes: Iterable[WbsNode]) -> Dict[int, RollupTotals]:
    buckets: Dict[int, List[WbsNode]] = {}
    for node in nodes:
        buckets.setdefault(node.level, []).append(node)
    return {level: summarize(buckets[level]) for level in sorted(buckets)}


def rollup_by_node(nodes: Sequence[WbsNode]) -> Dict[str, NodeRollup]:
    """Own and subtree (node + descendants) totals for every node."""
    children = children_by_parent(nodes)
    out: Dict[str, NodeRollup] = {}
    for node in nodes:
        below = descendants(node.id, children)
        subtree = summarize([node, *below])
        out[node.id] = NodeRollup(
            node=node,
            earned_value=node_earned_value(node),
            subtree=subtree,
            subtree_cpi=cost_performance_index(subtree.total_earned_value, subtree.total_actual_cost),
            subtree_cost_variance=cost_variance(subtree.total_earned_value, subtree.total_actual_cost),
            descendant_count=len(below),
        )
    return out


def percent_of_total(part: Money, whole: Money) -> Percent:
    if whole.amount <= 0:
        return Percent.zero()
    return Percent.from_fraction(part / whole)


def overall_progress(totals: RollupTotals) -> Percent:
    """Budget-weighted completion: EV / BAC, 0% for an unbudgeted project."""
    return percent_of_total(totals.total_earned_value, totals.total_budget)


def summary_allocations(nodes: Sequence[WbsNode]) -> Dict[str, BudgetAllocation]:
    children = children_by_parent(nodes)
    allocations: Dict[str, BudgetAllocation] = {}
    for node in nodes:
        if node.type != WbsNodeType.SUMMARY:
            continue
        packages = [c for c in children.get(node.id, []) if c.type == WbsNodeType.WORK_PACKAGE]
        used = Money.sum((c.budgeted_cost for c in packages), node.budgeted_cost.currency)
        allocations[node.id] = BudgetAllocation(
            node_id=node.id,
            total=node.budgeted_cost,
            used=used,
            remaining=node.budgeted_cost - used,
        )
    return allocations


def project_budget_usage(project: Project, nodes: Iterable[WbsNode]) -> ProjectBudgetUsage:
    nodes = list(nodes)
    allocated = Money.sum((n.budgeted_cost for n in nodes if n.level == 1), project.currency)
    packages = Money.sum(
        (n.budgeted_cost for n in nodes if n.type == WbsNodeType.WORK_PACKAGE),
        project.currency,
    )
    return ProjectBudgetUsage(
        project_budget=project.budget,
        top_level_allocated=allocated,
        work_package_total=packages,
        unallocated=project.budget - allocated,
        percent_allocated=percent_of_total(allocated, project.budget),
    )


__all__ = [
    "LevelFilter",
    "filter_by_level",
    "summarize",
    "rollup",
    "rollup_by_level",
    "rollup_by_node",
    "percent_of_total",
    "overall_progress",
    "summary_allocations",
    "project_budget_usage",
]
