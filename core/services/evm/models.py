from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from core.domain.enums import Severity, StatusKind
from core.domain.values import Money, Percent
from core.domain.wbs import WbsNode


@dataclass(frozen=True)
class RollupTotals:
    total_budget: Money
    total_actual_cost: Money
    total_earned_value: Money

    @classmethod
    def zero(cls, currency: str | None = None) -> "RollupTotals":
        return cls(Money.zero(currency), Money.zero(currency), Money.zero(currency))

    def __add__(self, other: "RollupTotals") -> "RollupTotals":
        return RollupTotals(
            total_budget=self.total_budget + other.total_budget,
            total_actual_cost=self.total_actual_cost + other.total_actual_cost,
            total_earned_value=self.total_earned_value + other.total_earned_value,
        )


@dataclass(frozen=True)
class WbsRollup:
    totals: RollupTotals
    filtered_nodes: List[WbsNode]


@dataclass(frozen=True)
class NodeRollup:
    node: WbsNode
    earned_value: Money
    subtree: RollupTotals
    subtree_cpi: Decimal
    subtree_cost_variance: Money
    descendant_count: int


@dataclass(frozen=True)
class BudgetAllocation:
    node_id: str
    total: Money
    used: Money
    remaining: Money

    @property
    def over_allocated(self) -> bool:
        return self.remaining.is_negative


@dataclass(frozen=True)
class ProjectBudgetUsage:
    project_budget: Money
    top_level_allocated: Money
    work_package_total: Money
    unallocated: Money
    percent_allocated: Percent


@dataclass(frozen=True)
class PerformanceIndices:
    cpi: Decimal
    spi: Decimal


@dataclass(frozen=True)
class CompletionForecast:
    EAC: Optional[Money]
    ETC: Optional[Money]
    VAC: Optional[Money]
    TCPI: Optional[Decimal]


@dataclass(frozen=True)
class StatusRecord:
    kind: StatusKind
    label: str
    severity: Severity


@dataclass(frozen=True)
class UpcomingActivity:
    node: WbsNode
    day_delta: int
    label: str
    severity: Severity
    kind: StatusKind


@dataclass(frozen=True)
class ProjectPerformance:
    totals: RollupTotals
    filtered_nodes: List[WbsNode]
    planned_value: Money
    indices: PerformanceIndices
    cost_variance: Money
    schedule_variance: Money
    forecast: CompletionForecast
    overall_progress: Percent
    expected_progress: Percent
    progress_status: StatusRecord
    cost_status: StatusRecord
    schedule_status: StatusRecord
    upcoming_activities: List[UpcomingActivity]
    reference_date: date
    levels: Dict[int, RollupTotals] = field(default_factory=dict)


__all__ = [
    "RollupTotals",
    "WbsRollup",
    "NodeRollup",
    "BudgetAllocation",
    "ProjectBudgetUsage",
    "PerformanceIndices",
    "CompletionForecast",
    "StatusRecord",
    "UpcomingActivity",
    "ProjectPerformance",
]
