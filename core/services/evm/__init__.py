from .earned_value import (
    NEUTRAL_INDEX,
    cost_performance_index,
    cost_variance,
    earned_value,
    forecast,
    planned_value,
    schedule_performance_index,
    schedule_variance,
)
from .hierarchy import WbsTreeNode, build_hierarchy, sort_by_code
from .models import (
    BudgetAllocation,
    CompletionForecast,
    NodeRollup,
    PerformanceIndices,
    ProjectBudgetUsage,
    ProjectPerformance,
    RollupTotals,
    StatusRecord,
    UpcomingActivity,
    WbsRollup,
)
from .pipeline import evaluate_project
from .policy import DEFAULT_THRESHOLDS, EvmThresholds
from .rollup import (
    LevelFilter,
    filter_by_level,
    overall_progress,
    project_budget_usage,
    rollup,
    rollup_by_level,
    rollup_by_node,
    summarize,
    summary_allocations,
)
from .status import get_performance_status, get_status_color
from .urgency import classify_urgency, day_delta, next_activities
from .validation import validate_nodes

__all__ = [
    "NEUTRAL_INDEX",
    "earned_value",
    "cost_performance_index",
    "schedule_performance_index",
    "planned_value",
    "cost_variance",
    "schedule_variance",
    "forecast",
    "WbsTreeNode",
    "build_hierarchy",
    "sort_by_code",
    "BudgetAllocation",
    "CompletionForecast",
    "NodeRollup",
    "PerformanceIndices",
    "ProjectBudgetUsage",
    "ProjectPerformance",
    "RollupTotals",
    "StatusRecord",
    "UpcomingActivity",
    "WbsRollup",
    "evaluate_project",
    "EvmThresholds",
    "DEFAULT_THRESHOLDS",
    "LevelFilter",
    "filter_by_level",
    "overall_progress",
    "project_budget_usage",
    "rollup",
    "rollup_by_level",
    "rollup_by_node",
    "summarize",
    "summary_allocations",
    "get_status_color",
    "get_performance_status",
    "classify_urgency",
    "day_delta",
    "next_activities",
    "validate_nodes",
]
