from .dashboard import DashboardData, DashboardEVM, DashboardService, UpcomingTask, WbsBreakdownRow
from .evm import EvmThresholds, LevelFilter, ProjectPerformance, evaluate_project

__all__ = [
    "DashboardService",
    "DashboardData",
    "DashboardEVM",
    "UpcomingTask",
    "WbsBreakdownRow",
    "EvmThresholds",
    "LevelFilter",
    "ProjectPerformance",
    "evaluate_project",
]
