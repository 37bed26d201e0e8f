from .models import DashboardData, DashboardEVM, UpcomingTask, WbsBreakdownRow
from .service import DashboardService

__all__ = [
    "DashboardService",
    "DashboardData",
    "DashboardEVM",
    "UpcomingTask",
    "WbsBreakdownRow",
]
