from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from core.domain.enums import Severity, StatusKind
from core.domain.project import Project
from core.domain.values import Money, Percent
from core.services.evm.models import ProjectBudgetUsage, StatusRecord


@dataclass
class DashboardEVM:
    as_of: date
    BAC: Money
    PV: Money
    EV: Money
    AC: Money
    CPI: Decimal
    SPI: Decimal
    CV: Money
    SV: Money
    EAC: Optional[Money]
    VAC: Optional[Money]
    TCPI_to_BAC: Optional[Decimal]
    overall_progress: Percent
    expected_progress: Percent
    progress_status: StatusRecord
    cost_status: StatusRecord
    schedule_status: StatusRecord
    status_text: str


@dataclass
class WbsBreakdownRow:
    node_id: str
    code: str
    name: str
    level: int
    budget: Money
    actual: Money
    earned: Money
    progress: Percent
    cpi: Decimal


@dataclass
class UpcomingTask:
    node_id: str
    name: str
    parent_name: str
    start_date: date | None
    end_date: date | None
    duration: int
    percent_complete: Percent
    day_delta: int
    label: str
    severity: Severity
    kind: StatusKind


@dataclass
class DashboardData:
    project: Project
    evm: DashboardEVM
    wbs_rows: List[WbsBreakdownRow]
    upcoming_tasks: List[UpcomingTask]
    budget_usage: ProjectBudgetUsage
    alerts: List[str] = field(default_factory=list)
