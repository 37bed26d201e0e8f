from __future__ import annotations

from typing import List, Sequence

from core.domain.enums import Severity, StatusKind
from core.domain.wbs import WbsNode
from core.services.evm.models import ProjectBudgetUsage, ProjectPerformance
from core.services.evm.rollup import summary_allocations


class DashboardAlertsMixin:
    def _build_alerts(
        self,
        nodes: Sequence[WbsNode],
        performance: ProjectPerformance,
        budget_usage: ProjectBudgetUsage,
    ) -> List[str]:
        alerts: List[str] = []

        if not nodes:
            alerts.append("This project has no WBS items yet.")
            return alerts

        if budget_usage.unallocated.is_negative:
            alerts.append(
                f"Top-level WBS budgets exceed the project budget by {-budget_usage.unallocated}."
            )

        names = {n.id: (n.name or n.code or n.id) for n in nodes}
        for node_id, allocation in summary_allocations(nodes).items():
            if allocation.over_allocated:
                alerts.append(f"Work packages exceed summary allocation for '{names[node_id]}'.")

        if performance.progress_status.severity == Severity.CRITICAL:
            alerts.append(
                f"Progress {performance.overall_progress} is behind the expected "
                f"{performance.expected_progress}."
            )
        if performance.cost_status.severity == Severity.CRITICAL:
            alerts.append(f"Cost performance is unfavorable (CPI {performance.indices.cpi:.2f}).")
        if performance.schedule_status.severity == Severity.CRITICAL:
            alerts.append(f"Schedule performance is unfavorable (SPI {performance.indices.spi:.2f}).")

        overdue = [a for a in performance.upcoming_activities if a.kind == StatusKind.OVERDUE]
        if overdue:
            alerts.append(f"{len(overdue)} open activity(ies) should already have started.")

        return alerts
