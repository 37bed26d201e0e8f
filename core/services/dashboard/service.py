# core/services/dashboard/service.py
from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence

from core.domain.values import NumberLike
from core.domain.wbs import WbsNode
from core.exceptions import DomainError, NotFoundError
from core.interfaces import ProjectRepository, WbsRepository
from core.services.dashboard.alerts import DashboardAlertsMixin
from core.services.dashboard.evm import DashboardEvmMixin
from core.services.dashboard.models import DashboardData, WbsBreakdownRow
from core.services.dashboard.upcoming import DashboardUpcomingMixin
from core.services.evm.earned_value import cost_performance_index
from core.services.evm.hierarchy import index_by_id, sort_by_code
from core.services.evm.pipeline import evaluate_project
from core.services.evm.policy import DEFAULT_THRESHOLDS, EvmThresholds
from core.services.evm.rollup import LevelFilter, project_budget_usage, rollup_by_node

logger = logging.getLogger(__name__)


class DashboardService(
    DashboardEvmMixin,
    DashboardUpcomingMixin,
    DashboardAlertsMixin,
):
    """
    Loads a project's WBS snapshot and turns it into dashboard figures.

    Holds repositories and thresholds only; every call reads a fresh snapshot.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        wbs_repo: WbsRepository,
        thresholds: EvmThresholds = DEFAULT_THRESHOLDS,
    ):
        self._project_repo: ProjectRepository = project_repo
        self._wbs_repo: WbsRepository = wbs_repo
        self._thresholds: EvmThresholds = thresholds

    # --------------------------------------------------------------
    # Public API
    # --------------------------------------------------------------

    def get_dashboard_data(
        self,
        project_id: str,
        expected_progress: NumberLike,
        *,
        level_filter: LevelFilter | str | int | None = LevelFilter.LEVEL_1,
        reference_date: Optional[date] = None,
        activity_limit: Optional[int] = None,
        check_cycles: bool = False,
    ) -> DashboardData:
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        nodes = self._wbs_repo.list_by_project(project_id)
        try:
            performance = evaluate_project(
                nodes,
                expected_progress,
                level_filter=level_filter,
                reference_date=reference_date,
                activity_limit=activity_limit,
                thresholds=self._thresholds,
                project_id=project_id,
                check_cycles=check_cycles,
            )
        except DomainError as exc:
            logger.warning("EVM evaluation rejected for project %s: [%s] %s", project_id, exc.code, exc)
            raise

        budget_usage = project_budget_usage(project, nodes)
        data = DashboardData(
            project=project,
            evm=self._build_evm(performance),
            wbs_rows=self._build_wbs_rows(nodes, performance.filtered_nodes),
            upcoming_tasks=self._build_upcoming_tasks(performance.upcoming_activities, index_by_id(nodes)),
            budget_usage=budget_usage,
            alerts=self._build_alerts(nodes, performance, budget_usage),
        )
        logger.info(
            "Dashboard for project %s: %d WBS items, CPI=%.4f SPI=%.4f, progress %s",
            project_id,
            len(nodes),
            performance.indices.cpi,
            performance.indices.spi,
            performance.progress_status.label,
        )
        return data

    # --------------------------------------------------------------
    # Helpers
    # --------------------------------------------------------------

    def _build_wbs_rows(
        self,
        nodes: Sequence[WbsNode],
        visible: Sequence[WbsNode],
    ) -> List[WbsBreakdownRow]:
        # rows show each node's own figures, totals stay project-wide
        per_node = rollup_by_node(nodes)
        rows: List[WbsBreakdownRow] = []
        for node in sort_by_code(visible):
            earned = per_node[node.id].earned_value
            rows.append(
                WbsBreakdownRow(
                    node_id=node.id,
                    code=node.code,
                    name=node.name,
                    level=node.level,
                    budget=node.budgeted_cost,
                    actual=node.actual_cost,
                    earned=earned,
                    progress=node.percent_complete,
                    cpi=cost_performance_index(earned, node.actual_cost),
                )
            )
        return rows
