from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.dashboard import DashboardService
from core.services.evm.policy import EvmThresholds
from infra.db.repositories import SqlAlchemyProjectRepository, SqlAlchemyWbsRepository
from infra.settings import load_thresholds


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    thresholds: EvmThresholds
    project_repo: SqlAlchemyProjectRepository
    wbs_repo: SqlAlchemyWbsRepository
    dashboard_service: DashboardService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "thresholds": self.thresholds,
            "project_repo": self.project_repo,
            "wbs_repo": self.wbs_repo,
            "dashboard_service": self.dashboard_service,
        }


def build_service_graph(session: Session, thresholds: EvmThresholds | None = None) -> ServiceGraph:
    thresholds = thresholds or load_thresholds()
    project_repo = SqlAlchemyProjectRepository(session)
    wbs_repo = SqlAlchemyWbsRepository(session)
    dashboard_service = DashboardService(project_repo, wbs_repo, thresholds=thresholds)
    return ServiceGraph(
        session=session,
        thresholds=thresholds,
        project_repo=project_repo,
        wbs_repo=wbs_repo,
        dashboard_service=dashboard_service,
    )


def build_service_dict(session: Session, thresholds: EvmThresholds | None = None) -> dict[str, Any]:
    return build_service_graph(session, thresholds).as_dict()
