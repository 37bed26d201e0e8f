from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import WbsRepository
from core.domain.wbs import WbsNode
from core.services.evm.hierarchy import sort_by_code
from infra.db.models import ProjectORM, WbsItemORM
from infra.db.wbs.mapper import wbs_node_from_orm


class SqlAlchemyWbsRepository(WbsRepository):
    """Read-only snapshot access to a project's WBS items."""

    def __init__(self, session: Session):
        self.session = session

    def _currency_for(self, project_id: str) -> Optional[str]:
        project = self.session.get(ProjectORM, project_id)
        return project.currency if project else None

    def get(self, node_id: str) -> Optional[WbsNode]:
        obj = self.session.get(WbsItemORM, node_id)
        if not obj:
            return None
        return wbs_node_from_orm(obj, self._currency_for(obj.project_id))

    def list_by_project(self, project_id: str) -> List[WbsNode]:
        stmt = select(WbsItemORM).where(WbsItemORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        currency = self._currency_for(project_id)
        return sort_by_code(wbs_node_from_orm(row, currency) for row in rows)
