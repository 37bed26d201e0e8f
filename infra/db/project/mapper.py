from __future__ import annotations

from core.domain.project import Project
from core.domain.values import Money
from infra.db.models import ProjectORM


def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        name=project.name,
        description=project.description,
        start_date=project.start_date,
        end_date=project.end_date,
        budget=project.budget.amount,
        currency=project.currency,
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        name=obj.name,
        description=obj.description or "",
        start_date=obj.start_date,
        end_date=obj.end_date,
        budget=Money.of(obj.budget, obj.currency),
        currency=obj.currency,
    )
