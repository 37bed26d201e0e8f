# infra/db/repositories.py
from infra.db.project.repository import SqlAlchemyProjectRepository
from infra.db.wbs.repository import SqlAlchemyWbsRepository

__all__ = [
    "SqlAlchemyProjectRepository",
    "SqlAlchemyWbsRepository",
]
