from infra.db.wbs.mapper import wbs_node_from_orm, wbs_node_to_orm
from infra.db.wbs.repository import SqlAlchemyWbsRepository

__all__ = [
    "wbs_node_to_orm",
    "wbs_node_from_orm",
    "SqlAlchemyWbsRepository",
]
