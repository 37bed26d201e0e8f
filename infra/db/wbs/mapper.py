from __future__ import annotations

from typing import Optional

from core.domain.enums import WbsNodeType
from core.domain.values import Money, Percent
from core.domain.wbs import WbsNode
from infra.db.models import WbsItemORM


def wbs_node_to_orm(node: WbsNode) -> WbsItemORM:
    return WbsItemORM(
        id=node.id,
        project_id=node.project_id,
        parent_id=node.parent_id,
        name=node.name,
        code=node.code,
        level=node.level,
        type=node.type_label or node.type.value,
        budgeted_cost=node.budgeted_cost.amount,
        actual_cost=node.actual_cost.amount,
        percent_complete=node.percent_complete.value,
        start_date=node.start_date,
        end_date=node.end_date,
        duration=node.duration,
        actual_start_date=node.actual_start_date,
        actual_end_date=node.actual_end_date,
    )


def wbs_node_from_orm(obj: WbsItemORM, currency: Optional[str] = None) -> WbsNode:
    # Numeric columns come back as Decimal; missing values read as zero
    return WbsNode(
        id=obj.id,
        project_id=obj.project_id,
        parent_id=obj.parent_id,
        level=obj.level,
        type=WbsNodeType.parse(obj.type),
        type_label=(obj.type or "").strip(),
        budgeted_cost=Money.of(obj.budgeted_cost, currency),
        actual_cost=Money.of(obj.actual_cost, currency),
        percent_complete=Percent.of(obj.percent_complete),
        start_date=obj.start_date,
        end_date=obj.end_date,
        duration=obj.duration or 0,
        name=obj.name or "",
        code=obj.code or "",
        actual_start_date=obj.actual_start_date,
        actual_end_date=obj.actual_end_date,
    )
