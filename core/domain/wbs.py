from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import WbsNodeType
from core.domain.identifiers import generate_id
from core.domain.values import Money, NumberLike, Percent


@dataclass(frozen=True)
class WbsNode:
    """
    One element of a project's Work Breakdown Structure.

    Level 1 nodes have no parent; every other node sits exactly one level
    below its parent. Incoming values are kept as supplied (no clamping);
    validation decides whether a snapshot is usable.
    """

    id: str
    project_id: str
    parent_id: Optional[str]
    level: int
    type: WbsNodeType
    budgeted_cost: Money
    actual_cost: Money
    percent_complete: Percent
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration: int = 0
    name: str = ""
    code: str = ""
    actual_start_date: Optional[date] = None
    actual_end_date: Optional[date] = None
    # stored type text as supplied; `type` is its known classification
    type_label: str = ""

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @property
    def is_activity(self) -> bool:
        return self.type == WbsNodeType.ACTIVITY

    @staticmethod
    def create(
        project_id: str,
        *,
        level: int = 1,
        parent_id: Optional[str] = None,
        type: WbsNodeType | str = WbsNodeType.WORK_PACKAGE,
        budgeted_cost: Money | NumberLike = 0,
        actual_cost: Money | NumberLike = 0,
        percent_complete: Percent | NumberLike = 0,
        currency: Optional[str] = None,
        id: Optional[str] = None,
        **extra,
    ) -> "WbsNode":
        return WbsNode(
            id=id or generate_id(),
            project_id=project_id,
            parent_id=parent_id,
            level=level,
            type=WbsNodeType.parse(type),
            type_label=type.value if isinstance(type, WbsNodeType) else (type or "").strip(),
            budgeted_cost=_as_money(budgeted_cost, currency),
            actual_cost=_as_money(actual_cost, currency),
            percent_complete=(
                percent_complete
                if isinstance(percent_complete, Percent)
                else Percent.of(percent_complete)
            ),
            **extra,
        )


def _as_money(value: Money | NumberLike, currency: Optional[str]) -> Money:
    if isinstance(value, Money):
        return value
    return Money.of(value, currency)


__all__ = ["WbsNode"]
