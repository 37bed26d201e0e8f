from __future__ import annotations

from typing import Dict, List

from core.domain.wbs import WbsNode
from core.services.dashboard.models import UpcomingTask
from core.services.evm.models import UpcomingActivity


class DashboardUpcomingMixin:
    def _build_upcoming_tasks(
        self,
        activities: List[UpcomingActivity],
        by_id: Dict[str, WbsNode],
    ) -> List[UpcomingTask]:
        upcoming: List[UpcomingTask] = []
        for item in activities:
            node = item.node
            parent = by_id.get(node.parent_id) if node.parent_id else None
            upcoming.append(
                UpcomingTask(
                    node_id=node.id,
                    name=node.name,
                    parent_name=parent.name if parent else "",
                    start_date=node.start_date,
                    end_date=node.end_date,
                    duration=node.duration,
                    percent_complete=node.percent_complete,
                    day_delta=item.day_delta,
                    label=item.label,
                    severity=item.severity,
                    kind=item.kind,
                )
            )
        return upcoming
