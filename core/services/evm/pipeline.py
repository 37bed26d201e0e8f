from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from core.domain.values import NumberLike, Percent
from core.domain.wbs import WbsNode
from core.services.evm.earned_value import (
    cost_variance,
    expected_progress_fraction,
    forecast,
    performance_indices,
    planned_value,
    schedule_variance,
)
from core.services.evm.models import ProjectPerformance
from core.services.evm.policy import DEFAULT_THRESHOLDS, EvmThresholds
from core.services.evm.rollup import LevelFilter, overall_progress, rollup, rollup_by_level
from core.services.evm.status import get_performance_status, get_status_color
from core.services.evm.urgency import next_activities
from core.services.evm.validation import validate_nodes

logger = logging.getLogger(__name__)


def evaluate_project(
    nodes: Sequence[WbsNode],
    expected_progress: NumberLike,
    *,
    level_filter: LevelFilter | str | int | None = LevelFilter.ALL,
    reference_date: Optional[date] = None,
    activity_limit: Optional[int] = None,
    thresholds: EvmThresholds = DEFAULT_THRESHOLDS,
    project_id: Optional[str] = None,
    check_cycles: bool = False,
) -> ProjectPerformance:
    """
    Full EVM evaluation of one project snapshot.

    - Validates the whole snapshot first; nothing is computed for bad input.
    - BAC/AC/EV are project-wide; `level_filter` only trims `filtered_nodes`.
    - PV = BAC * expected_progress (fraction 0..1 supplied by the caller).
    - CPI/SPI fall back to 1.0 when AC/PV is zero.

    Pure: same snapshot and arguments give an equal result.
    """
    nodes = list(nodes)
    level_filter = LevelFilter.parse(level_filter)
    fraction = expected_progress_fraction(expected_progress)
    reference = reference_date if reference_date is not None else date.today()
    limit = activity_limit if activity_limit is not None else thresholds.default_activity_limit

    validate_nodes(nodes, project_id=project_id, check_cycles=check_cycles)

    wbs = rollup(nodes, level_filter)
    totals = wbs.totals
    pv = planned_value(totals.total_budget, fraction)
    indices = performance_indices(totals, pv)

    progress = overall_progress(totals)
    expected = Percent.from_fraction(fraction)

    result = ProjectPerformance(
        totals=totals,
        filtered_nodes=wbs.filtered_nodes,
        planned_value=pv,
        indices=indices,
        cost_variance=cost_variance(totals.total_earned_value, totals.total_actual_cost),
        schedule_variance=schedule_variance(totals.total_earned_value, pv),
        forecast=forecast(
            totals.total_budget,
            totals.total_earned_value,
            totals.total_actual_cost,
            indices.cpi,
        ),
        overall_progress=progress,
        expected_progress=expected,
        progress_status=get_status_color(expected, progress, thresholds),
        cost_status=get_performance_status(indices.cpi, thresholds),
        schedule_status=get_performance_status(indices.spi, thresholds),
        upcoming_activities=next_activities(nodes, reference, limit, thresholds),
        reference_date=reference,
        levels=rollup_by_level(nodes),
    )
    logger.debug(
        "Evaluated %d WBS nodes: BAC=%s EV=%s AC=%s CPI=%s SPI=%s",
        len(nodes),
        totals.total_budget,
        totals.total_earned_value,
        totals.total_actual_cost,
        indices.cpi,
        indices.spi,
    )
    return result


__all__ = ["evaluate_project"]
