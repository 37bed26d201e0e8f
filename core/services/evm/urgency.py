from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, List, Optional

from core.domain.enums import Severity, StatusKind
from core.domain.wbs import WbsNode
from core.exceptions import ValidationError
from core.services.evm.models import StatusRecord, UpcomingActivity
from core.services.evm.policy import DEFAULT_THRESHOLDS, EvmThresholds


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def day_delta(start_date: date | datetime, reference_date: date | datetime) -> int:
    """Whole calendar days from the reference date to the start date (negative when past)."""
    return (_as_date(start_date) - _as_date(reference_date)).days


def classify_delta(delta: int, thresholds: EvmThresholds = DEFAULT_THRESHOLDS) -> StatusRecord:
    if delta < 0:
        return StatusRecord(StatusKind.OVERDUE, f"Overdue by {-delta} days", Severity.CRITICAL)
    if delta == 0:
        return StatusRecord(StatusKind.STARTING_TODAY, "Starting today", Severity.FAVORABLE)
    if delta <= thresholds.soon_window_days:
        return StatusRecord(StatusKind.STARTING_SOON, f"Starting in {delta} days", Severity.WARNING)
    return StatusRecord(StatusKind.STARTING_LATER, f"Starting in {delta} days", Severity.NORMAL)


def classify_urgency(
    start_date: date | datetime,
    reference_date: Optional[date | datetime] = None,
    thresholds: EvmThresholds = DEFAULT_THRESHOLDS,
) -> StatusRecord:
    reference = reference_date if reference_date is not None else date.today()
    return classify_delta(day_delta(start_date, reference), thresholds)


def next_activities(
    nodes: Iterable[WbsNode],
    reference_date: Optional[date | datetime] = None,
    limit: Optional[int] = None,
    thresholds: EvmThresholds = DEFAULT_THRESHOLDS,
) -> List[UpcomingActivity]:
    """
    Open activities ordered by start date, earliest first.

    Only Activity nodes below 100% with a start date qualify. Python's sort is
    stable, so equal start dates keep their input order.
    """
    if limit is None:
        limit = thresholds.default_activity_limit
    if limit <= 0:
        raise ValidationError(
            f"Activity limit must be positive, got {limit}.", code="INVALID_ACTIVITY_LIMIT"
        )
    reference = _as_date(reference_date if reference_date is not None else date.today())

    open_activities = [
        n
        for n in nodes
        if n.is_activity and not n.percent_complete.is_complete and n.start_date is not None
    ]
    open_activities.sort(key=lambda n: _as_date(n.start_date))

    upcoming: List[UpcomingActivity] = []
    for node in open_activities[:limit]:
        delta = day_delta(node.start_date, reference)
        status = classify_delta(delta, thresholds)
        upcoming.append(
            UpcomingActivity(
                node=node,
                day_delta=delta,
                label=status.label,
                severity=status.severity,
                kind=status.kind,
            )
        )
    return upcoming


__all__ = ["day_delta", "classify_delta", "classify_urgency", "next_activities"]
