from datetime import date, datetime, timedelta

import pytest

from core.domain.enums import Severity, StatusKind, WbsNodeType
from core.exceptions import ValidationError
from core.services.evm.urgency import classify_urgency, day_delta, next_activities


@pytest.mark.parametrize(
    "offset,label,severity,kind",
    [
        (-1, "Overdue by 1 days", Severity.CRITICAL, StatusKind.OVERDUE),
        (-12, "Overdue by 12 days", Severity.CRITICAL, StatusKind.OVERDUE),
        (0, "Starting today", Severity.FAVORABLE, StatusKind.STARTING_TODAY),
        (1, "Starting in 1 days", Severity.WARNING, StatusKind.STARTING_SOON),
        (7, "Starting in 7 days", Severity.WARNING, StatusKind.STARTING_SOON),
        (8, "Starting in 8 days", Severity.NORMAL, StatusKind.STARTING_LATER),
        (30, "Starting in 30 days", Severity.NORMAL, StatusKind.STARTING_LATER),
    ],
)
def test_urgency_boundaries(today, offset, label, severity, kind):
    status = classify_urgency(today + timedelta(days=offset), today)
    assert status.label == label
    assert status.severity == severity
    assert status.kind == kind


def test_day_delta_uses_calendar_days(today):
    late_evening = datetime(2024, 3, 1, 23, 59)
    assert day_delta(date(2024, 3, 2), late_evening) == 1
    assert day_delta(datetime(2024, 2, 28, 8, 0), today) == -2


def test_reference_date_defaults_to_today():
    assert classify_urgency(date.today()).kind == StatusKind.STARTING_TODAY


def test_next_activities_picks_open_activities_by_start_date(site_wbs, today):
    upcoming = next_activities(site_wbs, today)

    assert [a.node.id for a in upcoming] == ["A121", "A122", "A211", "A212"]
    assert [a.day_delta for a in upcoming] == [-3, 0, 7, 8]
    assert [a.label for a in upcoming] == [
        "Overdue by 3 days",
        "Starting today",
        "Starting in 7 days",
        "Starting in 8 days",
    ]
    assert [a.severity for a in upcoming] == [
        Severity.CRITICAL,
        Severity.FAVORABLE,
        Severity.WARNING,
        Severity.NORMAL,
    ]


def test_next_activities_respects_limit(site_wbs, today):
    assert [a.node.id for a in next_activities(site_wbs, today, limit=2)] == ["A121", "A122"]


def test_next_activities_rejects_non_positive_limit(site_wbs, today):
    with pytest.raises(ValidationError) as exc:
        next_activities(site_wbs, today, limit=0)
    assert exc.value.code == "INVALID_ACTIVITY_LIMIT"


def test_next_activities_keeps_input_order_for_equal_start_dates(node_factory, today):
    start = date(2024, 3, 5)
    nodes = [
        node_factory(f"act-{i}", type=WbsNodeType.ACTIVITY, start_date=start)
        for i in (3, 1, 2)
    ]
    assert [a.node.id for a in next_activities(nodes, today)] == ["act-3", "act-1", "act-2"]


def test_next_activities_skips_tasks_finished_and_undated(node_factory, today):
    nodes = [
        node_factory("task", type=WbsNodeType.TASK, start_date=date(2024, 3, 2)),
        node_factory("done", type=WbsNodeType.ACTIVITY, pct=100, start_date=date(2024, 3, 2)),
        node_factory("undated", type=WbsNodeType.ACTIVITY),
        node_factory("open", type=WbsNodeType.ACTIVITY, pct="99.9", start_date=date(2024, 3, 3)),
    ]
    assert [a.node.id for a in next_activities(nodes, today)] == ["open"]
    assert next_activities([], today) == []
