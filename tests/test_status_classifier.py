from decimal import Decimal

import pytest

from core.domain.enums import Severity, StatusKind
from core.domain.values import Percent
from core.services.evm.policy import EvmThresholds
from core.services.evm.status import get_performance_status, get_status_color


@pytest.mark.parametrize(
    "expected,actual,kind,label,severity",
    [
        (45, 45, StatusKind.ON_TRACK, "On Track", Severity.NORMAL),
        (45, 60, StatusKind.ON_TRACK, "On Track", Severity.NORMAL),
        (45, 35, StatusKind.AT_RISK, "At Risk", Severity.WARNING),
        (45, "44.99", StatusKind.AT_RISK, "At Risk", Severity.WARNING),
        (45, "34.99", StatusKind.BEHIND_SCHEDULE, "Behind Schedule", Severity.CRITICAL),
        (45, 0, StatusKind.BEHIND_SCHEDULE, "Behind Schedule", Severity.CRITICAL),
    ],
)
def test_progress_status_bands(expected, actual, kind, label, severity):
    status = get_status_color(expected, actual)
    assert status.kind == kind
    assert status.label == label
    assert status.severity == severity


def test_progress_status_accepts_percent_values():
    assert get_status_color(Percent.of(45), Percent.of("22.9")).kind == StatusKind.BEHIND_SCHEDULE


@pytest.mark.parametrize("expected", [0, 10, 45, 100])
def test_progress_severity_never_improves_as_actual_drops(expected):
    ranks = [
        get_status_color(expected, Decimal(actual) / 4).severity.rank
        for actual in range(400, -1, -1)
    ]
    assert ranks == sorted(ranks)


@pytest.mark.parametrize(
    "index,kind,label,severity",
    [
        ("1.25", StatusKind.FAVORABLE, "Favorable", Severity.NORMAL),
        ("1.0", StatusKind.FAVORABLE, "Favorable", Severity.NORMAL),
        ("0.9999", StatusKind.CAUTION, "Caution", Severity.WARNING),
        ("0.9", StatusKind.CAUTION, "Caution", Severity.WARNING),
        ("0.8999", StatusKind.UNFAVORABLE, "Unfavorable", Severity.CRITICAL),
        ("0", StatusKind.UNFAVORABLE, "Unfavorable", Severity.CRITICAL),
    ],
)
def test_performance_status_bands(index, kind, label, severity):
    status = get_performance_status(Decimal(index))
    assert (status.kind, status.label, status.severity) == (kind, label, severity)


def test_scenario_cpi_is_caution():
    cpi = Decimal("2300") / Decimal("2400")
    assert get_performance_status(cpi).label == "Caution"


def test_custom_thresholds_shift_bands():
    strict = EvmThresholds(progress_tolerance=Decimal("5"), caution_floor=Decimal("0.95"))
    assert get_status_color(45, 38, strict).kind == StatusKind.BEHIND_SCHEDULE
    assert get_performance_status(Decimal("0.93"), strict).kind == StatusKind.UNFAVORABLE


def test_severity_rank_order():
    assert Severity.NORMAL.rank == Severity.FAVORABLE.rank < Severity.WARNING.rank < Severity.CRITICAL.rank
