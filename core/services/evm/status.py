from __future__ import annotations

from decimal import Decimal

from core.domain.enums import Severity, StatusKind
from core.domain.values import NumberLike, Percent, to_decimal
from core.services.evm.models import StatusRecord
from core.services.evm.policy import DEFAULT_THRESHOLDS, EvmThresholds

ON_TRACK = StatusRecord(StatusKind.ON_TRACK, "On Track", Severity.NORMAL)
AT_RISK = StatusRecord(StatusKind.AT_RISK, "At Risk", Severity.WARNING)
BEHIND_SCHEDULE = StatusRecord(StatusKind.BEHIND_SCHEDULE, "Behind Schedule", Severity.CRITICAL)

FAVORABLE = StatusRecord(StatusKind.FAVORABLE, "Favorable", Severity.NORMAL)
CAUTION = StatusRecord(StatusKind.CAUTION, "Caution", Severity.WARNING)
UNFAVORABLE = StatusRecord(StatusKind.UNFAVORABLE, "Unfavorable", Severity.CRITICAL)


def _percent_value(value: Percent | NumberLike) -> Decimal:
    if isinstance(value, Percent):
        return value.value
    return to_decimal(value, field="progress")


def get_status_color(
    expected: Percent | NumberLike,
    actual: Percent | NumberLike,
    thresholds: EvmThresholds = DEFAULT_THRESHOLDS,
) -> StatusRecord:
    """Progress status from cumulative actual vs expected progress (both in percent)."""
    expected_pct = _percent_value(expected)
    actual_pct = _percent_value(actual)

    if actual_pct >= expected_pct:
        return ON_TRACK
    if expected_pct - actual_pct <= thresholds.progress_tolerance:
        return AT_RISK
    return BEHIND_SCHEDULE


def get_performance_status(
    index: NumberLike,
    thresholds: EvmThresholds = DEFAULT_THRESHOLDS,
) -> StatusRecord:
    """Same bands for CPI and SPI."""
    value = to_decimal(index, field="performance index")
    if value >= thresholds.favorable_floor:
        return FAVORABLE
    if value >= thresholds.caution_floor:
        return CAUTION
    return UNFAVORABLE


classify_progress = get_status_color
classify_performance = get_performance_status


__all__ = [
    "ON_TRACK",
    "AT_RISK",
    "BEHIND_SCHEDULE",
    "FAVORABLE",
    "CAUTION",
    "UNFAVORABLE",
    "get_status_color",
    "get_performance_status",
    "classify_progress",
    "classify_performance",
]
