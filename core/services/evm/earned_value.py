from __future__ import annotations

from decimal import Decimal
from typing import Optional

from core.domain.values import Money, NumberLike, Percent, to_decimal
from core.domain.wbs import WbsNode
from core.exceptions import ValidationError
from core.services.evm.models import CompletionForecast, PerformanceIndices, RollupTotals

# "no cost incurred / nothing planned yet" reads as on plan, not as a deviation
NEUTRAL_INDEX = Decimal("1.0")

_ZERO = Decimal("0")
_ONE = Decimal("1")


def earned_value(budgeted_cost: Money, percent_complete: Percent) -> Money:
    return budgeted_cost * percent_complete.fraction


def node_earned_value(node: WbsNode) -> Money:
    return earned_value(node.budgeted_cost, node.percent_complete)


def cost_performance_index(earned: Money, actual_cost: Money) -> Decimal:
    if actual_cost.amount > _ZERO:
        return earned / actual_cost
    return NEUTRAL_INDEX


def schedule_performance_index(earned: Money, planned: Money) -> Decimal:
    if planned.amount > _ZERO:
        return earned / planned
    return NEUTRAL_INDEX


def expected_progress_fraction(value: NumberLike) -> Decimal:
    fraction = to_decimal(value, field="expected progress")
    if fraction < _ZERO or fraction > _ONE:
        raise ValidationError(
            f"Expected progress must be a fraction between 0 and 1, got {value!r}.",
            code="INVALID_EXPECTED_PROGRESS",
        )
    return fraction


def planned_value(total_budget: Money, expected_fraction: NumberLike) -> Money:
    """PV = BAC * expected progress; the fraction is supplied by the caller."""
    return total_budget * expected_progress_fraction(expected_fraction)


def cost_variance(earned: Money, actual_cost: Money) -> Money:
    return earned - actual_cost


def schedule_variance(earned: Money, planned: Money) -> Money:
    return earned - planned


def performance_indices(totals: RollupTotals, planned: Money) -> PerformanceIndices:
    return PerformanceIndices(
        cpi=cost_performance_index(totals.total_earned_value, totals.total_actual_cost),
        spi=schedule_performance_index(totals.total_earned_value, planned),
    )


def forecast(bac: Money, earned: Money, actual_cost: Money, cpi: Decimal) -> CompletionForecast:
    """
    Completion forecast from the cost index.

    - EAC = BAC / CPI, only while CPI is positive.
    - ETC = EAC - AC, VAC = BAC - EAC.
    - TCPI(BAC) = (BAC - EV) / (BAC - AC), undefined once AC reaches BAC.
    """
    eac: Optional[Money] = None
    if cpi > _ZERO:
        eac = Money(bac.amount / cpi, bac.currency or actual_cost.currency)

    etc = (eac - actual_cost) if eac is not None else None
    vac = (bac - eac) if eac is not None else None

    tcpi: Optional[Decimal] = None
    remaining_funds = bac - actual_cost
    if remaining_funds.amount > _ZERO:
        tcpi = (bac - earned) / remaining_funds

    return CompletionForecast(EAC=eac, ETC=etc, VAC=vac, TCPI=tcpi)


__all__ = [
    "NEUTRAL_INDEX",
    "earned_value",
    "node_earned_value",
    "cost_performance_index",
    "schedule_performance_index",
    "expected_progress_fraction",
    "planned_value",
    "cost_variance",
    "schedule_variance",
    "performance_indices",
    "forecast",
]
