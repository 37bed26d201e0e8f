from decimal import Decimal

import pytest

from core.domain.values import Money, Percent
from core.exceptions import ValidationError


def test_money_sums_many_cent_amounts_exactly():
    total = Money.sum(Money.of("0.10") for _ in range(1000))
    assert total.amount == Decimal("100.00")

    # the float equivalent drifts; Money built from floats does not
    assert sum(0.1 for _ in range(1000)) != 100.0
    assert Money.sum(Money.of(0.1) for _ in range(1000)).amount == Decimal("100.0")


def test_money_accepts_stored_decimal_strings():
    assert Money.of("1234.56").amount == Decimal("1234.56")
    assert Money.of(" 12 ").amount == Decimal("12")
    assert Money.of(None).is_zero


@pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity", True])
def test_money_rejects_non_numeric_input(raw):
    with pytest.raises(ValidationError) as exc:
        Money.of(raw)
    assert exc.value.code == "INVALID_AMOUNT"


def test_money_currency_rules():
    eur = Money.of("10", "eur")
    assert eur.currency == "EUR"

    assert (eur + Money.of("5")).currency == "EUR"
    assert (Money.of("5") + eur).currency == "EUR"

    with pytest.raises(ValidationError) as exc:
        eur + Money.of("1", "USD")
    assert exc.value.code == "CURRENCY_MISMATCH"


def test_money_arithmetic_and_rounding():
    a = Money.of("100.005")
    assert a.round().amount == Decimal("100.01")
    assert (a * Decimal("2")).amount == Decimal("200.010")
    assert (-a).is_negative
    assert Money.of("30") / Money.of("40") == Decimal("0.75")
    assert Money.of("1") < Money.of("2")
    assert str(Money.of("2.5", "USD")) == "2.50 USD"

    with pytest.raises(TypeError):
        Money.of("1") * 1.5


def test_builtin_sum_works_from_zero():
    assert sum([Money.of("1"), Money.of("2")]).amount == Decimal("3")


def test_percent_keeps_literal_value():
    p = Percent.of(45)
    assert p.value == Decimal("45")
    assert p.fraction == Decimal("0.45")
    assert Percent.from_fraction("0.45") == p
    assert str(p) == "45.0%"


def test_percent_bounds_and_clamping():
    assert Percent.of(0).is_within_bounds
    assert Percent.of(100).is_within_bounds
    assert not Percent.of("100.01").is_within_bounds
    assert not Percent.of(-1).is_within_bounds
    assert Percent.of(120).clamped() == Percent.of(100)
    assert Percent.of(-5).clamped() == Percent.of(0)
    assert Percent.of(100).is_complete
    assert (Percent.of(40) - Percent.of(45)).value == Decimal("-5")
    assert Percent.of(40) < Percent.of(45)
