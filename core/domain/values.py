"""
Decimal-backed value objects for money and percentages.

Every amount that flows through ingestion, aggregation and display is a
``Money`` wrapping a ``Decimal``; stored numeric strings and floats are
converted once at construction and never summed as binary floats.
Percentages keep their literal value (45 means 45%) and are divided by 100
only through ``Percent.fraction``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Union

from core.exceptions import ValidationError

NumberLike = Union[Decimal, int, str, float]

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def to_decimal(value: NumberLike | None, *, field: str = "value") -> Decimal:
    """Exact conversion to Decimal; floats go through their shortest repr."""
    if value is None:
        return _ZERO
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValidationError(f"Invalid {field}: {value!r}", code="INVALID_AMOUNT")
    elif isinstance(value, (int, str, float)):
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid {field}: {value!r}", code="INVALID_AMOUNT") from exc
    else:
        raise ValidationError(f"Invalid {field}: {value!r}", code="INVALID_AMOUNT")

    if not result.is_finite():
        raise ValidationError(f"Invalid {field}: {value!r}", code="INVALID_AMOUNT")
    return result


def _normalize_currency(code: str | None) -> str | None:
    cleaned = (code or "").strip().upper()
    return cleaned or None


@dataclass(frozen=True)
class Money:
    """
    Monetary amount with an optional currency code.

    A ``None`` currency means "unspecified" and adopts the currency of the
    other operand; two different explicit currencies never mix.
    Arithmetic is exact, call ``round()`` for display precision.
    """

    amount: Decimal
    currency: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount, field="amount"))
        object.__setattr__(self, "currency", _normalize_currency(self.currency))

    @classmethod
    def of(cls, amount: NumberLike | None, currency: str | None = None) -> Money:
        return cls(amount=to_decimal(amount, field="amount"), currency=currency)

    @classmethod
    def zero(cls, currency: str | None = None) -> Money:
        return cls(amount=_ZERO, currency=currency)

    @classmethod
    def sum(cls, values: Iterable[Money], currency: str | None = None) -> Money:
        total = cls.zero(currency)
        for value in values:
            total = total + value
        return total

    @property
    def is_zero(self) -> bool:
        return self.amount == _ZERO

    @property
    def is_positive(self) -> bool:
        return self.amount > _ZERO

    @property
    def is_negative(self) -> bool:
        return self.amount < _ZERO

    def round(self, places: int = 2) -> Money:
        quantum = Decimal(1).scaleb(-places)
        return Money(self.amount.quantize(quantum, rounding=ROUND_HALF_UP), self.currency)

    def _merged_currency(self, other: Money) -> str | None:
        if self.currency and other.currency and self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} and {other.currency} amounts.",
                code="CURRENCY_MISMATCH",
            )
        return self.currency or other.currency

    def _require_money(self, other: object, op: str) -> Money:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot {op} Money and {type(other).__name__}")
        return other

    def __add__(self, other: Money) -> Money:
        other = self._require_money(other, "add")
        return Money(self.amount + other.amount, self._merged_currency(other))

    def __radd__(self, other):
        # lets builtin sum() start from 0
        if other == 0:
            return self
        return self.__add__(other)

    def __sub__(self, other: Money) -> Money:
        other = self._require_money(other, "subtract")
        return Money(self.amount - other.amount, self._merged_currency(other))

    def __neg__(self) -> Money:
        return Money(-self.amount, self.currency)

    def __mul__(self, factor: Decimal | int) -> Money:
        if isinstance(factor, (Money, float, bool)) or not isinstance(factor, (Decimal, int)):
            raise TypeError(f"Cannot multiply Money by {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    __rmul__ = __mul__

    def __truediv__(self, other: Money) -> Decimal:
        other = self._require_money(other, "divide")
        self._merged_currency(other)
        return self.amount / other.amount

    def _compare(self, other: object) -> tuple[Decimal, Decimal]:
        other = self._require_money(other, "compare")
        self._merged_currency(other)
        return self.amount, other.amount

    def __lt__(self, other: Money) -> bool:
        a, b = self._compare(other)
        return a < b

    def __le__(self, other: Money) -> bool:
        a, b = self._compare(other)
        return a <= b

    def __gt__(self, other: Money) -> bool:
        a, b = self._compare(other)
        return a > b

    def __ge__(self, other: Money) -> bool:
        a, b = self._compare(other)
        return a >= b

    def __str__(self) -> str:
        rounded = self.round().amount
        return f"{rounded} {self.currency}" if self.currency else str(rounded)


@dataclass(frozen=True, order=True)
class Percent:
    """Percentage stored as its literal value: Percent(45) is 45%."""

    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_decimal(self.value, field="percent"))

    @classmethod
    def of(cls, value: NumberLike | None) -> Percent:
        return cls(to_decimal(value, field="percent"))

    @classmethod
    def from_fraction(cls, fraction: NumberLike) -> Percent:
        return cls(to_decimal(fraction, field="fraction") * _HUNDRED)

    @classmethod
    def zero(cls) -> Percent:
        return cls(_ZERO)

    @property
    def fraction(self) -> Decimal:
        return self.value / _HUNDRED

    @property
    def is_within_bounds(self) -> bool:
        return _ZERO <= self.value <= _HUNDRED

    @property
    def is_complete(self) -> bool:
        return self.value >= _HUNDRED

    def clamped(self) -> Percent:
        return Percent(min(_HUNDRED, max(_ZERO, self.value)))

    def __sub__(self, other: Percent) -> Percent:
        if not isinstance(other, Percent):
            raise TypeError(f"Cannot subtract {type(other).__name__} from Percent")
        return Percent(self.value - other.value)

    def __str__(self) -> str:
        return f"{self.value.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"


__all__ = ["Money", "Percent", "NumberLike", "to_decimal"]
