from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.identifiers import generate_id
from core.domain.values import Money, NumberLike


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    budget: Money
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    currency: Optional[str] = None
    description: str = ""

    @staticmethod
    def create(
        name: str,
        budget: Money | NumberLike = 0,
        currency: Optional[str] = None,
        **extra,
    ) -> "Project":
        if not isinstance(budget, Money):
            budget = Money.of(budget, currency)
        return Project(
            id=generate_id(),
            name=name,
            budget=budget,
            currency=currency or budget.currency,
            **extra,
        )


__all__ = ["Project"]
