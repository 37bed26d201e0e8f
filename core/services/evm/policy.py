from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class EvmThresholds:
    # percentage points behind plan still reported as "At Risk"
    progress_tolerance: Decimal = Decimal("10")
    favorable_floor: Decimal = Decimal("1.0")
    caution_floor: Decimal = Decimal("0.9")
    soon_window_days: int = 7
    default_activity_limit: int = 4


DEFAULT_THRESHOLDS = EvmThresholds()


__all__ = ["EvmThresholds", "DEFAULT_THRESHOLDS"]
