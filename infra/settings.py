from __future__ import annotations

import os
from dataclasses import replace
from decimal import Decimal, InvalidOperation

from core.exceptions import ValidationError
from core.services.evm.policy import DEFAULT_THRESHOLDS, EvmThresholds

_DECIMAL_OVERRIDES = {
    "EVM_PROGRESS_TOLERANCE": "progress_tolerance",
    "EVM_FAVORABLE_FLOOR": "favorable_floor",
    "EVM_CAUTION_FLOOR": "caution_floor",
}
_INT_OVERRIDES = {
    "EVM_SOON_WINDOW_DAYS": "soon_window_days",
    "EVM_ACTIVITY_LIMIT": "default_activity_limit",
}


def _env(name: str) -> str | None:
    raw = (os.getenv(name) or "").strip()
    return raw or None


def load_thresholds(base: EvmThresholds = DEFAULT_THRESHOLDS) -> EvmThresholds:
    """Thresholds with environment overrides applied; blank variables are ignored."""
    changes: dict[str, object] = {}

    for env_name, field_name in _DECIMAL_OVERRIDES.items():
        raw = _env(env_name)
        if raw is None:
            continue
        try:
            changes[field_name] = Decimal(raw)
        except InvalidOperation as exc:
            raise ValidationError(
                f"{env_name} must be a number, got {raw!r}.", code="INVALID_SETTING"
            ) from exc

    for env_name, field_name in _INT_OVERRIDES.items():
        raw = _env(env_name)
        if raw is None:
            continue
        try:
            changes[field_name] = int(raw)
        except ValueError as exc:
            raise ValidationError(
                f"{env_name} must be an integer, got {raw!r}.", code="INVALID_SETTING"
            ) from exc

    if not changes:
        return base
    return replace(base, **changes)


__all__ = ["load_thresholds"]
