from __future__ import annotations

from enum import Enum


class WbsNodeType(str, Enum):
    SUMMARY = "Summary"
    WORK_PACKAGE = "WorkPackage"
    ACTIVITY = "Activity"
    TASK = "Task"
    # any collaborator-defined type (Milestone, Deliverable...)
    OTHER = "Other"

    @classmethod
    def parse(cls, value: "str | WbsNodeType | None") -> "WbsNodeType":
        """Known type for a stored value; anything unrecognised is OTHER."""
        if isinstance(value, WbsNodeType):
            return value
        token = (value or "").strip().replace(" ", "").replace("_", "").lower()
        for member in cls:
            if member.value.lower() == token:
                return member
        return cls.OTHER


class Severity(str, Enum):
    NORMAL = "normal"
    FAVORABLE = "favorable"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        # favorable is a positive flavour of normal, not a lower tier
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.NORMAL: 0,
    Severity.FAVORABLE: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
}


class StatusKind(str, Enum):
    # progress axis
    ON_TRACK = "ON_TRACK"
    AT_RISK = "AT_RISK"
    BEHIND_SCHEDULE = "BEHIND_SCHEDULE"
    # CPI / SPI axis
    FAVORABLE = "FAVORABLE"
    CAUTION = "CAUTION"
    UNFAVORABLE = "UNFAVORABLE"
    # activity urgency
    OVERDUE = "OVERDUE"
    STARTING_TODAY = "STARTING_TODAY"
    STARTING_SOON = "STARTING_SOON"
    STARTING_LATER = "STARTING_LATER"


__all__ = ["WbsNodeType", "Severity", "StatusKind"]
