from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for console dispatch and network gating."""

    ADMIN = "ADMIN"
    STAFF = "STAFF"


class AttendanceType(str, Enum):
    """Kind of clock event. No alternation is enforced between the two."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"

    @property
    def label(self) -> str:
        return "Check-in" if self is AttendanceType.CHECK_IN else "Check-out"
