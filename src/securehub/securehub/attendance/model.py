from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import format_date, format_time
from ..core.enums import AttendanceType


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one clock-in or clock-out. Append-only."""

    id: str
    user_id: str
    user_name: str
    timestamp: int
    type: AttendanceType
    ip: str

    @property
    def date_text(self) -> str:
        return format_date(self.timestamp)

    @property
    def time_text(self) -> str:
        return format_time(self.timestamp)

    @classmethod
    def from_record(cls, row: dict) -> "AttendanceEvent":
        return cls(
            id=str(row["id"]),
            user_id=str(row["userId"]),
            user_name=str(row.get("userName") or ""),
            timestamp=int(row["timestamp"]),
            type=AttendanceType(row["type"]),
            ip=str(row.get("ip") or ""),
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "userName": self.user_name,
            "timestamp": self.timestamp,
            "type": self.type.value,
            "ip": self.ip,
        }
