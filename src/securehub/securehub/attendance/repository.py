from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    def list_recent(self) -> Sequence[AttendanceEvent]:
        """All events, newest first."""
        raise NotImplementedError

    def add(self, event: AttendanceEvent) -> None:
        raise NotImplementedError
