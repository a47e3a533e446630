from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import ATTENDANCE_TABLE
from ..core.exceptions import StoreFailed
from ..database.store import RecordStore
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_recent(self) -> Sequence[AttendanceEvent]:
        try:
            rows = self._store.select_all(ATTENDANCE_TABLE, order_by="timestamp", descending=True)
        except StoreFailed as e:
            logger.error("Error fetching logs: %s", e)
            return []

        out: list[AttendanceEvent] = []
        for row in rows:
            try:
                out.append(AttendanceEvent.from_record(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed attendance row %r: %s", row.get("id"), e)
        return out

    def add(self, event: AttendanceEvent) -> None:
        self._store.insert(ATTENDANCE_TABLE, event.to_record())
