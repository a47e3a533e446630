from __future__ import annotations

import logging
import uuid
from typing import Callable, Sequence

from ..common.datetime_utils import now_millis
from ..core.enums import AttendanceType
from ..core.exceptions import NetworkRestricted
from ..network.model import NetworkStatus
from ..sessions.model import AuthSession
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def new_event_id() -> str:
    return uuid.uuid4().hex


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Callable[[], int] = now_millis,
        id_factory: Callable[[], str] = new_event_id,
    ):
        self._attendance = attendance
        self._clock = clock
        self._id_factory = id_factory

    def record(self, session: AuthSession, kind: AttendanceType, network: NetworkStatus) -> AttendanceEvent:
        """Append a clock event for the session's account.

        Only the last known membership is consulted; nothing re-checks the
        allow-list on the store side.
        """

        if not network.allowed:
            raise NetworkRestricted("Your current IP is not in the whitelist. Connect to the company network to clock in or out.")

        event = AttendanceEvent(
            id=self._id_factory(),
            user_id=session.account.id,
            user_name=session.account.name,
            timestamp=self._clock(),
            type=AttendanceType(kind),
            ip=network.address or "",
        )
        self._attendance.add(event)
        logger.info("%s recorded for %r from %s", event.type.value, event.user_id, event.ip)
        return event

    def all_events(self) -> Sequence[AttendanceEvent]:
        return self._attendance.list_recent()

    def history_for(self, account_id: str) -> Sequence[AttendanceEvent]:
        return [e for e in self._attendance.list_recent() if e.user_id == account_id]
