from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable

from ..core.constants import CSV_HEADERS
from .model import AttendanceEvent


def render_csv(events: Iterable[AttendanceEvent]) -> str:
    """Attendance report: header row then one row per event.

    Column order: ID, Name, Type, Date, Time, IP.
    """

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for e in events:
        writer.writerow([e.user_id, e.user_name, e.type.value, e.date_text, e.time_text, e.ip])
    return out.getvalue()


def report_filename(today: date) -> str:
    return f"attendance_report_{today.strftime('%Y-%m-%d')}.csv"
