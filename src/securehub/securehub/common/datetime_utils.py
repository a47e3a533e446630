from __future__ import annotations

import time
from datetime import datetime


def now_millis() -> int:
    """Current time as epoch milliseconds.

    Note: Wrapped so tests can patch it easier.
    """
    return int(time.time() * 1000)


def from_millis(value: int) -> datetime:
    """Epoch milliseconds to a local naive datetime."""
    return datetime.fromtimestamp(int(value) / 1000)


def format_date(value: int) -> str:
    return from_millis(value).strftime("%Y-%m-%d")


def format_time(value: int) -> str:
    return from_millis(value).strftime("%H:%M:%S")
