from __future__ import annotations

import copy
from typing import Any, Optional

from src.securehub.securehub.core.constants import ATTENDANCE_TABLE, NETWORK_CONFIG_TABLE, USERS_TABLE
from src.securehub.securehub.core.exceptions import LookupFailed, StoreFailed


class InMemoryStore:
    """RecordStore fake. Set ``fail_reads`` / ``fail_writes`` to simulate outages."""

    def __init__(self, tables: Optional[dict[str, list[dict]]] = None):
        self.tables: dict[str, list[dict]] = {USERS_TABLE: [], ATTENDANCE_TABLE: [], NETWORK_CONFIG_TABLE: []}
        for name, rows in (tables or {}).items():
            self.tables[name] = [dict(r) for r in rows]
        self.fail_reads = False
        self.fail_writes = False
        self.writes: list[tuple[str, str]] = []

    def _check_write(self, op: str, table: str) -> None:
        if self.fail_writes:
            raise StoreFailed(f"{op} {table} refused")
        self.writes.append((op, table))

    def select_all(self, table: str, *, order_by=None, descending=False):
        if self.fail_reads:
            raise StoreFailed(f"select {table} refused")
        rows = copy.deepcopy(self.tables[table])
        if order_by:
            rows.sort(key=lambda r: r[order_by], reverse=descending)
        return rows

    def insert(self, table: str, row: dict) -> None:
        self._check_write("insert", table)
        self.tables[table].append(copy.deepcopy(row))

    def upsert(self, table: str, row: dict, *, key: str = "id") -> None:
        self._check_write("upsert", table)
        rows = self.tables[table]
        for i, existing in enumerate(rows):
            if existing.get(key) == row[key]:
                rows[i] = {**existing, **copy.deepcopy(row)}
                return
        rows.append(copy.deepcopy(row))

    def delete(self, table: str, *, key: str, value: Any) -> None:
        self._check_write("delete", table)
        self.tables[table] = [r for r in self.tables[table] if r.get(key) != value]


class FakeLookup:
    def __init__(self, address: Optional[str] = "10.0.0.5"):
        self.address = address
        self.calls = 0

    def resolve(self) -> str:
        self.calls += 1
        if self.address is None:
            raise LookupFailed("Could not verify network connection. Please check your internet.")
        return self.address


ADMIN_ROW = {
    "id": "admin",
    "name": "Administrator",
    "position": "System Administrator",
    "department": "IT",
    "password": "admin123",
    "role": "ADMIN",
}

STAFF_ROW = {
    "id": "s001",
    "name": "Dara Sok",
    "position": "Nurse",
    "department": "Ward A",
    "password": "pw-s001",
    "role": "STAFF",
}
