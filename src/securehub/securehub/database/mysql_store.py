from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import mysql.connector

from ..core.constants import ATTENDANCE_TABLE, NETWORK_CONFIG_TABLE, USERS_TABLE
from ..core.exceptions import StoreFailed
from .connection import DatabaseConnection
from .mysql_base import db_cursor, decode_json_column, encode_json_column, fetchall
from .store import RecordStore

logger = logging.getLogger(__name__)

# Wire field names double as column names; anything not listed here is
# rejected before it reaches SQL.
TABLE_COLUMNS: dict[str, tuple[str, ...]] = {
    USERS_TABLE: ("id", "name", "position", "department", "password", "role"),
    ATTENDANCE_TABLE: ("id", "userId", "userName", "timestamp", "type", "ip"),
    NETWORK_CONFIG_TABLE: ("id", "whitelistedIps"),
}

JSON_COLUMNS: dict[str, frozenset[str]] = {
    NETWORK_CONFIG_TABLE: frozenset({"whitelistedIps"}),
}


def _quote(name: str) -> str:
    return f"`{name}`"


class MySQLRecordStore(RecordStore):
    """RecordStore over MySQL, one table per collection."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _columns(self, table: str) -> tuple[str, ...]:
        try:
            return TABLE_COLUMNS[table]
        except KeyError:
            raise StoreFailed(f"Unknown table: {table}") from None

    def _check_column(self, table: str, column: str) -> str:
        if column not in self._columns(table):
            raise StoreFailed(f"Unknown column {column!r} for table {table}")
        return column

    def _encode(self, table: str, row: dict) -> tuple[list[str], list[Any]]:
        json_cols = JSON_COLUMNS.get(table, frozenset())
        cols: list[str] = []
        values: list[Any] = []
        for col in self._columns(table):
            if col not in row:
                continue
            cols.append(col)
            values.append(encode_json_column(row[col]) if col in json_cols else row[col])
        if not cols:
            raise StoreFailed(f"Row for {table} has no known columns")
        return cols, values

    def _decode(self, table: str, row: dict) -> dict:
        json_cols = JSON_COLUMNS.get(table, frozenset())
        out = dict(row)
        for col in json_cols:
            if col in out:
                out[col] = decode_json_column(out[col])
        return out

    def select_all(
        self,
        table: str,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> Sequence[dict]:
        cols = ", ".join(_quote(c) for c in self._columns(table))
        sql = f"SELECT {cols} FROM {_quote(table)}"
        if order_by:
            sql += f" ORDER BY {_quote(self._check_column(table, order_by))} {'DESC' if descending else 'ASC'}"

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql)
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            raise StoreFailed(f"select from {table} failed: {e}") from e
        return [self._decode(table, r) for r in rows]

    def insert(self, table: str, row: dict) -> None:
        cols, values = self._encode(table, row)
        placeholders = ",".join(["%s"] * len(cols))
        sql = f"INSERT INTO {_quote(table)}({','.join(_quote(c) for c in cols)}) VALUES({placeholders})"

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, tuple(values))
        except mysql.connector.Error as e:
            raise StoreFailed(f"insert into {table} failed: {e}") from e

    def upsert(self, table: str, row: dict, *, key: str = "id") -> None:
        self._check_column(table, key)
        if key not in row:
            raise StoreFailed(f"upsert into {table} needs key column {key!r}")
        cols, values = self._encode(table, row)
        placeholders = ",".join(["%s"] * len(cols))
        updates = ", ".join(f"{_quote(c)}=VALUES({_quote(c)})" for c in cols if c != key)
        sql = f"INSERT INTO {_quote(table)}({','.join(_quote(c) for c in cols)}) VALUES({placeholders})"
        if updates:
            sql += f" ON DUPLICATE KEY UPDATE {updates}"

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, tuple(values))
        except mysql.connector.Error as e:
            raise StoreFailed(f"upsert into {table} failed: {e}") from e

    def delete(self, table: str, *, key: str, value: Any) -> None:
        sql = f"DELETE FROM {_quote(table)} WHERE {_quote(self._check_column(table, key))}=%s"

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, (value,))
                logger.debug("deleted %s row(s) from %s where %s=%r", cur.rowcount, table, key, value)
        except mysql.connector.Error as e:
            raise StoreFailed(f"delete from {table} failed: {e}") from e
