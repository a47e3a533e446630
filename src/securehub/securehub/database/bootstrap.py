from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from ..core.constants import RESERVED_ADMIN_ID, USERS_TABLE
from ..core.enums import Role
from .connection import DatabaseConnection
from .store import RecordStore

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # schema.sql holds DDL only, so ';' never appears inside literals.
    lines = [ln for ln in sql.splitlines() if not ln.lstrip().startswith("--")]
    for stmt in "\n".join(lines).split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema applied from %s", schema_path)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def ensure_admin_account(store: RecordStore, *, password: str, name: str = "Administrator") -> None:
    """Upsert the reserved administrator account.

    Works against any RecordStore, so it seeds hosted stores too.
    """

    store.upsert(
        USERS_TABLE,
        {
            "id": RESERVED_ADMIN_ID,
            "name": name,
            "position": "System Administrator",
            "department": "IT",
            "password": password,
            "role": Role.ADMIN.value,
        },
    )
    logger.info("reserved admin account %r ensured", RESERVED_ADMIN_ID)
