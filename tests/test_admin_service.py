from __future__ import annotations

import pytest

from src.securehub.securehub.core.constants import ATTENDANCE_TABLE, USERS_TABLE
from src.securehub.securehub.core.exceptions import DuplicateAddress, ProtectedAccount
from src.securehub.securehub.database.bootstrap import ensure_admin_account


def test_reload_reads_all_collections(store, container):
    store.tables[ATTENDANCE_TABLE] = [
        {"id": "e1", "userId": "s001", "userName": "Dara Sok", "timestamp": 1, "type": "CHECK_IN", "ip": "10.0.0.5"}
    ]

    snapshot = container.admin_service.reload()

    assert [a.id for a in snapshot.accounts] == ["admin", "s001"]
    assert [e.id for e in snapshot.events] == ["e1"]
    assert snapshot.allow_list.addresses == ("10.0.0.5",)


def test_add_account_returns_fresh_snapshot(container):
    snapshot = container.admin_service.add_account(account_id="s002", name="Vanna", password="pw")

    assert "s002" in [a.id for a in snapshot.accounts]


def test_mutation_reload_picks_up_concurrent_changes(store, container):
    # Another client wrote meanwhile; the full reload shows it too.
    store.tables[USERS_TABLE].append({"id": "x9", "name": "Elsewhere", "password": "p", "role": "STAFF"})

    snapshot = container.admin_service.delete_account("s001")

    assert [a.id for a in snapshot.accounts] == ["admin", "x9"]


def test_delete_reserved_admin_always_fails(container):
    with pytest.raises(ProtectedAccount):
        container.admin_service.delete_account("admin")

    assert "admin" in [a.id for a in container.admin_service.reload().accounts]


def test_address_mutations(container):
    snapshot = container.admin_service.add_address("192.168.0.10")
    assert snapshot.allow_list.addresses == ("10.0.0.5", "192.168.0.10")

    with pytest.raises(DuplicateAddress):
        container.admin_service.add_address("192.168.0.10")

    snapshot = container.admin_service.remove_address("10.0.0.5")
    assert snapshot.allow_list.addresses == ("192.168.0.10",)


def test_ensure_admin_account_creates_then_updates(store, container):
    store.tables[USERS_TABLE] = [row for row in store.tables[USERS_TABLE] if row["id"] != "admin"]

    ensure_admin_account(store, password="first")
    ensure_admin_account(store, password="second")

    admins = [row for row in store.tables[USERS_TABLE] if row["id"] == "admin"]
    assert len(admins) == 1
    assert admins[0]["password"] == "second"
    assert admins[0]["role"] == "ADMIN"
    assert container.auth_service.find_account("admin", "second").is_admin
