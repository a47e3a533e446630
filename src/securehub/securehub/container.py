from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admin.service import AdminConsoleService
from .attendance.service import AttendanceService
from .attendance.store_repository import StoreAttendanceRepository
from .core.constants import DEFAULT_IP_LOOKUP_URL, DEFAULT_LOOKUP_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .database.mysql_store import MySQLRecordStore
from .database.rest_store import RestRecordStore
from .database.store import RecordStore
from .network.lookup import AddressLookup, PublicIpLookup, RequestAddressLookup
from .network.service import AllowListService, NetworkService
from .network.store_repository import StoreNetworkConfigRepository
from .users.service import AccountService, AuthService
from .users.store_repository import StoreAccountRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore
    lookup: AddressLookup

    accounts_repo: StoreAccountRepository
    attendance_repo: StoreAttendanceRepository
    network_repo: StoreNetworkConfigRepository

    auth_service: AuthService
    account_service: AccountService
    network_service: NetworkService
    allow_list_service: AllowListService
    attendance_service: AttendanceService
    admin_service: AdminConsoleService

    conn: Optional[DatabaseConnection] = None


def build_store(*, backend: str, rest_config: Optional[dict] = None, db_config: Optional[dict] = None):
    """Return (store, mysql connection factory or None) for the configured backend."""

    backend = (backend or "rest").lower()
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        return MySQLRecordStore(conn), conn

    if backend == "rest":
        rest_config = rest_config or {}
        if not rest_config.get("url") or not rest_config.get("key"):
            raise RuntimeError("REST store needs REST_STORE_URL and REST_STORE_KEY")
        store = RestRecordStore(
            str(rest_config["url"]),
            str(rest_config["key"]),
            timeout=float(rest_config.get("timeout", 10)),
        )
        return store, None

    raise RuntimeError(f"Unsupported STORE_BACKEND: {backend}")


def build_lookup(*, source: str, url: str = DEFAULT_IP_LOOKUP_URL, timeout: float = DEFAULT_LOOKUP_TIMEOUT) -> AddressLookup:
    source = (source or "lookup").lower()
    if source == "request":
        return RequestAddressLookup()
    if source == "lookup":
        return PublicIpLookup(url, timeout=timeout)
    raise RuntimeError(f"Unsupported IP_SOURCE: {source}")


def build_container(*, store: RecordStore, lookup: AddressLookup, conn: Optional[DatabaseConnection] = None) -> Container:
    accounts_repo = StoreAccountRepository(store)
    attendance_repo = StoreAttendanceRepository(store)
    network_repo = StoreNetworkConfigRepository(store)

    auth_service = AuthService(accounts_repo)
    account_service = AccountService(accounts_repo)
    network_service = NetworkService(lookup, network_repo)
    allow_list_service = AllowListService(network_repo)
    attendance_service = AttendanceService(attendance_repo)
    admin_service = AdminConsoleService(account_service, attendance_service, allow_list_service)

    return Container(
        store=store,
        lookup=lookup,
        accounts_repo=accounts_repo,
        attendance_repo=attendance_repo,
        network_repo=network_repo,
        auth_service=auth_service,
        account_service=account_service,
        network_service=network_service,
        allow_list_service=allow_list_service,
        attendance_service=attendance_service,
        admin_service=admin_service,
        conn=conn,
    )


def build_container_from_settings(settings) -> Container:
    store, conn = build_store(
        backend=getattr(settings, "STORE_BACKEND", "rest"),
        rest_config=getattr(settings, "REST_STORE", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    lookup = build_lookup(
        source=getattr(settings, "IP_SOURCE", "lookup"),
        url=getattr(settings, "IP_LOOKUP_URL", DEFAULT_IP_LOOKUP_URL),
        timeout=float(getattr(settings, "IP_LOOKUP_TIMEOUT", DEFAULT_LOOKUP_TIMEOUT)),
    )
    return build_container(store=store, lookup=lookup, conn=conn)
