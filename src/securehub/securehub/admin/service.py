from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..attendance.model import AttendanceEvent
from ..attendance.service import AttendanceService
from ..core.enums import Role
from ..network.model import NetworkAllowList
from ..network.service import AllowListService
from ..users.model import Account
from ..users.service import AccountService


@dataclass(frozen=True)
class AdminSnapshot:
    """Everything the admin console shows, read in one pass."""

    accounts: Sequence[Account]
    events: Sequence[AttendanceEvent]
    allow_list: NetworkAllowList


class AdminConsoleService:
    """Admin use cases. Each mutation is followed by a full reload."""

    def __init__(self, accounts: AccountService, attendance: AttendanceService, allow_list: AllowListService):
        self._accounts = accounts
        self._attendance = attendance
        self._allow_list = allow_list

    def reload(self) -> AdminSnapshot:
        return AdminSnapshot(
            accounts=self._accounts.list_accounts(),
            events=self._attendance.all_events(),
            allow_list=self._allow_list.get(),
        )

    def add_account(
        self,
        *,
        account_id: str,
        name: str,
        password: str,
        position: str = "",
        department: str = "",
        role: Role = Role.STAFF,
    ) -> AdminSnapshot:
        self._accounts.add_account(
            account_id=account_id,
            name=name,
            password=password,
            position=position,
            department=department,
            role=role,
        )
        return self.reload()

    def delete_account(self, account_id: str) -> AdminSnapshot:
        self._accounts.delete_account(account_id)
        return self.reload()

    def add_address(self, address: str) -> AdminSnapshot:
        self._allow_list.add_address(address)
        return self.reload()

    def remove_address(self, address: str) -> AdminSnapshot:
        self._allow_list.remove_address(address)
        return self.reload()
