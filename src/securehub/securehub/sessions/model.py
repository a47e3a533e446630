from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import Role
from ..users.model import Account


@dataclass(frozen=True)
class AdministratorView:
    """Admin console: accounts, logs and allow-list management."""

    account: Account
    endpoint: str = "admin_users"


@dataclass(frozen=True)
class StaffView:
    """Staff console: network status, clock controls, own history."""

    account: Account
    endpoint: str = "staff_console"


ConsoleView = Union[AdministratorView, StaffView]


@dataclass(frozen=True)
class AuthSession:
    """An authenticated session.

    The console variant is fixed when the session is established; views
    receive this object instead of reading ambient state.
    """

    account: Account
    view: ConsoleView

    @property
    def account_id(self) -> str:
        return self.account.id


def establish_session(account: Account) -> AuthSession:
    if account.role == Role.ADMIN:
        view: ConsoleView = AdministratorView(account)
    else:
        view = StaffView(account)
    return AuthSession(account=account, view=view)
