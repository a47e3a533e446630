from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.constants import RESERVED_ADMIN_ID
from ..core.enums import Role
from ..core.exceptions import (
    DuplicateIdentifier,
    InvalidCredentials,
    NetworkRestricted,
    ProtectedAccount,
    ValidationError,
)
from ..network.model import NetworkStatus
from ..sessions.model import AuthSession, establish_session
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate an account (login)."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def find_account(self, identifier: str, credential: str) -> Account:
        for account in self._accounts.list_all():
            if account.id == identifier and account.password == credential:
                return account
        raise InvalidCredentials()

    def authenticate(self, identifier: str, credential: str, network: NetworkStatus) -> AuthSession:
        """Match id + password exactly, then gate staff on network membership.

        Administrators are never network-checked.
        """

        account = self.find_account(identifier, credential)

        if not account.is_admin and not network.allowed:
            logger.info("login refused for %r: address %s not allowed", account.id, network.address)
            raise NetworkRestricted()

        logger.info("login accepted for %r (%s)", account.id, account.role.value)
        return establish_session(account)


class AccountService:
    """Use case: manage accounts (admin)."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def list_accounts(self) -> Sequence[Account]:
        return self._accounts.list_all()

    def add_account(
        self,
        *,
        account_id: str,
        name: str,
        password: str,
        position: str = "",
        department: str = "",
        role: Role = Role.STAFF,
    ) -> Account:
        account_id = require_non_empty(account_id, "User ID")
        name = require_non_empty(name, "Full name")
        if not password:
            raise ValidationError("Password is required")
        if not isinstance(role, Role):
            try:
                role = Role(role)
            except ValueError:
                raise ValidationError(f"Unknown role: {role}") from None

        if any(a.id == account_id for a in self._accounts.list_all()):
            raise DuplicateIdentifier(account_id)

        account = Account(
            id=account_id,
            name=name,
            position=(position or "").strip(),
            department=(department or "").strip(),
            password=password,
            role=role,
        )
        self._accounts.save(account)
        logger.info("account %r created (%s)", account.id, account.role.value)
        return account

    def delete_account(self, account_id: str) -> None:
        if account_id == RESERVED_ADMIN_ID:
            raise ProtectedAccount()

        self._accounts.delete_by_id(account_id)
        logger.info("account %r deleted", account_id)
