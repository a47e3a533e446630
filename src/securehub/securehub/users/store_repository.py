from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import USERS_TABLE
from ..core.exceptions import StoreFailed
from ..database.store import RecordStore
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class StoreAccountRepository(AccountRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Account]:
        # Read failures show up as "no accounts" rather than an error page.
        try:
            rows = self._store.select_all(USERS_TABLE)
        except StoreFailed as e:
            logger.error("Error fetching users: %s", e)
            return []

        out: list[Account] = []
        for row in rows:
            try:
                out.append(Account.from_record(row))
            except (KeyError, ValueError) as e:
                logger.warning("Skipping malformed user row %r: %s", row.get("id"), e)
        return out

    def save(self, account: Account) -> None:
        self._store.upsert(USERS_TABLE, account.to_record())

    def delete_by_id(self, account_id: str) -> None:
        self._store.delete(USERS_TABLE, key="id", value=account_id)
