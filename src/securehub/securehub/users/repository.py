from __future__ import annotations

from typing import Protocol, Sequence

from .model import Account


class AccountRepository(Protocol):
    """Repository interface for Account.

    Services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Account]:
        raise NotImplementedError

    def save(self, account: Account) -> None:
        raise NotImplementedError

    def delete_by_id(self, account_id: str) -> None:
        raise NotImplementedError
