from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional


@dataclass(frozen=True)
class NetworkAllowList:
    """The single network-config row: addresses allowed to clock in."""

    addresses: tuple[str, ...] = ()

    @classmethod
    def of(cls, addresses: Iterable[str]) -> "NetworkAllowList":
        return cls(addresses=tuple(addresses))

    def __contains__(self, address: object) -> bool:
        return address in self.addresses

    def __len__(self) -> int:
        return len(self.addresses)

    def with_added(self, address: str) -> "NetworkAllowList":
        return NetworkAllowList(addresses=self.addresses + (address,))

    def without(self, address: str) -> "NetworkAllowList":
        return NetworkAllowList(addresses=tuple(a for a in self.addresses if a != address))


@dataclass(frozen=True)
class NetworkStatus:
    """Last known result of a network-membership check.

    ``error`` is set when the most recent lookup failed; ``allowed`` and
    ``address`` then still hold the values from the check before it.
    """

    address: Optional[str] = None
    allowed: bool = False
    checked_at: Optional[int] = None
    error: Optional[str] = None

    @property
    def label(self) -> str:
        if self.checked_at is None and self.error is None:
            return "Locating device..."
        return "Authorized Network" if self.allowed else "Restricted"

    def failed(self, message: str) -> "NetworkStatus":
        return replace(self, error=message)

    def to_dict(self) -> dict:
        return {
            "address": self.address,
            "allowed": self.allowed,
            "checked_at": self.checked_at,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "NetworkStatus":
        if not data:
            return cls()
        return cls(
            address=data.get("address"),
            allowed=bool(data.get("allowed", False)),
            checked_at=data.get("checked_at"),
            error=data.get("error"),
        )
