from __future__ import annotations

import logging
from typing import Callable, Optional

from ..common.datetime_utils import now_millis
from ..common.validators import normalize_ip_address, require_ip_address
from ..core.exceptions import DuplicateAddress, LookupFailed
from .lookup import AddressLookup
from .model import NetworkAllowList, NetworkStatus
from .repository import NetworkConfigRepository

logger = logging.getLogger(__name__)


class NetworkService:
    """Use case: is the caller currently on an allowed network?"""

    def __init__(
        self,
        lookup: AddressLookup,
        config: NetworkConfigRepository,
        *,
        clock: Callable[[], int] = now_millis,
    ):
        self._lookup = lookup
        self._config = config
        self._clock = clock

    def current_address(self) -> str:
        return self._lookup.resolve()

    def check(self, previous: Optional[NetworkStatus] = None) -> NetworkStatus:
        """Resolve the caller's address and test it against the allow-list.

        On lookup failure the previous status is returned with ``error`` set,
        so membership keeps its last known value.
        """

        previous = previous or NetworkStatus()
        try:
            address = normalize_ip_address(self._lookup.resolve())
        except LookupFailed as e:
            return previous.failed(str(e))

        allowed = address in self._config.get()
        if allowed != previous.allowed:
            logger.info("network membership for %s changed: allowed=%s", address, allowed)
        return NetworkStatus(address=address, allowed=allowed, checked_at=self._clock())


class AllowListService:
    """Use case: administrators maintain the allow-list (read-modify-write)."""

    def __init__(self, config: NetworkConfigRepository):
        self._config = config

    def get(self) -> NetworkAllowList:
        return self._config.get()

    def add_address(self, address: str) -> NetworkAllowList:
        address = require_ip_address(address)
        current = self._config.get()
        if address in current:
            raise DuplicateAddress(address)

        updated = current.with_added(address)
        self._config.save(updated)
        logger.info("allow-list: added %s", address)
        return updated

    def remove_address(self, address: str) -> NetworkAllowList:
        address = normalize_ip_address(address)
        updated = self._config.get().without(address)
        self._config.save(updated)
        logger.info("allow-list: removed %s", address)
        return updated
