from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from ..core.constants import AUTH_STORAGE_KEY, NETWORK_STORAGE_KEY
from ..network.model import NetworkStatus
from ..users.model import Account
from .model import AuthSession, establish_session

logger = logging.getLogger(__name__)


class SessionStore:
    """Durable client-side slot for the authenticated session.

    Wraps any mutable mapping; in the app that is the signed Flask session
    cookie, so a restored session survives browser restarts. The stored
    record is the full account, password included.
    """

    def __init__(self, storage: MutableMapping, *, key: str = AUTH_STORAGE_KEY, network_key: str = NETWORK_STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._network_key = network_key

    def save(self, session: AuthSession) -> None:
        self._storage[self._key] = session.account.to_record()

    def restore(self) -> Optional[AuthSession]:
        raw = self._storage.get(self._key)
        if not raw:
            return None
        try:
            return establish_session(Account.from_record(raw))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Failed to restore auth session: %s", e)
            self._storage.pop(self._key, None)
            return None

    def clear(self) -> None:
        self._storage.pop(self._key, None)
        self._storage.pop(self._network_key, None)

    def network_status(self) -> NetworkStatus:
        return NetworkStatus.from_dict(self._storage.get(self._network_key))

    def save_network_status(self, status: NetworkStatus) -> None:
        self._storage[self._network_key] = status.to_dict()
