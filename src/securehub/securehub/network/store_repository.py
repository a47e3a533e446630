from __future__ import annotations

import logging

from ..common.validators import normalize_ip_address
from ..core.constants import NETWORK_CONFIG_ROW_ID, NETWORK_CONFIG_TABLE
from ..core.exceptions import StoreFailed
from ..database.store import RecordStore
from .model import NetworkAllowList
from .repository import NetworkConfigRepository

logger = logging.getLogger(__name__)


class StoreNetworkConfigRepository(NetworkConfigRepository):
    """Allow-list kept as a singleton row keyed by NETWORK_CONFIG_ROW_ID."""

    def __init__(self, store: RecordStore):
        self._store = store

    def get(self) -> NetworkAllowList:
        try:
            rows = self._store.select_all(NETWORK_CONFIG_TABLE)
        except StoreFailed as e:
            logger.error("Failed to fetch network config: %s", e)
            return NetworkAllowList()

        if not rows:
            logger.warning("Network config empty or missing")
            return NetworkAllowList()

        row = next((r for r in rows if r.get("id") == NETWORK_CONFIG_ROW_ID), rows[0])
        addresses = []
        for raw in row.get("whitelistedIps") or []:
            address = normalize_ip_address(str(raw))
            if address and address not in addresses:
                addresses.append(address)
        return NetworkAllowList.of(addresses)

    def save(self, allow_list: NetworkAllowList) -> None:
        self._store.upsert(
            NETWORK_CONFIG_TABLE,
            {"id": NETWORK_CONFIG_ROW_ID, "whitelistedIps": list(allow_list.addresses)},
        )
