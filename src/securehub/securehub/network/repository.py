from __future__ import annotations

from typing import Protocol

from .model import NetworkAllowList


class NetworkConfigRepository(Protocol):
    def get(self) -> NetworkAllowList:
        raise NotImplementedError

    def save(self, allow_list: NetworkAllowList) -> None:
        raise NotImplementedError
