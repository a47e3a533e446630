from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests
from flask import has_request_context, request

from ..core.constants import DEFAULT_IP_LOOKUP_URL, DEFAULT_LOOKUP_TIMEOUT
from ..core.exceptions import LookupFailed

logger = logging.getLogger(__name__)


class AddressLookup(Protocol):
    def resolve(self) -> str:
        """Return the caller's network address or raise LookupFailed."""
        raise NotImplementedError


class PublicIpLookup(AddressLookup):
    """Ask a public "what is my IP" endpoint (ipify-style JSON reply)."""

    def __init__(
        self,
        url: str = DEFAULT_IP_LOOKUP_URL,
        *,
        timeout: float = DEFAULT_LOOKUP_TIMEOUT,
        http: Optional[requests.Session] = None,
    ):
        self._url = url
        self._timeout = timeout
        self._http = http or requests.Session()

    def resolve(self) -> str:
        try:
            response = self._http.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("IP lookup via %s failed: %s", self._url, e)
            raise LookupFailed("Could not verify network connection. Please check your internet.") from e

        ip = data.get("ip") if isinstance(data, dict) else None
        if not ip or not isinstance(ip, str):
            logger.warning("IP lookup via %s returned no address: %r", self._url, data)
            raise LookupFailed("Network lookup returned no address.")
        return ip.strip()


class RequestAddressLookup(AddressLookup):
    """Use the address the current HTTP request came from.

    Forwarded headers are only honoured through ``ProxyFix`` (see
    ``TRUSTED_PROXIES``), which rewrites ``remote_addr``.
    """

    def resolve(self) -> str:
        if not has_request_context():
            raise LookupFailed("No request to take the address from.")

        if not request.remote_addr:
            raise LookupFailed("Request carries no remote address.")
        return request.remote_addr
