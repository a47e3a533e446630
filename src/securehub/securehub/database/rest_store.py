from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import requests

from ..core.exceptions import StoreFailed
from .store import RecordStore

logger = logging.getLogger(__name__)


class RestRecordStore(RecordStore):
    """RecordStore over a hosted PostgREST table API (Supabase style).

    Each collection is reachable at ``<base_url>/rest/v1/<table>``; the
    project key is sent both as ``apikey`` and as a bearer token.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = 10,
        http: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http = http or requests.Session()
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def _url(self, table: str) -> str:
        return f"{self._base_url}/rest/v1/{table}"

    def _send(self, method: str, table: str, *, params=None, json=None, headers=None):
        all_headers = dict(self._headers)
        if headers:
            all_headers.update(headers)
        try:
            response = self._http.request(
                method,
                self._url(table),
                params=params,
                json=json,
                headers=all_headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise StoreFailed(f"{method} {table} failed: {e}") from e
        return response

    def select_all(
        self,
        table: str,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> Sequence[dict]:
        params = {"select": "*"}
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"

        response = self._send("GET", table, params=params)
        try:
            data = response.json()
        except ValueError as e:
            raise StoreFailed(f"GET {table} returned invalid JSON") from e
        if not isinstance(data, list):
            raise StoreFailed(f"GET {table} returned {type(data).__name__}, expected a list")
        return data

    def insert(self, table: str, row: dict) -> None:
        self._send("POST", table, json=row, headers={"Prefer": "return=minimal"})

    def upsert(self, table: str, row: dict, *, key: str = "id") -> None:
        self._send(
            "POST",
            table,
            params={"on_conflict": key},
            json=row,
            headers={"Prefer": "resolution=merge-duplicates,return=minimal"},
        )

    def delete(self, table: str, *, key: str, value: Any) -> None:
        self._send("DELETE", table, params={key: f"eq.{value}"})
        logger.debug("DELETE %s where %s=%r sent", table, key, value)
