from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence


class RecordStore(Protocol):
    """Generic table store the repositories talk to.

    Rows are plain dicts keyed by wire field names. Implementations raise
    StoreFailed for any backend error; deciding whether to degrade is the
    repository's job.
    """

    def select_all(
        self,
        table: str,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> Sequence[dict]:
        raise NotImplementedError

    def insert(self, table: str, row: dict) -> None:
        raise NotImplementedError

    def upsert(self, table: str, row: dict, *, key: str = "id") -> None:
        raise NotImplementedError

    def delete(self, table: str, *, key: str, value: Any) -> None:
        raise NotImplementedError
