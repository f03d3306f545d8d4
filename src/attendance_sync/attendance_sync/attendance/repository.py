from __future__ import annotations

from typing import Any, Protocol, Sequence

from .model import WritePlan


class AttendanceSheetRepository(Protocol):
    def read_rows(self) -> Sequence[Sequence[Any]]:
        """Data rows (header excluded) in physical order.

        Raises StoreReadError.
        """
        raise NotImplementedError

    def apply(self, plan: WritePlan) -> None:
        """Submit every operation plus the dedup directive as one atomic batch.

        Raises StoreWriteError; on failure nothing is applied.
        """
        raise NotImplementedError
