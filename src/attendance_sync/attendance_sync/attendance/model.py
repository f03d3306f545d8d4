from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Union

from ..core.exceptions import ParseRejection


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one valid form submission."""

    source_row_index: int
    timestamp: datetime
    identity_key: str
    display_name: str
    membership_handle: str
    attendance_value: int = 1


# identity_key -> deduplicated cumulative attendance
CorrectedTotals = Dict[str, int]


@dataclass(frozen=True)
class ParseOutcome:
    records: list[AttendanceRecord]
    rejections: list[ParseRejection]


@dataclass(frozen=True)
class WriteOperation:
    """Overwrite one cell. ``row_index`` is the sheet row (header included)."""

    source_row_index: int
    row_index: int
    column_index: int
    value: Union[int, str]


@dataclass(frozen=True)
class DedupDirective:
    """Collapse rows sharing a value in ``column_index``, from ``start_row_index`` down."""

    start_row_index: int
    column_index: int


@dataclass(frozen=True)
class WritePlan:
    operations: list[WriteOperation]
    dedup: DedupDirective
    corrected_rows: list[int] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return not self.operations
