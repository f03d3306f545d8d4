from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_timestamp, now_local
from ..core import constants
from .model import AttendanceRecord, CorrectedTotals, DedupDirective, WriteOperation, WritePlan


class WritePlanner:
    """Diff stored attendance values against corrected totals.

    Only rows whose stored value differs get written, so planning twice over
    an unchanged sheet yields no cell updates. The dedup directive is always
    appended.
    """

    def __init__(
        self,
        *,
        header_rows: int = constants.DEFAULT_HEADER_ROWS,
        identity_column: int = constants.DEFAULT_IDENTITY_COLUMN,
        attendance_column: int = constants.DEFAULT_ATTENDANCE_COLUMN,
        last_corrected_column: int = constants.DEFAULT_LAST_CORRECTED_COLUMN,
        timestamp_format: str = constants.DEFAULT_TIMESTAMP_FORMAT,
    ):
        self._header_rows = int(header_rows)
        self._identity_column = int(identity_column)
        self._attendance_column = int(attendance_column)
        self._last_corrected_column = int(last_corrected_column)
        self._timestamp_format = timestamp_format

    def plan(
        self,
        records: Sequence[AttendanceRecord],
        totals: CorrectedTotals,
        *,
        now: Optional[datetime] = None,
    ) -> WritePlan:
        operations: list[WriteOperation] = []
        corrected_rows: list[int] = []
        stamp = format_timestamp(now or now_local(), self._timestamp_format)

        for record in records:
            corrected = totals.get(record.identity_key)
            if corrected is None or corrected == record.attendance_value:
                continue

            row_index = record.source_row_index + self._header_rows
            operations.append(
                WriteOperation(
                    source_row_index=record.source_row_index,
                    row_index=row_index,
                    column_index=self._attendance_column,
                    value=int(corrected),
                )
            )
            operations.append(
                WriteOperation(
                    source_row_index=record.source_row_index,
                    row_index=row_index,
                    column_index=self._last_corrected_column,
                    value=stamp,
                )
            )
            corrected_rows.append(record.source_row_index)

        dedup = DedupDirective(start_row_index=self._header_rows, column_index=self._identity_column)
        return WritePlan(operations=operations, dedup=dedup, corrected_rows=corrected_rows)
