from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import parse_timestamp
from ..core import constants
from ..core.enums import RejectionReason
from ..core.exceptions import ParseRejection
from .model import AttendanceRecord, ParseOutcome


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        value = int(value) if value.is_integer() else value
    if not isinstance(value, (str, int, float)):
        return None
    text = str(value).strip()
    return text or None


def non_blank_fields(raw_row: Iterable[Any]) -> list[str]:
    """Keep cells that render as non-blank text, in order."""
    fields = []
    for cell in raw_row:
        text = _as_text(cell)
        if text is not None:
            fields.append(text)
    return fields


def _parse_count(value: str) -> Optional[int]:
    if not (value.isascii() and value.isdigit()):
        return None
    count = int(value)
    if count > constants.MAX_ATTENDANCE:
        return None
    return count


class RowParser:
    def __init__(self, *, timestamp_format: str = constants.DEFAULT_TIMESTAMP_FORMAT):
        self._timestamp_format = timestamp_format

    def parse(self, raw_row: Sequence[Any], row_index: int) -> AttendanceRecord:
        """Parse one raw sheet row, raising ParseRejection when it is unusable."""
        fields = non_blank_fields(raw_row)

        if len(fields) < constants.MIN_FIELDS:
            raise ParseRejection(
                RejectionReason.INSUFFICIENT_FIELDS,
                row_index,
                raw_row,
                f"{len(fields)} non-blank fields",
            )

        attendance = constants.DEFAULT_ATTENDANCE
        if len(fields) > constants.MIN_FIELDS:
            parsed = _parse_count(fields[constants.FIELD_ATTENDANCE])
            if parsed is None:
                raise ParseRejection(
                    RejectionReason.INVALID_ATTENDANCE_VALUE,
                    row_index,
                    raw_row,
                    repr(fields[constants.FIELD_ATTENDANCE]),
                )
            attendance = parsed

        try:
            timestamp = parse_timestamp(fields[constants.FIELD_TIMESTAMP], self._timestamp_format)
        except ValueError as exc:
            raise ParseRejection(
                RejectionReason.INVALID_TIMESTAMP,
                row_index,
                raw_row,
                repr(fields[constants.FIELD_TIMESTAMP]),
            ) from exc

        return AttendanceRecord(
            source_row_index=row_index,
            timestamp=timestamp,
            identity_key=fields[constants.FIELD_IDENTITY],
            display_name=fields[constants.FIELD_DISPLAY_NAME],
            membership_handle=fields[constants.FIELD_MEMBERSHIP_HANDLE],
            attendance_value=attendance,
        )

    def parse_rows(self, rows: Iterable[Sequence[Any]]) -> ParseOutcome:
        """Parse rows in source order. Index = position in ``rows``."""
        records: list[AttendanceRecord] = []
        rejections: list[ParseRejection] = []
        for index, row in enumerate(rows):
            try:
                records.append(self.parse(row, index))
            except ParseRejection as rejection:
                rejections.append(rejection)
        return ParseOutcome(records=records, rejections=rejections)
