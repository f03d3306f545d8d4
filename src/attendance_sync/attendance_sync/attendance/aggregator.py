from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import calendar_day
from .model import AttendanceRecord, CorrectedTotals


class AttendanceAggregator:
    """One attendance credit per identity per calendar day; first row seen wins."""

    def aggregate(self, records: Iterable[AttendanceRecord]) -> CorrectedTotals:
        totals: CorrectedTotals = {}
        counted: set[tuple[str, str]] = set()

        for record in records:
            day_key = (record.identity_key, calendar_day(record.timestamp))
            totals.setdefault(record.identity_key, 0)
            if day_key in counted:
                continue
            counted.add(day_key)
            totals[record.identity_key] += record.attendance_value

        return totals
