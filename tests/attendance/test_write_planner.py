from __future__ import annotations

from datetime import datetime

from attendance_sync.attendance.model import AttendanceRecord, DedupDirective
from attendance_sync.attendance.planner import WritePlanner

NOW = datetime(2024, 5, 3, 9, 5, 7)


def _rec(index: int, identity: str, value: int) -> AttendanceRecord:
    return AttendanceRecord(
        source_row_index=index,
        timestamp=datetime(2024, 5, 1, 10, 0),
        identity_key=identity,
        display_name=identity,
        membership_handle=identity,
        attendance_value=value,
    )


def test_matching_values_produce_no_writes_but_keep_dedup():
    records = [_rec(0, "id1", 1), _rec(1, "id1", 1)]

    plan = WritePlanner().plan(records, {"id1": 1}, now=NOW)

    assert plan.operations == []
    assert plan.is_noop
    assert plan.dedup == DedupDirective(start_row_index=1, column_index=1)


def test_mismatch_emits_paired_writes_offset_by_header():
    records = [_rec(0, "id1", 1), _rec(3, "id1", 2)]

    plan = WritePlanner().plan(records, {"id1": 2}, now=NOW)

    assert plan.corrected_rows == [0]
    assert [(op.source_row_index, op.row_index, op.column_index, op.value) for op in plan.operations] == [
        (0, 1, 4, 2),
        (0, 1, 0, "3/5/2024 09:05:07"),
    ]


def test_missing_total_is_skipped():
    plan = WritePlanner().plan([_rec(0, "id1", 1)], {}, now=NOW)

    assert plan.operations == []


def test_column_layout_is_configurable():
    planner = WritePlanner(header_rows=2, identity_column=3, attendance_column=6, last_corrected_column=7)

    plan = planner.plan([_rec(5, "id1", 1)], {"id1": 4}, now=NOW)

    assert [(op.row_index, op.column_index) for op in plan.operations] == [(7, 6), (7, 7)]
    assert plan.dedup == DedupDirective(start_row_index=2, column_index=3)


def test_second_plan_over_corrected_values_is_empty():
    records = [_rec(0, "id1", 1), _rec(1, "id1", 1), _rec(2, "id2", 5)]
    totals = {"id1": 3, "id2": 5}
    planner = WritePlanner()

    first = planner.plan(records, totals, now=NOW)
    assert first.corrected_rows == [0, 1]

    corrected = [
        _rec(r.source_row_index, r.identity_key, totals[r.identity_key]) for r in records
    ]
    second = planner.plan(corrected, totals, now=NOW)
    assert second.operations == []
