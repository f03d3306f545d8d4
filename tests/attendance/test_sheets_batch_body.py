from __future__ import annotations

from attendance_sync.attendance.model import DedupDirective, WriteOperation, WritePlan
from attendance_sync.attendance.sheets_repository import build_batch_body


def test_batch_body_orders_cell_updates_before_dedup():
    plan = WritePlan(
        operations=[
            WriteOperation(source_row_index=2, row_index=3, column_index=4, value=5),
            WriteOperation(source_row_index=2, row_index=3, column_index=0, value="3/5/2024 09:05:07"),
        ],
        dedup=DedupDirective(start_row_index=1, column_index=1),
    )

    body = build_batch_body(plan, sheet_gid=590955473)
    reqs = body["requests"]

    assert len(reqs) == 3
    number = reqs[0]["updateCells"]
    assert number["start"] == {"sheetId": 590955473, "rowIndex": 3, "columnIndex": 4}
    assert number["rows"][0]["values"][0]["userEnteredValue"] == {"numberValue": 5.0}
    text = reqs[1]["updateCells"]
    assert text["rows"][0]["values"][0]["userEnteredValue"] == {"stringValue": "3/5/2024 09:05:07"}
    dedup = reqs[2]["deleteDuplicates"]
    assert dedup["range"] == {"sheetId": 590955473, "startRowIndex": 1}
    assert dedup["comparisonColumns"] == [
        {"sheetId": 590955473, "dimension": "COLUMNS", "startIndex": 1, "endIndex": 2}
    ]


def test_noop_plan_still_sends_dedup():
    plan = WritePlan(operations=[], dedup=DedupDirective(start_row_index=1, column_index=1))

    body = build_batch_body(plan, sheet_gid=0)

    assert list(body["requests"][0]) == ["deleteDuplicates"]
