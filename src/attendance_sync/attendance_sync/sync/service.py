from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.model import AttendanceRecord, CorrectedTotals, WritePlan
from ..attendance.parser import RowParser, non_blank_fields
from ..attendance.planner import WritePlanner
from ..attendance.repository import AttendanceSheetRepository
from ..core.exceptions import MembershipReadError, ParseRejection, StoreWriteError, SyncError
from ..membership.model import SyncReport
from ..membership.service import MembershipSynchronizer

log = logging.getLogger(__name__)


@dataclass
class CycleReport:
    records: list[AttendanceRecord] = field(default_factory=list)
    rejections: list[ParseRejection] = field(default_factory=list)
    totals: CorrectedTotals = field(default_factory=dict)
    plan: Optional[WritePlan] = None
    membership: Optional[SyncReport] = None
    write_applied: bool = False
    errors: list[SyncError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        writes = len(self.plan.operations) if self.plan else 0
        granted = len(self.membership.granted) if self.membership else 0
        return (
            f"records={len(self.records)} rejected={len(self.rejections)} "
            f"identities={len(self.totals)} cell_writes={writes} "
            f"applied={self.write_applied} roles_granted={granted} errors={len(self.errors)}"
        )


class AttendanceSyncService:
    """One reconciliation cycle: read, parse, aggregate, then sync roles and write back.

    Nothing is kept between cycles; every call starts from a fresh read.
    """

    def __init__(
        self,
        sheet: AttendanceSheetRepository,
        synchronizer: MembershipSynchronizer,
        *,
        parser: Optional[RowParser] = None,
        aggregator: Optional[AttendanceAggregator] = None,
        planner: Optional[WritePlanner] = None,
    ):
        self._sheet = sheet
        self._synchronizer = synchronizer
        self._parser = parser or RowParser()
        self._aggregator = aggregator or AttendanceAggregator()
        self._planner = planner or WritePlanner()

    def run_cycle(self, *, now: Optional[datetime] = None, dry_run: bool = False) -> CycleReport:
        """Raises StoreReadError; later step failures are collected on the report."""
        log.info("Getting responses")
        rows = self._sheet.read_rows()

        outcome = self._parser.parse_rows(rows)
        for rejection in outcome.rejections:
            if non_blank_fields(rejection.row):
                log.warning("Skipping response %s", rejection)
            else:
                log.debug("Skipping blank row %d", rejection.row_index)

        report = CycleReport(records=outcome.records, rejections=outcome.rejections)
        report.totals = self._aggregator.aggregate(report.records)
        report.plan = self._planner.plan(report.records, report.totals, now=now)

        log.info("Updating members")
        self._sync_members(report, dry_run=dry_run)

        log.info("Updating responses")
        self._write_back(report, dry_run=dry_run)

        log.info("Cycle done: %s", report.summary())
        return report

    def _sync_members(self, report: CycleReport, *, dry_run: bool) -> None:
        try:
            members = self._synchronizer.list_members()
        except MembershipReadError as exc:
            log.error("Role sync aborted: %s", exc)
            report.errors.append(exc)
            return

        if dry_run:
            for member in self._synchronizer.pending_grants(report.records, members):
                log.info("[dry-run] would grant role to %s", member.handle)
            return

        report.membership = self._synchronizer.sync(report.records, members)
        if report.membership.unmatched_handles:
            log.debug("Handles without a guild member: %s", ", ".join(report.membership.unmatched_handles))

    def _write_back(self, report: CycleReport, *, dry_run: bool) -> None:
        plan = report.plan
        if dry_run:
            for op in plan.operations:
                log.info("[dry-run] would set row %d col %d to %r", op.row_index, op.column_index, op.value)
            return

        try:
            self._sheet.apply(plan)
        except StoreWriteError as exc:
            log.error("Write-back discarded: %s", exc)
            report.errors.append(exc)
            return
        report.write_applied = True
