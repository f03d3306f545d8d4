from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..core.exceptions import RoleGrantError
from .model import MemberInfo, SyncReport
from .repository import MembershipDirectory

log = logging.getLogger(__name__)


class MembershipSynchronizer:
    """Grant the attendee role to every member who ever submitted attendance.

    Only grants; members missing from the records keep whatever roles they have.
    """

    def __init__(self, directory: MembershipDirectory, *, guild_id: str, role_id: str):
        self._directory = directory
        self._guild_id = guild_id
        self._role_id = role_id

    def list_members(self) -> list[MemberInfo]:
        return list(self._directory.list_members(self._guild_id))

    def pending_grants(self, records: Iterable[AttendanceRecord], members: Iterable[MemberInfo]) -> list[MemberInfo]:
        handles = {r.membership_handle for r in records}
        return [m for m in members if m.handle in handles and not m.has_role(self._role_id)]

    def sync(self, records: Sequence[AttendanceRecord], members: Iterable[MemberInfo]) -> SyncReport:
        members = list(members)
        handles = {r.membership_handle for r in records}

        granted: list[str] = []
        already_held: list[str] = []
        failed: list[str] = []
        seen: set[str] = set()

        for member in members:
            if member.handle not in handles:
                continue
            seen.add(member.handle)
            if member.has_role(self._role_id):
                already_held.append(member.handle)
                continue
            try:
                self._directory.grant_role(self._guild_id, member.member_id, self._role_id)
            except RoleGrantError as exc:
                log.warning("Skipping %s: %s", member.handle, exc)
                failed.append(member.handle)
                continue
            log.info("Granted role %s to %s", self._role_id, member.handle)
            granted.append(member.handle)

        unmatched = sorted(handles - seen)
        return SyncReport(granted=granted, already_held=already_held, failed=failed, unmatched_handles=unmatched)
