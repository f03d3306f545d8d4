from __future__ import annotations

from datetime import datetime

from attendance_sync.attendance.model import AttendanceRecord
from attendance_sync.core.exceptions import RoleGrantError
from attendance_sync.membership.model import MemberInfo
from attendance_sync.membership.service import MembershipSynchronizer

ROLE = "attendee"
GUILD = "guild-1"


def _rec(handle: str, index: int = 0) -> AttendanceRecord:
    return AttendanceRecord(
        source_row_index=index,
        timestamp=datetime(2024, 5, 1, 10, 0),
        identity_key=f"id-{handle}",
        display_name=handle,
        membership_handle=handle,
        attendance_value=1,
    )


class FakeDirectory:
    def __init__(self, members, failing=()):
        self._members = list(members)
        self._failing = set(failing)
        self.grants: list[tuple[str, str, str]] = []

    def list_members(self, guild_id):
        return list(self._members)

    def grant_role(self, guild_id, member_id, role_id):
        if member_id in self._failing:
            raise RoleGrantError(member_id, "403 Missing Permissions")
        self.grants.append((guild_id, member_id, role_id))


def test_grants_only_to_attendees_without_role():
    members = [
        MemberInfo(member_id="1", handle="alice#1"),
        MemberInfo(member_id="2", handle="bob#2", roles=frozenset({ROLE})),
        MemberInfo(member_id="3", handle="carol#3"),
    ]
    directory = FakeDirectory(members)
    sync = MembershipSynchronizer(directory, guild_id=GUILD, role_id=ROLE)

    report = sync.sync([_rec("alice#1"), _rec("bob#2", 1)], members)

    assert directory.grants == [(GUILD, "1", ROLE)]
    assert report.granted == ["alice#1"]
    assert report.already_held == ["bob#2"]
    assert report.failed == []


def test_non_attendees_are_never_touched():
    members = [MemberInfo(member_id="9", handle="zed", roles=frozenset({ROLE, "other"}))]
    directory = FakeDirectory(members)

    report = MembershipSynchronizer(directory, guild_id=GUILD, role_id=ROLE).sync([], members)

    assert directory.grants == []
    assert report.granted == [] and report.already_held == []


def test_grant_failure_does_not_stop_other_members():
    members = [
        MemberInfo(member_id="1", handle="alice#1"),
        MemberInfo(member_id="2", handle="bob#2"),
    ]
    directory = FakeDirectory(members, failing={"1"})
    sync = MembershipSynchronizer(directory, guild_id=GUILD, role_id=ROLE)

    report = sync.sync([_rec("alice#1"), _rec("bob#2", 1)], members)

    assert report.failed == ["alice#1"]
    assert report.granted == ["bob#2"]
    assert directory.grants == [(GUILD, "2", ROLE)]


def test_unmatched_handles_are_reported():
    members = [MemberInfo(member_id="1", handle="alice#1")]
    sync = MembershipSynchronizer(FakeDirectory(members), guild_id=GUILD, role_id=ROLE)

    report = sync.sync([_rec("alice#1"), _rec("ghost#0", 1), _rec("ghost#0", 2)], members)

    assert report.unmatched_handles == ["ghost#0"]


def test_pending_grants_lists_without_granting():
    members = [
        MemberInfo(member_id="1", handle="alice#1"),
        MemberInfo(member_id="2", handle="bob#2", roles=frozenset({ROLE})),
    ]
    directory = FakeDirectory(members)
    sync = MembershipSynchronizer(directory, guild_id=GUILD, role_id=ROLE)

    pending = sync.pending_grants([_rec("alice#1"), _rec("bob#2", 1)], sync.list_members())

    assert [m.member_id for m in pending] == ["1"]
    assert directory.grants == []
