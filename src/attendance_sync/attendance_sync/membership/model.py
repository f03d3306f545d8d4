from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MemberInfo:
    """A guild member as seen by the membership directory."""

    member_id: str
    handle: str
    roles: frozenset[str] = field(default_factory=frozenset)

    def has_role(self, role_id: str) -> bool:
        return role_id in self.roles


@dataclass(frozen=True)
class SyncReport:
    granted: list[str]
    already_held: list[str]
    failed: list[str]
    # handles that attended but were not found among guild members
    unmatched_handles: list[str]
