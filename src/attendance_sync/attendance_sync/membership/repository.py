from __future__ import annotations

from typing import Iterable, Protocol

from .model import MemberInfo


class MembershipDirectory(Protocol):
    def list_members(self, guild_id: str) -> Iterable[MemberInfo]:
        """Raises MembershipReadError."""
        raise NotImplementedError

    def grant_role(self, guild_id: str, member_id: str, role_id: str) -> None:
        """Raises RoleGrantError."""
        raise NotImplementedError
