from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import requests

from ..core import constants
from ..core.exceptions import MembershipReadError, RoleGrantError
from .model import MemberInfo
from .repository import MembershipDirectory

log = logging.getLogger(__name__)


@dataclass
class DiscordConfig:
    token: str
    api_base: str = constants.DEFAULT_DISCORD_API_BASE
    timeout: int = constants.DEFAULT_HTTP_TIMEOUT_SECONDS


def member_handle(user: dict[str, Any]) -> str:
    """``name#1234`` for legacy accounts, bare username once discriminators are gone."""
    username = str(user.get("username", ""))
    discriminator = str(user.get("discriminator") or "0")
    if discriminator == "0":
        return username
    return f"{username}#{discriminator}"


def to_member_info(payload: dict[str, Any]) -> MemberInfo:
    user = payload.get("user") or {}
    return MemberInfo(
        member_id=str(user.get("id", "")),
        handle=member_handle(user),
        roles=frozenset(str(r) for r in payload.get("roles") or []),
    )


class DiscordMembershipDirectory(MembershipDirectory):
    """Discord REST API (bot token) implementation."""

    def __init__(self, config: DiscordConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({"Authorization": f"Bot {config.token}"})

    def _url(self, path: str) -> str:
        return f"{self._config.api_base.rstrip('/')}{path}"

    def list_members(self, guild_id: str) -> Iterable[MemberInfo]:
        members: list[MemberInfo] = []
        after = "0"
        while True:
            try:
                resp = self._session.get(
                    self._url(f"/guilds/{guild_id}/members"),
                    params={"limit": constants.DISCORD_MEMBER_PAGE_SIZE, "after": after},
                    timeout=self._config.timeout,
                )
                resp.raise_for_status()
                page = resp.json()
            except (requests.RequestException, ValueError) as exc:
                raise MembershipReadError(f"unable to list members of guild {guild_id}: {exc}") from exc

            members.extend(to_member_info(item) for item in page)
            if len(page) < constants.DISCORD_MEMBER_PAGE_SIZE:
                break
            after = members[-1].member_id

        log.debug("Listed %d members of guild %s", len(members), guild_id)
        return members

    def grant_role(self, guild_id: str, member_id: str, role_id: str) -> None:
        try:
            resp = self._session.put(
                self._url(f"/guilds/{guild_id}/members/{member_id}/roles/{role_id}"),
                timeout=self._config.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise RoleGrantError(member_id, f"unable to grant role {role_id} to {member_id}: {exc}") from exc
