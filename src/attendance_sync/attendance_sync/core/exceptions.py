from __future__ import annotations

from typing import Any, Sequence

from .enums import RejectionReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ConfigurationError(DomainError):
    """Raised when settings are missing or invalid."""


class ParseRejection(DomainError):
    """Raised when a raw row cannot be parsed into an attendance record."""

    def __init__(self, reason: RejectionReason, row_index: int, row: Sequence[Any], detail: str = ""):
        self.reason = reason
        self.row_index = row_index
        self.row = list(row)
        self.detail = detail
        message = f"row {row_index}: {reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class SyncError(DomainError):
    """Base exception for failures of an external collaborator during a cycle."""


class StoreReadError(SyncError):
    """Raised when the response sheet cannot be read. Aborts the cycle."""


class StoreWriteError(SyncError):
    """Raised when the batch update is rejected. Nothing was applied."""


class MembershipReadError(SyncError):
    """Raised when guild members cannot be listed. Aborts role sync only."""


class RoleGrantError(SyncError):
    """Raised when a single role grant fails."""

    def __init__(self, member_id: str, message: str):
        self.member_id = member_id
        super().__init__(message)
