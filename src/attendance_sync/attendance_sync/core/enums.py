from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    """Why a response row could not become an attendance record."""

    INSUFFICIENT_FIELDS = "INSUFFICIENT_FIELDS"
    INVALID_ATTENDANCE_VALUE = "INVALID_ATTENDANCE_VALUE"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
