from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Any, Optional

from ..common.validators import require_header_matches_range, require_non_empty, require_non_negative
from . import constants


@dataclass(frozen=True)
class SyncSettings:
    """Everything the engine needs to know about one spreadsheet + one guild."""

    spreadsheet_id: str
    sheet_gid: int
    guild_id: str
    role_id: str
    response_range: str = constants.DEFAULT_RESPONSE_RANGE
    header_rows: int = constants.DEFAULT_HEADER_ROWS
    identity_column: int = constants.DEFAULT_IDENTITY_COLUMN
    attendance_column: int = constants.DEFAULT_ATTENDANCE_COLUMN
    last_corrected_column: int = constants.DEFAULT_LAST_CORRECTED_COLUMN
    timestamp_format: str = constants.DEFAULT_TIMESTAMP_FORMAT
    interval_seconds: int = constants.DEFAULT_SYNC_INTERVAL_SECONDS
    google_credentials_file: Optional[str] = None
    discord_token: Optional[str] = None
    discord_api_base: str = constants.DEFAULT_DISCORD_API_BASE
    http_timeout_seconds: int = constants.DEFAULT_HTTP_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        require_non_empty(self.spreadsheet_id, "SPREADSHEET_ID")
        require_non_empty(self.guild_id, "GUILD_ID")
        require_non_empty(self.role_id, "ROLE_ID")
        require_non_empty(self.response_range, "RESPONSE_RANGE")
        require_non_empty(self.timestamp_format, "TIMESTAMP_FORMAT")
        require_non_negative(self.sheet_gid, "SHEET_GID")
        require_non_negative(self.header_rows, "HEADER_ROWS")
        require_non_negative(self.identity_column, "IDENTITY_COLUMN")
        require_non_negative(self.attendance_column, "ATTENDANCE_COLUMN")
        require_non_negative(self.last_corrected_column, "LAST_CORRECTED_COLUMN")
        require_non_negative(self.interval_seconds, "SYNC_INTERVAL_SECONDS")
        require_header_matches_range(self.response_range, self.header_rows)

    @classmethod
    def from_module(cls, settings: ModuleType | Any) -> "SyncSettings":
        """Build settings from a ``config.*`` module (or any object with the same attributes)."""

        def get(name: str, default: Any = None) -> Any:
            return getattr(settings, name, default)

        return cls(
            spreadsheet_id=str(get("SPREADSHEET_ID") or ""),
            sheet_gid=int(get("SHEET_GID", 0)),
            guild_id=str(get("GUILD_ID") or ""),
            role_id=str(get("ROLE_ID") or ""),
            response_range=str(get("RESPONSE_RANGE", constants.DEFAULT_RESPONSE_RANGE)),
            header_rows=int(get("HEADER_ROWS", constants.DEFAULT_HEADER_ROWS)),
            identity_column=int(get("IDENTITY_COLUMN", constants.DEFAULT_IDENTITY_COLUMN)),
            attendance_column=int(get("ATTENDANCE_COLUMN", constants.DEFAULT_ATTENDANCE_COLUMN)),
            last_corrected_column=int(get("LAST_CORRECTED_COLUMN", constants.DEFAULT_LAST_CORRECTED_COLUMN)),
            timestamp_format=str(get("TIMESTAMP_FORMAT", constants.DEFAULT_TIMESTAMP_FORMAT)),
            interval_seconds=int(get("SYNC_INTERVAL_SECONDS", constants.DEFAULT_SYNC_INTERVAL_SECONDS)),
            google_credentials_file=get("GOOGLE_CREDENTIALS_FILE"),
            discord_token=get("DISCORD_TOKEN"),
            discord_api_base=str(get("DISCORD_API_BASE", constants.DEFAULT_DISCORD_API_BASE)),
            http_timeout_seconds=int(get("HTTP_TIMEOUT_SECONDS", constants.DEFAULT_HTTP_TIMEOUT_SECONDS)),
        )
