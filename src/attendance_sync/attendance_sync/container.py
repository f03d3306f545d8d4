from __future__ import annotations

from dataclasses import dataclass

from .attendance.aggregator import AttendanceAggregator
from .attendance.parser import RowParser
from .attendance.planner import WritePlanner
from .attendance.repository import AttendanceSheetRepository
from .attendance.sheets_repository import GoogleSheetsAttendanceRepository, SheetsConfig, SheetsConnection
from .common.validators import require_non_empty
from .core.settings import SyncSettings
from .membership.discord_repository import DiscordConfig, DiscordMembershipDirectory
from .membership.repository import MembershipDirectory
from .membership.service import MembershipSynchronizer
from .sync.service import AttendanceSyncService


@dataclass(frozen=True)
class Container:
    settings: SyncSettings
    sheet_repo: AttendanceSheetRepository
    membership_repo: MembershipDirectory
    synchronizer: MembershipSynchronizer
    sync_service: AttendanceSyncService


def build_service(
    settings: SyncSettings,
    *,
    sheet_repo: AttendanceSheetRepository,
    membership_repo: MembershipDirectory,
) -> Container:
    """Wire the engine around any pair of repositories (real adapters or fakes)."""
    synchronizer = MembershipSynchronizer(
        membership_repo,
        guild_id=settings.guild_id,
        role_id=settings.role_id,
    )
    service = AttendanceSyncService(
        sheet_repo,
        synchronizer,
        parser=RowParser(timestamp_format=settings.timestamp_format),
        aggregator=AttendanceAggregator(),
        planner=WritePlanner(
            header_rows=settings.header_rows,
            identity_column=settings.identity_column,
            attendance_column=settings.attendance_column,
            last_corrected_column=settings.last_corrected_column,
            timestamp_format=settings.timestamp_format,
        ),
    )
    return Container(
        settings=settings,
        sheet_repo=sheet_repo,
        membership_repo=membership_repo,
        synchronizer=synchronizer,
        sync_service=service,
    )


def build_container(settings: SyncSettings) -> Container:
    sheets = SheetsConnection(
        SheetsConfig(
            spreadsheet_id=settings.spreadsheet_id,
            sheet_gid=settings.sheet_gid,
            credentials_file=require_non_empty(settings.google_credentials_file, "GOOGLE_CREDENTIALS_FILE"),
        )
    )
    discord = DiscordMembershipDirectory(
        DiscordConfig(
            token=require_non_empty(settings.discord_token, "DISCORD_TOKEN"),
            api_base=settings.discord_api_base,
            timeout=settings.http_timeout_seconds,
        )
    )
    return build_service(
        settings,
        sheet_repo=GoogleSheetsAttendanceRepository(sheets, response_range=settings.response_range),
        membership_repo=discord,
    )
