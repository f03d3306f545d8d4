from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from gspread.exceptions import GSpreadException

from ..core.exceptions import ConfigurationError, StoreReadError, StoreWriteError
from .model import DedupDirective, WriteOperation, WritePlan
from .repository import AttendanceSheetRepository

log = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


@dataclass
class SheetsConfig:
    spreadsheet_id: str
    sheet_gid: int
    credentials_file: Optional[str] = None


class SheetsConnection:
    """Lazily authorised gspread client for one spreadsheet."""

    def __init__(self, config: SheetsConfig, *, client: Optional[gspread.Client] = None):
        self._config = config
        self._client = client

    @property
    def config(self) -> SheetsConfig:
        return self._config

    def client(self) -> gspread.Client:
        if self._client is None:
            if not self._config.credentials_file:
                raise ConfigurationError("GOOGLE_CREDENTIALS_FILE is not configured")
            creds = Credentials.from_service_account_file(self._config.credentials_file, scopes=SCOPES)
            self._client = gspread.authorize(creds)
        return self._client

    def spreadsheet(self) -> gspread.Spreadsheet:
        return self.client().open_by_key(self._config.spreadsheet_id)

    def worksheet(self) -> gspread.Worksheet:
        return self.spreadsheet().get_worksheet_by_id(self._config.sheet_gid)


def _update_cell_request(sheet_gid: int, op: WriteOperation) -> dict:
    if isinstance(op.value, str):
        value = {"stringValue": op.value}
    else:
        value = {"numberValue": float(op.value)}
    return {
        "updateCells": {
            "start": {"sheetId": sheet_gid, "rowIndex": op.row_index, "columnIndex": op.column_index},
            "rows": [{"values": [{"userEnteredValue": value}]}],
            "fields": "userEnteredValue",
        }
    }


def _delete_duplicates_request(sheet_gid: int, dedup: DedupDirective) -> dict:
    return {
        "deleteDuplicates": {
            "range": {"sheetId": sheet_gid, "startRowIndex": dedup.start_row_index},
            "comparisonColumns": [
                {
                    "sheetId": sheet_gid,
                    "dimension": "COLUMNS",
                    "startIndex": dedup.column_index,
                    "endIndex": dedup.column_index + 1,
                }
            ],
        }
    }


def build_batch_body(plan: WritePlan, sheet_gid: int) -> dict:
    """Sheets ``batchUpdate`` body: cell updates first, then the dedup pass."""
    requests_ = [_update_cell_request(sheet_gid, op) for op in plan.operations]
    requests_.append(_delete_duplicates_request(sheet_gid, plan.dedup))
    return {"requests": requests_}


class GoogleSheetsAttendanceRepository(AttendanceSheetRepository):
    def __init__(self, connection: SheetsConnection, *, response_range: str):
        self._connection = connection
        self._range = response_range

    def read_rows(self) -> Sequence[Sequence[Any]]:
        try:
            values = self._connection.worksheet().get(self._range)
        except (GSpreadException, GoogleAuthError, requests.RequestException, OSError) as exc:
            raise StoreReadError(f"unable to read {self._range}: {exc}") from exc

        rows = [list(row) for row in (values or [])]
        log.debug("Read %d rows from %s", len(rows), self._range)
        return rows

    def apply(self, plan: WritePlan) -> None:
        body = build_batch_body(plan, self._connection.config.sheet_gid)
        try:
            self._connection.spreadsheet().batch_update(body)
        except (GSpreadException, GoogleAuthError, requests.RequestException, OSError) as exc:
            raise StoreWriteError(f"batch update rejected: {exc}") from exc
        log.debug("Applied %d cell updates + dedup", len(plan.operations))
