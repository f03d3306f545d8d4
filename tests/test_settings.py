from __future__ import annotations

from types import SimpleNamespace

import pytest

from attendance_sync.core.exceptions import ConfigurationError
from attendance_sync.core.settings import SyncSettings
from config import get_settings_module


def test_from_module_applies_defaults():
    settings = SyncSettings.from_module(
        SimpleNamespace(SPREADSHEET_ID="sheet", SHEET_GID="590955473", GUILD_ID="g", ROLE_ID="r")
    )

    assert settings.sheet_gid == 590955473
    assert settings.response_range == "A2:F"
    assert settings.header_rows == 1
    assert (settings.identity_column, settings.attendance_column, settings.last_corrected_column) == (1, 4, 0)
    assert settings.interval_seconds == 60


@pytest.mark.parametrize("missing", ["SPREADSHEET_ID", "GUILD_ID", "ROLE_ID"])
def test_missing_identifier_rejected(missing):
    values = {"SPREADSHEET_ID": "sheet", "GUILD_ID": "g", "ROLE_ID": "r"}
    values[missing] = ""

    with pytest.raises(ConfigurationError):
        SyncSettings.from_module(SimpleNamespace(**values))


def test_negative_column_rejected():
    with pytest.raises(ConfigurationError):
        SyncSettings(spreadsheet_id="s", sheet_gid=0, guild_id="g", role_id="r", attendance_column=-1)


@pytest.mark.parametrize(
    "env, expected",
    [("production", "config.production"), ("test", "config.testing"), ("anything", "config.development")],
)
def test_settings_module_selection(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_testing_settings_module_builds():
    import config.testing as testing

    settings = SyncSettings.from_module(testing)

    assert settings.guild_id == "test-guild"
    assert settings.google_credentials_file is None


@pytest.mark.parametrize(
    "response_range, header_rows",
    [("A2:F", 1), ("Responses!A3:F", 2), ("A:F", 0), ("$A$2:$F", 1)],
)
def test_range_and_header_rows_agree(response_range, header_rows):
    settings = SyncSettings(
        spreadsheet_id="s", sheet_gid=0, guild_id="g", role_id="r",
        response_range=response_range, header_rows=header_rows,
    )

    assert settings.header_rows == header_rows


def test_range_header_mismatch_rejected():
    with pytest.raises(ConfigurationError):
        SyncSettings(spreadsheet_id="s", sheet_gid=0, guild_id="g", role_id="r", response_range="A3:F", header_rows=1)
