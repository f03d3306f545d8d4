import os

from config import read_secret


class Config:
    # Spreadsheet holding the form responses
    SPREADSHEET_ID = os.environ.get("SPREADSHEET_ID", "")
    SHEET_GID = int(os.environ.get("SHEET_GID", "0"))
    RESPONSE_RANGE = os.environ.get("RESPONSE_RANGE", "A2:F")
    HEADER_ROWS = int(os.environ.get("HEADER_ROWS", "1"))
    IDENTITY_COLUMN = int(os.environ.get("IDENTITY_COLUMN", "1"))
    ATTENDANCE_COLUMN = int(os.environ.get("ATTENDANCE_COLUMN", "4"))
    LAST_CORRECTED_COLUMN = int(os.environ.get("LAST_CORRECTED_COLUMN", "0"))
    TIMESTAMP_FORMAT = os.environ.get("TIMESTAMP_FORMAT", "%d/%m/%Y %H:%M:%S")

    # Guild + role granted to attendees
    GUILD_ID = os.environ.get("GUILD_ID", "")
    ROLE_ID = os.environ.get("ROLE_ID", "")
    DISCORD_API_BASE = os.environ.get("DISCORD_API_BASE", "https://discord.com/api/v10")

    # Credentials
    GOOGLE_CREDENTIALS_FILE = os.environ.get("GOOGLE_CREDENTIALS_FILE", "sheets-api-key.json")
    DISCORD_TOKEN = read_secret("DISCORD_TOKEN", "DISCORD_TOKEN_FILE")

    SYNC_INTERVAL_SECONDS = int(os.environ.get("SYNC_INTERVAL_SECONDS", "60"))
    HTTP_TIMEOUT_SECONDS = int(os.environ.get("HTTP_TIMEOUT_SECONDS", "30"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR = os.environ.get("LOG_DIR") or None


SPREADSHEET_ID = Config.SPREADSHEET_ID
SHEET_GID = Config.SHEET_GID
RESPONSE_RANGE = Config.RESPONSE_RANGE
HEADER_ROWS = Config.HEADER_ROWS
IDENTITY_COLUMN = Config.IDENTITY_COLUMN
ATTENDANCE_COLUMN = Config.ATTENDANCE_COLUMN
LAST_CORRECTED_COLUMN = Config.LAST_CORRECTED_COLUMN
TIMESTAMP_FORMAT = Config.TIMESTAMP_FORMAT
GUILD_ID = Config.GUILD_ID
ROLE_ID = Config.ROLE_ID
DISCORD_API_BASE = Config.DISCORD_API_BASE
GOOGLE_CREDENTIALS_FILE = Config.GOOGLE_CREDENTIALS_FILE
DISCORD_TOKEN = Config.DISCORD_TOKEN
SYNC_INTERVAL_SECONDS = Config.SYNC_INTERVAL_SECONDS
HTTP_TIMEOUT_SECONDS = Config.HTTP_TIMEOUT_SECONDS
LOG_LEVEL = Config.LOG_LEVEL
LOG_DIR = Config.LOG_DIR
