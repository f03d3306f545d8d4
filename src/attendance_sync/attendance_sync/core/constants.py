"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"
DEFAULT_DAY_FORMAT = "%Y-%m-%d"
DEFAULT_RESPONSE_RANGE = "A2:F"
DEFAULT_HEADER_ROWS = 1

# Positional layout of a response row once blank cells are dropped.
FIELD_TIMESTAMP = 0
FIELD_IDENTITY = 1
FIELD_DISPLAY_NAME = 2
FIELD_MEMBERSHIP_HANDLE = 3
FIELD_ATTENDANCE = 4

MIN_FIELDS = 5
DEFAULT_ATTENDANCE = 1
MAX_ATTENDANCE = 2**32 - 1

# Physical sheet columns (zero-based).
DEFAULT_IDENTITY_COLUMN = 1
DEFAULT_ATTENDANCE_COLUMN = 4
DEFAULT_LAST_CORRECTED_COLUMN = 0

DEFAULT_SYNC_INTERVAL_SECONDS = 60
DEFAULT_HTTP_TIMEOUT_SECONDS = 30
DEFAULT_DISCORD_API_BASE = "https://discord.com/api/v10"
DISCORD_MEMBER_PAGE_SIZE = 1000
