from config.config import *  # noqa: F401,F403

SPREADSHEET_ID = "test-spreadsheet"
SHEET_GID = 0
GUILD_ID = "test-guild"
ROLE_ID = "test-role"
DISCORD_TOKEN = "test-token"
GOOGLE_CREDENTIALS_FILE = None

DEBUG = False
TESTING = True

LOG_DIR = None
