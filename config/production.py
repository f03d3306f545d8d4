import os

from config.config import *  # noqa: F401,F403

DEBUG = False

# Production keeps rotating files by default
LOG_DIR = os.getenv("LOG_DIR", "logs")
