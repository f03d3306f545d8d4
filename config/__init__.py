import os
from pathlib import Path
from typing import Optional


def get_settings_module() -> str:
    # APP_ENV selects the settings module, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def read_secret(env_name: str, file_env_name: str) -> Optional[str]:
    """Secret from ``env_name``, else from the file named by ``file_env_name``."""
    value = os.getenv(env_name)
    if value:
        return value.strip()
    path = os.getenv(file_env_name)
    if path and Path(path).is_file():
        return Path(path).read_text(encoding="utf-8").strip()
    return None
