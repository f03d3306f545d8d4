from __future__ import annotations

from datetime import datetime

from ..core.constants import DEFAULT_DAY_FORMAT, DEFAULT_TIMESTAMP_FORMAT


def parse_timestamp(value: str, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> datetime:
    """Parse a form timestamp such as ``1/5/2024 10:00:00``.

    strptime accepts day and month without zero padding.
    """
    return datetime.strptime(value.strip(), fmt)


def format_timestamp(value: datetime, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Format a timestamp the way the form writes it (no zero padding on day/month)."""
    if fmt == DEFAULT_TIMESTAMP_FORMAT:
        return f"{value.day}/{value.month}/{value.year} {value:%H:%M:%S}"
    return value.strftime(fmt)


def calendar_day(value: datetime) -> str:
    """Day bucket used for same-day deduplication."""
    return value.strftime(DEFAULT_DAY_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
