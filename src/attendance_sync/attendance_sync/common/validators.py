from __future__ import annotations

import re

from ..core.exceptions import ConfigurationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ConfigurationError(f"{field_name} is required")
    return str(value).strip()


def require_non_negative(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{field_name} must be an integer") from exc
    if number < 0:
        raise ConfigurationError(f"{field_name} must be >= 0")
    return number


_RANGE_START = re.compile(r"^(?:.*!)?\$?[A-Za-z]*\$?(\d*)")


def range_start_row(range_spec: str) -> int:
    """1-based first row of an A1 range such as ``A2:F`` or ``Responses!A2:F``."""
    match = _RANGE_START.match(range_spec.strip())
    digits = match.group(1) if match else ""
    return int(digits) if digits else 1


def require_header_matches_range(range_spec: str, header_rows: int) -> None:
    start = range_start_row(range_spec)
    if start - 1 != int(header_rows):
        raise ConfigurationError(
            f"RESPONSE_RANGE {range_spec!r} starts at row {start} but HEADER_ROWS is {header_rows}"
        )
