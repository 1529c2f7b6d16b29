"""Timestamp utilities for search timing and deadline parsing.

This module provides utilities for:
- Getting current UTC time
- Parsing notice deadlines in ISO 8601 and listing formats
- Formatting deadlines for display
"""

from datetime import datetime, timezone
from typing import Optional

# Formats seen in notice listings, tried after ISO 8601
DEADLINE_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d %H:%M",
    "%Y-%m-%d",
    "%Y/%m/%d",
)


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def parse_deadline(value: str) -> Optional[datetime]:
    """Parse a notice deadline string.

    Supports:
    - 2025-10-25T17:00:00 (and any other ISO 8601 form)
    - 2025-10-25 17:00
    - 2025/10/25 17:00
    - 2025-10-25

    Deadlines are wall-clock times of the issuing agency, so naive values
    stay naive.

    Args:
        value: Deadline string

    Returns:
        Parsed datetime, or None if no format matches

    Example:
        >>> parse_deadline("2025-10-25 17:00")
        datetime.datetime(2025, 10, 25, 17, 0)
    """
    if not value or not value.strip():
        return None

    value = value.strip()

    try:
        # Handle 'Z' suffix for UTC
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    except ValueError:
        pass

    for fmt in DEADLINE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    return None


def format_deadline(dt: Optional[datetime]) -> str:
    """Format a deadline for display.

    Args:
        dt: Deadline (can be None)

    Returns:
        ``YYYY-MM-DD HH:MM`` string, or empty string if no deadline
    """
    if dt is None:
        return ""
    return dt.strftime("%Y-%m-%d %H:%M")
