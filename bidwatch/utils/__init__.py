"""Utility functions for time handling and keyword highlighting."""

from .highlighting import found_keywords, highlight_keywords
from .timestamps import format_deadline, parse_deadline, utc_now

__all__ = [
    # Timestamps
    "utc_now",
    "parse_deadline",
    "format_deadline",
    # Highlighting
    "highlight_keywords",
    "found_keywords",
]
