"""Keyword highlighting utilities for result cards.

Matching is literal and case-sensitive, so highlighting is too: a keyword is
marked exactly where the matcher would have found it.
"""

import re
from typing import Iterable, List


def highlight_keywords(
    text: str, keywords: Iterable[str], marker_start: str = "**", marker_end: str = "**"
) -> str:
    """Highlight keywords in text by wrapping them with markers.

    Overlapping keywords are resolved longest-first, and text is scanned once
    so markers are never inserted inside an earlier marker.

    Args:
        text: Text to highlight keywords in
        keywords: Keywords to highlight
        marker_start: Marker to insert before matched keyword (default: **)
        marker_end: Marker to insert after matched keyword (default: **)

    Returns:
        Text with keywords wrapped in markers

    Example:
        >>> highlight_keywords("スキャン・電子化（公文書）", ["電子化"])
        'スキャン・**電子化**（公文書）'
    """
    unique = sorted({kw for kw in keywords if kw and kw.strip()}, key=len, reverse=True)
    if not text or not unique:
        return text

    pattern = re.compile("|".join(re.escape(kw) for kw in unique))
    return pattern.sub(lambda m: f"{marker_start}{m.group(0)}{marker_end}", text)


def found_keywords(text: str, keywords: Iterable[str]) -> List[str]:
    """Return the keywords contained in text, in the given order.

    Args:
        text: Text to search
        keywords: Candidate keywords

    Returns:
        Keywords that occur in text as literal substrings
    """
    return [kw for kw in keywords if kw in text]

