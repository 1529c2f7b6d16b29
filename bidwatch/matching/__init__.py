"""Matching engine for filtering notices against search criteria.

This module provides:
- NoticeMatcher: evaluates notices against SearchCriteria
- MatchResult / MatchClause: per-notice explanation of a decision
- matches / filter_notices: shortcuts using a shared default matcher
- Payload helpers for CLI and JSON output
"""

from .engine import NoticeMatcher, filter_notices, matches
from .models import MatchClause, MatchResult
from .utils import build_notice_payload, build_rationale_dict

__all__ = [
    "NoticeMatcher",
    "MatchClause",
    "MatchResult",
    "matches",
    "filter_notices",
    "build_notice_payload",
    "build_rationale_dict",
]
