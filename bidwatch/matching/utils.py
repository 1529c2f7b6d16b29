"""Helpers for turning notices and match results into JSON-safe payloads."""

from typing import Dict

from bidwatch.domain.models import Notice
from bidwatch.utils.timestamps import format_deadline

from .models import MatchResult


def build_notice_payload(notice: Notice) -> Dict:
    """Build a display payload for one notice.

    Args:
        notice: Notice to serialize

    Returns:
        Dict with keys id, title, agency, region, classification, grades
        (sorted), published_date (ISO), deadline (``YYYY-MM-DD HH:MM`` or
        None), status, budget_range and url
    """
    return {
        "id": notice.id,
        "title": notice.title,
        "agency": notice.agency,
        "region": notice.region,
        "classification": notice.classification,
        "grades": sorted(notice.grades),
        "published_date": notice.published_iso,
        "deadline": format_deadline(notice.deadline) or None,
        "status": notice.status.value,
        "budget_range": notice.budget_range,
        "url": notice.url,
    }


def build_rationale_dict(match_result: MatchResult) -> Dict:
    """Build a lightweight rationale dict for a match result.

    Args:
        match_result: MatchResult to serialize

    Returns:
        Dict with notice_id, is_match, failed_clauses, matched include and
        exclude tokens, and a one-line reason
    """
    return {
        "notice_id": match_result.notice_id,
        "is_match": match_result.is_match,
        "failed_clauses": [clause.value for clause in match_result.failed_clauses],
        "matched_include_tokens": list(match_result.matched_include_tokens),
        "matched_exclude_tokens": list(match_result.matched_exclude_tokens),
        "reason": match_result.reason,
    }
