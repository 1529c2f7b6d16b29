"""Matching engine for evaluating notices against search criteria.

A notice matches when every clause holds. A clause whose criterion is empty
always holds. Clauses are pure functions of (notice, normalized criteria),
so evaluation order never changes the outcome.
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple, Union

from bidwatch.config.models import IncludeMode, SearchCriteria, StatusFilter, TitleMatchMode
from bidwatch.domain.constants import NATIONWIDE
from bidwatch.domain.models import Notice
from bidwatch.logging import get_logger
from bidwatch.normalization import CriteriaNormalizer, NormalizedCriteria
from bidwatch.utils.highlighting import found_keywords

from .models import MatchClause, MatchResult

logger = get_logger(__name__, component="matching")

CriteriaLike = Union[SearchCriteria, NormalizedCriteria]


def _region_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    region = normalized.criteria.region
    return not region or notice.region == region or notice.region == NATIONWIDE


def _agency_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    agency = normalized.criteria.agency
    return not agency or agency in notice.agency


def _classification_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    classification = normalized.criteria.classification
    return not classification or notice.classification == classification


def _grade_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    selected = normalized.criteria.grades
    return not selected or not selected.isdisjoint(notice.grades)


def _year_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    year = normalized.criteria.year
    return not year or notice.published_year == year


def _month_range_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    # Zero-padded two-digit strings compare like month numbers
    month = notice.published_month
    month_from = normalized.criteria.month_from
    month_to = normalized.criteria.month_to
    if month_from and month < month_from:
        return False
    if month_to and month > month_to:
        return False
    return True


def _status_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    status = normalized.criteria.status
    return status == StatusFilter.ALL or notice.status.value == status.value


def _title_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    title = normalized.criteria.title
    if not title:
        return True
    if normalized.criteria.title_match_mode == TitleMatchMode.EXACT:
        return notice.title == title
    return title in notice.title


def _include_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    tokens = normalized.active_include_tokens
    if not tokens:
        return True
    haystack = notice.searchable_text
    if normalized.criteria.include_mode == IncludeMode.ANY:
        return any(token in haystack for token in tokens)
    return all(token in haystack for token in tokens)


def _exclude_ok(notice: Notice, normalized: NormalizedCriteria) -> bool:
    haystack = notice.searchable_text
    return not any(token in haystack for token in normalized.exclude_tokens)


CLAUSES: Tuple[Tuple[MatchClause, Callable[[Notice, NormalizedCriteria], bool]], ...] = (
    (MatchClause.REGION, _region_ok),
    (MatchClause.AGENCY, _agency_ok),
    (MatchClause.CLASSIFICATION, _classification_ok),
    (MatchClause.GRADE, _grade_ok),
    (MatchClause.YEAR, _year_ok),
    (MatchClause.MONTH_RANGE, _month_range_ok),
    (MatchClause.STATUS, _status_ok),
    (MatchClause.TITLE, _title_ok),
    (MatchClause.INCLUDE_KEYWORDS, _include_ok),
    (MatchClause.EXCLUDE_KEYWORDS, _exclude_ok),
)


class NoticeMatcher:
    """Evaluates notices against search criteria.

    The matcher holds no per-search state: criteria are passed to every call,
    and one instance can be shared freely.

    Every method accepts either a SearchCriteria or an already normalized
    NormalizedCriteria. Passing the normalized form avoids re-tokenizing
    keywords for each notice.
    """

    def __init__(
        self,
        normalizer: Optional[CriteriaNormalizer] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize NoticeMatcher.

        Args:
            normalizer: Keyword normalizer (defaults to CriteriaNormalizer())
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.normalizer = normalizer or CriteriaNormalizer()
        self.logger = logger_instance or logger

    def prepare(self, criteria: CriteriaLike) -> NormalizedCriteria:
        """Normalize criteria unless it already is."""
        if isinstance(criteria, NormalizedCriteria):
            return criteria
        return self.normalizer.normalize(criteria)

    def matches(self, notice: Notice, criteria: CriteriaLike) -> bool:
        """Return True if the notice satisfies every clause.

        Stops at the first failing clause.

        Args:
            notice: Notice to test
            criteria: Search criteria

        Returns:
            True if the notice matches
        """
        normalized = self.prepare(criteria)
        return all(check(notice, normalized) for _, check in CLAUSES)

    def evaluate(self, notice: Notice, criteria: CriteriaLike) -> MatchResult:
        """Evaluate every clause and report which ones failed.

        ``evaluate(n, c).is_match`` always equals ``matches(n, c)``.

        Args:
            notice: Notice to evaluate
            criteria: Search criteria

        Returns:
            MatchResult with failed clauses and matched keyword tokens
        """
        normalized = self.prepare(criteria)
        failed = [clause for clause, check in CLAUSES if not check(notice, normalized)]
        haystack = notice.searchable_text

        result = MatchResult(
            notice_id=notice.id,
            is_match=not failed,
            failed_clauses=failed,
            matched_include_tokens=found_keywords(haystack, normalized.active_include_tokens),
            matched_exclude_tokens=found_keywords(haystack, normalized.exclude_tokens),
        )

        if not result.is_match:
            self.logger.debug(
                f"Notice did not match: {notice.id}",
                extra={
                    "event": "matching.notice.rejected",
                    "notice_id": notice.id,
                    "reason": result.reason,
                },
            )

        return result

    def filter(self, notices: Iterable[Notice], criteria: CriteriaLike) -> List[Notice]:
        """Return the notices that match, in their original order.

        Args:
            notices: Candidate notices
            criteria: Search criteria

        Returns:
            Matching notices; never re-sorted or de-duplicated
        """
        normalized = self.prepare(criteria)
        return [notice for notice in notices if self.matches(notice, normalized)]


_default_matcher = NoticeMatcher()


def matches(notice: Notice, criteria: CriteriaLike) -> bool:
    """Module-level shortcut for NoticeMatcher().matches()."""
    return _default_matcher.matches(notice, criteria)


def filter_notices(notices: Iterable[Notice], criteria: CriteriaLike) -> List[Notice]:
    """Module-level shortcut for NoticeMatcher().filter()."""
    return _default_matcher.filter(notices, criteria)
