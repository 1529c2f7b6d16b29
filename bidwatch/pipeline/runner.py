"""Search orchestration over a notice collection."""

from typing import List, Optional, Sequence
from uuid import uuid4

from bidwatch.config.models import CriteriaDefaults, SearchCriteria, default_criteria
from bidwatch.domain.models import Notice
from bidwatch.logging import get_logger
from bidwatch.logging.context import log_context
from bidwatch.matching.engine import NoticeMatcher
from bidwatch.matching.models import MatchResult
from bidwatch.utils.timestamps import utc_now

from .models import SearchRunResult

logger = get_logger(__name__, component="pipeline")


class SearchPipeline:
    """
    Runs searches against a fixed notice collection.

    The pipeline owns the collection and the form defaults; the matcher it
    delegates to stays stateless. Each run gets its own search_id in the
    logging context.
    """

    def __init__(
        self,
        notices: Sequence[Notice],
        matcher: Optional[NoticeMatcher] = None,
        defaults: Optional[CriteriaDefaults] = None,
    ):
        """
        Initialize the search pipeline.

        Args:
            notices: Collection to search; its order is the result order
            matcher: Matcher to use (defaults to NoticeMatcher())
            defaults: Values restored by clear()
        """
        self.notices: List[Notice] = list(notices)
        self.matcher = matcher or NoticeMatcher()
        self.defaults = defaults or CriteriaDefaults()

    def run(self, criteria: SearchCriteria, explain: bool = False) -> SearchRunResult:
        """
        Filter the collection with the given criteria.

        Args:
            criteria: Search criteria
            explain: Also evaluate every notice and keep the per-notice results

        Returns:
            SearchRunResult with matching notices in collection order
        """
        return self._execute(criteria, criteria, explain=explain, cleared=False)

    def clear(self, explain: bool = False) -> SearchRunResult:
        """
        Reset the search form and show the full collection.

        The returned criteria is the cleared form state (status all, default
        grades, default year). The collection itself is matched against the
        unconstrained criteria, so every notice is returned.

        Returns:
            SearchRunResult holding the cleared criteria and all notices
        """
        return self._execute(
            default_criteria(self.defaults), SearchCriteria(), explain=explain, cleared=True
        )

    def _execute(
        self,
        shown_criteria: SearchCriteria,
        applied_criteria: SearchCriteria,
        explain: bool,
        cleared: bool,
    ) -> SearchRunResult:
        started_at = utc_now()
        search_id = uuid4().hex

        with log_context(search_id=search_id):
            logger.info(
                "Search cleared" if cleared else "Search started",
                extra={
                    "event": "search.cleared" if cleared else "search.run.started",
                    "notice_count": len(self.notices),
                    "criteria": applied_criteria.model_dump(mode="json", exclude_defaults=True),
                },
            )

            normalized = self.matcher.prepare(applied_criteria)
            explanations: List[MatchResult] = []
            if explain:
                explanations = [self.matcher.evaluate(notice, normalized) for notice in self.notices]
                matched = [
                    notice
                    for notice, evaluation in zip(self.notices, explanations)
                    if evaluation.is_match
                ]
            else:
                matched = self.matcher.filter(self.notices, normalized)

            finished_at = utc_now()
            result = SearchRunResult(
                search_id=search_id,
                criteria=shown_criteria,
                notices=matched,
                total_notices=len(self.notices),
                started_at=started_at,
                finished_at=finished_at,
                explanations=explanations,
                cleared=cleared,
            )

            logger.info(
                f"Search completed: {result.matched_count} of {result.total_notices} notices matched",
                extra={
                    "event": "search.run.completed",
                    "matched_count": result.matched_count,
                    "notice_count": result.total_notices,
                    "duration_seconds": round(result.duration_seconds, 6),
                },
            )

        return result
