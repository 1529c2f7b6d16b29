"""Data models for search execution tracking and reporting."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from bidwatch.config.models import SearchCriteria
from bidwatch.domain.models import Notice
from bidwatch.matching.models import MatchResult


@dataclass
class SearchRunResult:
    """
    Outcome of one search over the notice collection.

    Attributes:
        search_id: Identifier stamped on every log record of the run
        criteria: Criteria the caller should display (the cleared form
            state after clear())
        notices: Matching notices in collection order
        total_notices: Size of the searched collection
        started_at: UTC timestamp when the search began
        finished_at: UTC timestamp when the search completed
        explanations: Per-notice match results, filled only when requested
        cleared: Whether this result comes from clearing the form
    """

    search_id: str
    criteria: SearchCriteria
    notices: List[Notice]
    total_notices: int
    started_at: datetime
    finished_at: datetime
    explanations: List[MatchResult] = field(default_factory=list)
    cleared: bool = False

    @property
    def matched_count(self) -> int:
        return len(self.notices)

    @property
    def is_empty(self) -> bool:
        """True when nothing matched (a valid outcome, not an error)."""
        return not self.notices

    @property
    def duration_seconds(self) -> float:
        return (self.finished_at - self.started_at).total_seconds()
