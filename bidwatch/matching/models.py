"""Data models for the matching engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class MatchClause(str, Enum):
    """Independent predicates a notice must satisfy, in evaluation order."""

    REGION = "region"
    AGENCY = "agency"
    CLASSIFICATION = "classification"
    GRADE = "grade"
    YEAR = "year"
    MONTH_RANGE = "month_range"
    STATUS = "status"
    TITLE = "title"
    INCLUDE_KEYWORDS = "include_keywords"
    EXCLUDE_KEYWORDS = "exclude_keywords"


@dataclass
class MatchResult:
    """Result of evaluating a notice against SearchCriteria.

    Every clause is evaluated, so ``failed_clauses`` lists all reasons a
    notice was rejected, not only the first.

    Attributes:
        notice_id: Identifier of the evaluated notice
        is_match: True if no clause failed
        failed_clauses: Clauses that rejected the notice, in evaluation order
        matched_include_tokens: Include tokens found in the searchable text
        matched_exclude_tokens: Exclude tokens found in the searchable text
    """

    notice_id: str
    is_match: bool
    failed_clauses: List[MatchClause] = field(default_factory=list)
    matched_include_tokens: List[str] = field(default_factory=list)
    matched_exclude_tokens: List[str] = field(default_factory=list)

    @property
    def reason(self) -> str:
        """Short description of why the notice did or did not match."""
        if self.is_match:
            return "matched"
        return ", ".join(clause.value for clause in self.failed_clauses)
