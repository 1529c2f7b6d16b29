"""Data models for the normalization layer."""

from dataclasses import dataclass
from typing import Tuple

from bidwatch.config.models import IncludeMode, SearchCriteria


@dataclass(frozen=True)
class NormalizedCriteria:
    """Search criteria paired with its derived keyword tokens.

    Tokens are computed once per search and reused for every notice.

    Attributes:
        criteria: The criteria the tokens were derived from
        include_tokens: Include keywords, in entry order
        exclude_tokens: Exclude keywords, in entry order
    """

    criteria: SearchCriteria
    include_tokens: Tuple[str, ...] = ()
    exclude_tokens: Tuple[str, ...] = ()

    @property
    def active_include_tokens(self) -> Tuple[str, ...]:
        """Include tokens that take part in matching.

        Empty under exclude_only mode, whatever was typed.
        """
        if self.criteria.include_mode == IncludeMode.EXCLUDE_ONLY:
            return ()
        return self.include_tokens
