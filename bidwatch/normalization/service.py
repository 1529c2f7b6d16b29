"""Keyword normalization for search criteria.

Keyword fields arrive as free text typed into the search form. This module
turns them into the token lists compared against notices.
"""

from typing import List

from bidwatch.config.models import SearchCriteria

from .models import NormalizedCriteria


class CriteriaNormalizer:
    """Derives comparison tokens from raw keyword strings.

    Tokens are compared verbatim: no case folding and no de-duplication.
    """

    @staticmethod
    def tokenize(raw: str) -> List[str]:
        """Split a keyword string into tokens.

        Leading and trailing whitespace is trimmed and the rest is split on
        runs of whitespace, including the full-width space (U+3000).

        Args:
            raw: Keyword text as typed

        Returns:
            Non-empty tokens in entry order; empty list for blank input

        Example:
            >>> CriteriaNormalizer.tokenize("  データ　電子化 ")
            ['データ', '電子化']
        """
        if not raw:
            return []
        return raw.split()

    def normalize(self, criteria: SearchCriteria) -> NormalizedCriteria:
        """Derive include and exclude tokens for a search.

        Args:
            criteria: Search criteria

        Returns:
            NormalizedCriteria wrapping the criteria and its tokens
        """
        return NormalizedCriteria(
            criteria=criteria,
            include_tokens=tuple(self.tokenize(criteria.include_keywords)),
            exclude_tokens=tuple(self.tokenize(criteria.exclude_keywords)),
        )
