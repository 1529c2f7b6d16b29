"""Custom exceptions for configuration management."""

from typing import List, Optional


class ConfigurationError(Exception):
    """
    Invalid configuration, environment variable or search criteria.

    Every problem found in one pass is kept in ``errors`` so a user can fix
    them all at once. ``source`` names where the bad values came from (a
    config file path, ``environment`` or ``command line``).
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
        source: Optional[str] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Primary error message
            errors: Individual problems, one per field
            suggestions: Hints for fixing the problems
            source: Where the invalid values came from
        """
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        lines = [f"{self.message} [{self.source}]" if self.source else self.message]
        lines.extend(f"  {number}. {error}" for number, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("Suggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)
