"""Custom exceptions for notice catalog loading."""

from typing import List, Optional


class CatalogError(Exception):
    """Base exception for all catalog errors.

    Catching this catches any failure to produce a valid notice collection.
    """

    pass


class CatalogFileError(CatalogError):
    """The catalog file is missing, unreadable or not valid YAML/JSON."""

    def __init__(self, message: str, path: str) -> None:
        """Initialize file error with the offending path.

        Args:
            message: Human-readable error message
            path: Catalog file path
        """
        super().__init__(message)
        self.path = path


class CatalogValidationError(CatalogError):
    """One or more records violate the Notice contract.

    Raised at ingestion so the matcher only ever sees well-formed notices
    (ISO published dates, non-empty grades, unique ids).
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: One message per invalid record field
        """
        self.errors = errors or []
        details = "".join(f"\n  - {error}" for error in self.errors)
        super().__init__(f"{message}{details}")
