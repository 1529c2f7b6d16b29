"""Notice catalog: bundled samples and file-based ingestion."""

from .exceptions import CatalogError, CatalogFileError, CatalogValidationError
from .loader import load_notices, parse_notices, resolve_notices
from .samples import SAMPLE_NOTICES

__all__ = [
    "SAMPLE_NOTICES",
    "load_notices",
    "parse_notices",
    "resolve_notices",
    "CatalogError",
    "CatalogFileError",
    "CatalogValidationError",
]
