"""Configuration and search criteria models using Pydantic."""

from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel, Field, field_validator

from bidwatch.domain.constants import DEFAULT_YEAR, GRADES, MONTHS


class TitleMatchMode(str, Enum):
    """How the title criterion is compared (案件名一致)."""

    PARTIAL = "partial"
    EXACT = "exact"


class IncludeMode(str, Enum):
    """How include keywords combine (一致条件)."""

    ALL = "all"
    ANY = "any"
    EXCLUDE_ONLY = "exclude_only"


class StatusFilter(str, Enum):
    """Bid status criterion."""

    ALL = "all"
    OPEN = "open"
    CLOSED = "closed"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


def _normalize_grades(v) -> FrozenSet[str]:
    if v is None:
        return frozenset()
    if isinstance(v, str):
        v = v.replace(",", " ").split()
    elif not isinstance(v, (list, tuple, set, frozenset)):
        raise ValueError(f"grades must be a list of grade letters, got: {v!r}")
    grades = frozenset(str(grade).strip().upper() for grade in v if str(grade).strip())
    for grade in grades:
        if len(grade) != 1 or not grade.isalpha():
            raise ValueError(f"grade must be a single letter, got: {grade!r}")
    return grades


def _normalize_year(v) -> str:
    if v is None:
        return ""
    if isinstance(v, int) and not isinstance(v, bool):
        v = str(v)
    if not isinstance(v, str):
        raise ValueError(f"year must be a string, got: {v!r}")
    v = v.strip()
    if v and (len(v) != 4 or not (v.isascii() and v.isdigit())):
        raise ValueError(f"year must be empty or a 4-digit year, got: {v!r}")
    return v


class SearchCriteria(BaseModel):
    """A user's search request over procurement notices.

    Empty strings and the empty grade set mean "no constraint" for their
    field. The model is frozen: the matcher and the pipeline never modify a
    criteria value, they build a new one.

    Month bounds are always ``""`` or a zero-padded ``"01"``..``"12"``
    string, so comparing them as strings is the same as comparing month
    numbers. Integers and single-digit strings are padded on construction.
    """

    region: str = Field("", description="Exact prefecture; nationwide notices always pass")
    agency: str = Field("", description="Substring of the agency name")
    title: str = Field("", description="Title text")
    title_match_mode: TitleMatchMode = Field(TitleMatchMode.PARTIAL)
    include_keywords: str = Field("", description="Whitespace-separated keywords to include")
    include_mode: IncludeMode = Field(IncludeMode.ALL)
    exclude_keywords: str = Field("", description="Whitespace-separated keywords to exclude")
    classification: str = Field("", description="Exact classification (区分)")
    grades: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Selected grades; a notice passes if it accepts any of them",
    )
    year: str = Field("", description="4-digit publication year")
    month_from: str = Field("", description="Earliest publication month (01-12)")
    month_to: str = Field("", description="Latest publication month (01-12)")
    status: StatusFilter = Field(StatusFilter.ALL)

    model_config = {"frozen": True}

    @field_validator("region", "agency", "title", "classification", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Treat an absent value as the empty (unconstrained) string."""
        return "" if v is None else v

    @field_validator("include_keywords", "exclude_keywords", mode="before")
    @classmethod
    def join_keyword_list(cls, v):
        """Accept keywords as a list and join them into one raw string."""
        if v is None:
            return ""
        if isinstance(v, (list, tuple)):
            return " ".join(str(term) for term in v)
        return v

    @field_validator("grades", mode="before")
    @classmethod
    def validate_grades(cls, v):
        """Normalize grade letters to an upper-case frozenset."""
        return _normalize_grades(v)

    @field_validator("year", mode="before")
    @classmethod
    def validate_year(cls, v):
        """Allow an empty year or exactly four digits."""
        return _normalize_year(v)

    @field_validator("month_from", "month_to", mode="before")
    @classmethod
    def validate_month(cls, v):
        """Zero-pad months and reject anything outside 01-12."""
        if v is None:
            return ""
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError(f"month must be a string, got: {v!r}")
        v = v.strip()
        if not v:
            return ""
        padded = v.zfill(2)
        if padded not in MONTHS:
            raise ValueError(f"month must be between 01 and 12, got: {v!r}")
        return padded


class CriteriaDefaults(BaseModel):
    """Values restored by clearing the search form."""

    year: str = Field(DEFAULT_YEAR, description="Default publication year")
    grades: FrozenSet[str] = Field(
        default_factory=lambda: frozenset(GRADES),
        description="Grades selected after clearing",
    )

    @field_validator("grades", mode="before")
    @classmethod
    def validate_grades(cls, v):
        return _normalize_grades(v)

    @field_validator("year", mode="before")
    @classmethod
    def validate_year(cls, v):
        return _normalize_year(v)


def default_criteria(defaults: Optional[CriteriaDefaults] = None) -> SearchCriteria:
    """Build the criteria shown by a freshly cleared search form.

    Every constraint is absent except ``status = all``, all default grades
    selected and the default year.

    Args:
        defaults: Form defaults (falls back to CriteriaDefaults())

    Returns:
        SearchCriteria in the cleared state
    """
    defaults = defaults or CriteriaDefaults()
    return SearchCriteria(
        grades=defaults.grades,
        year=defaults.year,
        status=StatusFilter.ALL,
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for Bid Watch."""

    notices_path: Optional[str] = Field(
        None, description="Notice catalog file (YAML or JSON); bundled samples if unset"
    )
    defaults: CriteriaDefaults = Field(
        default_factory=CriteriaDefaults, description="Cleared form defaults"
    )
    search_criteria: Optional[SearchCriteria] = Field(
        None, description="Saved search used when no filter flags are given"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @field_validator("notices_path")
    @classmethod
    def strip_notices_path(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace; an empty path means bundled samples."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None
