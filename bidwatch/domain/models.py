"""Core domain models for procurement notices.

This module defines the notice record searched by the matcher:
- NoticeStatus: whether the notice still accepts bids
- Notice: one immutable procurement/tender listing
"""

import re
from datetime import date, datetime
from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel, Field, field_validator

from bidwatch.utils.timestamps import parse_deadline

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class NoticeStatus(str, Enum):
    """Bid acceptance state of a notice."""

    OPEN = "open"
    CLOSED = "closed"


class Notice(BaseModel):
    """A single procurement notice.

    Notices are supplied by the catalog and never modified afterwards. The
    published date is held as a calendar date, so its ISO form is always
    ``YYYY-MM-DD`` and the year and month prefixes used by the matcher are
    well defined.

    ``deadline``, ``budget_range`` and ``url`` are informational only and are
    never filtered on.
    """

    id: str = Field(..., min_length=1, description="Unique notice identifier")
    title: str = Field(..., description="Notice title (案件名)")
    agency: str = Field(..., description="Ordering agency name (発注機関名)")
    region: str = Field(..., description="Prefecture, or the nationwide sentinel")
    classification: str = Field(..., description="Procurement classification (区分)")
    grades: FrozenSet[str] = Field(..., description="Qualification grades accepted")
    published_date: date = Field(..., description="Publication date (公示日)")
    deadline: Optional[datetime] = Field(None, description="Bid deadline")
    status: NoticeStatus = Field(..., description="open or closed")
    budget_range: str = Field("", description="Display-only budget range")
    url: Optional[str] = Field(None, description="Link to the original notice")

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        """Strip whitespace from the identifier."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("id cannot be empty or whitespace-only")
        return stripped

    @field_validator("grades", mode="before")
    @classmethod
    def validate_grades(cls, v):
        """Require a non-empty collection of single-letter grades."""
        if isinstance(v, str):
            v = list(v)
        elif not isinstance(v, (list, tuple, set, frozenset)):
            raise ValueError(f"grades must be a list of grade letters, got: {v!r}")
        grades = frozenset(str(grade).strip().upper() for grade in v)
        if not grades:
            raise ValueError("grades must contain at least one grade")
        for grade in grades:
            if len(grade) != 1 or not grade.isalpha():
                raise ValueError(f"grade must be a single letter, got: {grade!r}")
        return grades

    @field_validator("published_date", mode="before")
    @classmethod
    def require_iso_date(cls, v):
        """Only accept ISO ``YYYY-MM-DD`` strings or date objects."""
        if isinstance(v, datetime):
            raise ValueError(f"published_date must be a date without a time, got: {v!r}")
        if isinstance(v, str):
            stripped = v.strip()
            if not ISO_DATE_PATTERN.match(stripped):
                raise ValueError(f"published_date must be YYYY-MM-DD, got: {v!r}")
            return date.fromisoformat(stripped)
        return v

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline_string(cls, v):
        """Accept ISO date-times and the ``YYYY-MM-DD HH:MM`` listing form."""
        if isinstance(v, str):
            if not v.strip():
                return None
            parsed = parse_deadline(v)
            if parsed is None:
                raise ValueError(f"Unrecognized deadline format: {v!r}")
            return parsed
        return v

    @property
    def published_iso(self) -> str:
        """Publication date in ``YYYY-MM-DD`` form."""
        return self.published_date.isoformat()

    @property
    def published_year(self) -> str:
        return self.published_iso[:4]

    @property
    def published_month(self) -> str:
        return self.published_iso[5:7]

    @property
    def searchable_text(self) -> str:
        """Text searched by include/exclude keywords: title and agency."""
        return f"{self.title} {self.agency}"

    model_config = {
        "frozen": True,
        "json_schema_extra": {"example": {
            "id": "EX-001",
            "title": "データ入力業務 一式",
            "agency": "総務省",
            "region": "東京都",
            "classification": "役務",
            "grades": ["A", "B", "C", "D"],
            "published_date": "2025-10-18",
            "deadline": "2025-10-25 17:00",
            "status": "open",
            "budget_range": "200万〜800万円",
            "url": "https://example.gov/ex-001",
        }},
    }
