"""Domain models and reference values for procurement notices."""

from .constants import CLASSIFICATIONS, DEFAULT_YEAR, GRADES, MONTHS, NATIONWIDE, PREFECTURES
from .models import Notice, NoticeStatus

__all__ = [
    "Notice",
    "NoticeStatus",
    "NATIONWIDE",
    "PREFECTURES",
    "CLASSIFICATIONS",
    "GRADES",
    "MONTHS",
    "DEFAULT_YEAR",
]
