"""Keyword normalization for search criteria.

This module provides:
- CriteriaNormalizer: splits raw keyword text into comparison tokens
- NormalizedCriteria: criteria paired with its derived tokens
"""

from .models import NormalizedCriteria
from .service import CriteriaNormalizer

__all__ = [
    "CriteriaNormalizer",
    "NormalizedCriteria",
]
