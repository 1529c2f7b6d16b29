"""Non-fatal checks for configuration and search criteria."""

import warnings
from typing import Any, Dict, List

from bidwatch.domain.constants import CLASSIFICATIONS, GRADES, PREFECTURES

from .models import IncludeMode, SearchCriteria


def check_criteria_warnings(criteria: SearchCriteria) -> List[str]:
    """
    Check a search for settings that are valid but probably unintended.

    Args:
        criteria: Validated search criteria

    Returns:
        List of warning messages
    """
    warning_messages = []

    if criteria.region and criteria.region not in PREFECTURES:
        warning_messages.append(
            f"Region '{criteria.region}' is not a known prefecture; only nationwide notices will match"
        )

    if criteria.classification and criteria.classification not in CLASSIFICATIONS:
        warning_messages.append(
            f"Classification '{criteria.classification}' is not one of: {', '.join(CLASSIFICATIONS)}"
        )

    unknown_grades = sorted(criteria.grades - set(GRADES))
    if unknown_grades:
        warning_messages.append(f"Unknown grades selected: {', '.join(unknown_grades)}")

    if criteria.month_from and criteria.month_to and criteria.month_from > criteria.month_to:
        warning_messages.append(
            f"month_from ({criteria.month_from}) is after month_to ({criteria.month_to}); "
            "no notice can match"
        )

    if criteria.include_mode == IncludeMode.EXCLUDE_ONLY and criteria.include_keywords.strip():
        warning_messages.append(
            "include_keywords are ignored because include_mode is exclude_only"
        )

    include_terms = set(criteria.include_keywords.split())
    exclude_terms = set(criteria.exclude_keywords.split())
    conflicts = include_terms & exclude_terms
    if conflicts and criteria.include_mode != IncludeMode.EXCLUDE_ONLY:
        warning_messages.append(
            f"Keywords both included and excluded: {', '.join(sorted(conflicts))}"
        )

    for name, terms in (
        ("include_keywords", criteria.include_keywords.split()),
        ("exclude_keywords", criteria.exclude_keywords.split()),
    ):
        duplicates = sorted({term for term in terms if terms.count(term) > 1})
        if duplicates:
            warning_messages.append(f"Duplicate terms in {name}: {', '.join(duplicates)}")

    return warning_messages


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check raw configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    defaults = config_dict.get("defaults", {})
    if isinstance(defaults, dict):
        grades = defaults.get("grades")
        if isinstance(grades, list) and not grades:
            warning_messages.append(
                "defaults.grades is empty; clearing the form will leave no grade selected"
            )

    known_keys = {"notices_path", "defaults", "search_criteria", "logging"}
    for key in sorted(set(config_dict) - known_keys):
        warning_messages.append(f"Unknown configuration key '{key}' will be ignored")

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
