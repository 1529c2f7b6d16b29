"""Configuration and search criteria for Bid Watch."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import build_criteria, load_config
from .models import (
    AppConfig,
    CriteriaDefaults,
    IncludeMode,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SearchCriteria,
    StatusFilter,
    TitleMatchMode,
    default_criteria,
)

__all__ = [
    # Loader functions
    "load_config",
    "build_criteria",
    "load_environment_config",
    # Models
    "AppConfig",
    "CriteriaDefaults",
    "LoggingConfig",
    "SearchCriteria",
    "EnvironmentConfig",
    "default_criteria",
    # Enums
    "TitleMatchMode",
    "IncludeMode",
    "StatusFilter",
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
