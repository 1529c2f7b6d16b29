"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        notices_path: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """Initialize environment configuration."""
        self.log_level = log_level
        self.notices_path = notices_path
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Optional environment variables:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - BIDWATCH_NOTICES_PATH: Notice catalog file, overrides notices_path in config
    - ENVIRONMENT: Environment label stamped on log records (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    notices_path = os.getenv("BIDWATCH_NOTICES_PATH")
    environment = os.getenv("ENVIRONMENT")

    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.upper()

    if notices_path is not None and not notices_path.strip():
        errors.append("BIDWATCH_NOTICES_PATH is set but empty")

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            source="environment",
            suggestions=[
                "Check the values in your .env file",
                "Unset variables you do not need",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level or None,
        notices_path=notices_path.strip() if notices_path else None,
        environment=environment,
    )
