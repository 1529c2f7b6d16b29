"""Configuration loader for Bid Watch."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig, SearchCriteria
from .validators import check_criteria_warnings, check_for_warnings, emit_warnings

DEFAULT_CONFIG_CANDIDATES = (
    Path("config.yaml"),
    Path("config") / "config.yaml",
)


def load_config(config_path: Optional[Path] = None) -> tuple[AppConfig, EnvironmentConfig]:
    """
    Load and validate configuration from YAML file and environment variables.

    Config file lookup:
    1. Use provided config_path if given (must exist)
    2. Try config.yaml in current directory
    3. Try ./config/config.yaml
    4. Fall back to built-in defaults

    Args:
        config_path: Optional path to configuration file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with validated configuration

    Raises:
        ConfigurationError: If configuration is invalid or an explicit file is missing
    """
    config_file = _find_config_file(config_path)

    if config_file is None:
        app_config = AppConfig()
    else:
        config_dict = _read_yaml(config_file)

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {config_file}",
                suggestions=["Copy config.example.yaml to config.yaml and edit it"],
            )

        warnings = check_for_warnings(config_dict)
        if warnings:
            emit_warnings(warnings)

        try:
            app_config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigurationError(
                "Configuration validation failed",
                errors=format_validation_errors(e),
                source=str(config_file),
                suggestions=[
                    "Review config.example.yaml for correct format",
                    "Months must be 01-12 and years four digits",
                ],
            ) from e

        if app_config.search_criteria is not None:
            criteria_warnings = check_criteria_warnings(app_config.search_criteria)
            if criteria_warnings:
                emit_warnings(criteria_warnings)

    env_config = load_environment_config()
    return app_config, env_config


def build_criteria(values: Dict[str, Any]) -> SearchCriteria:
    """
    Build SearchCriteria from loosely typed command-line values.

    Args:
        values: Field values; None entries are treated as absent

    Returns:
        Validated SearchCriteria

    Raises:
        ConfigurationError: If any field is invalid
    """
    present = {key: value for key, value in values.items() if value is not None}
    try:
        criteria = SearchCriteria.model_validate(present)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid search criteria",
            errors=format_validation_errors(e),
            source="command line",
            suggestions=[
                "Use zero-padded months such as 09",
                "Use a four-digit year such as 2025",
            ],
        ) from e

    criteria_warnings = check_criteria_warnings(criteria)
    if criteria_warnings:
        emit_warnings(criteria_warnings)
    return criteria


def format_validation_errors(error: ValidationError) -> List[str]:
    """
    Convert Pydantic validation errors to user-friendly messages.

    Args:
        error: Pydantic ValidationError

    Returns:
        One message per failing field
    """
    errors = []
    for item in error.errors():
        field_path = " -> ".join(str(loc) for loc in item["loc"])
        error_type = item["type"]

        if error_type == "missing":
            errors.append(f"Missing required field: {field_path}")
        elif error_type in ["string_type", "int_type", "bool_type", "list_type"]:
            expected_type = error_type.replace("_type", "")
            errors.append(
                f"Invalid type for '{field_path}': expected {expected_type}, got {item.get('input')}"
            )
        elif "enum" in error_type:
            errors.append(f"Invalid value for '{field_path}': {item['msg']}")
        else:
            errors.append(f"{field_path}: {item['msg']}")
    return errors


def _read_yaml(config_file: Path) -> Any:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
                "Quote month values such as \"09\"",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
        ) from e


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find configuration file using fallback logic.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to configuration file, or None to use built-in defaults

    Raises:
        ConfigurationError: If an explicit config_path does not exist
    """
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Omit --config to use config.yaml or built-in defaults",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_CANDIDATES:
        if candidate.exists():
            return candidate

    return None
