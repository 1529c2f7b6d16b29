"""Command-line entry point for Bid Watch."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from bidwatch.catalog import CatalogError, resolve_notices
from bidwatch.config.environment import EnvironmentConfig
from bidwatch.config.exceptions import ConfigurationError
from bidwatch.config.loader import build_criteria, load_config
from bidwatch.config.models import (
    AppConfig,
    IncludeMode,
    SearchCriteria,
    StatusFilter,
    TitleMatchMode,
)
from bidwatch.domain.constants import CLASSIFICATIONS, GRADES
from bidwatch.logging import get_logger
from bidwatch.logging.config import configure_logging
from bidwatch.matching.utils import build_notice_payload, build_rationale_dict
from bidwatch.pipeline import SearchPipeline, SearchRunResult
from bidwatch.rendering import RenderError, ResultRenderer

logger = get_logger(__name__, component="cli")

# CLI dest -> SearchCriteria field
CRITERIA_ARGS = {
    "region": "region",
    "agency": "agency",
    "title": "title",
    "title_match": "title_match_mode",
    "include": "include_keywords",
    "include_mode": "include_mode",
    "exclude": "exclude_keywords",
    "classification": "classification",
    "grade": "grades",
    "year": "year",
    "month_from": "month_from",
    "month_to": "month_to",
    "status": "status",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bidwatch",
        description="Bid Watch - search public procurement notices by multiple criteria",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to configuration file")
    parser.add_argument("--notices", type=Path, default=None, help="Notice catalog (YAML or JSON)")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument("--explain", action="store_true", help="Show why each notice matched or not")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Reset the search form and list every notice",
    )

    search = parser.add_argument_group("search criteria")
    search.add_argument("--region", help="Prefecture (nationwide notices always match)")
    search.add_argument("--agency", help="Substring of the ordering agency name")
    search.add_argument("--title", help="Title text")
    search.add_argument(
        "--title-match", choices=[mode.value for mode in TitleMatchMode], help="Title comparison"
    )
    search.add_argument("--include", help="Space-separated keywords to include")
    search.add_argument(
        "--include-mode",
        choices=[mode.value for mode in IncludeMode],
        help="How include keywords combine",
    )
    search.add_argument("--exclude", help="Space-separated keywords to exclude")
    search.add_argument("--classification", help=f"Classification ({', '.join(CLASSIFICATIONS)})")
    search.add_argument(
        "--grade", action="append", choices=list(GRADES), help="Grade to select (repeatable)"
    )
    search.add_argument("--year", help="Publication year (YYYY)")
    search.add_argument("--month-from", help="Earliest publication month (01-12)")
    search.add_argument("--month-to", help="Latest publication month (01-12)")
    search.add_argument(
        "--status", choices=[status.value for status in StatusFilter], help="Bid status"
    )
    return parser


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log level.

    Log level priority: CLI > environment > config file.

    Args:
        config_path: Path to configuration file (None for lookup/defaults)
        log_level_override: Log level from CLI

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif env_config.log_level:
        pass
    else:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def resolve_notices_path(
    cli_path: Optional[Path], app_config: AppConfig, env_config: EnvironmentConfig
) -> Optional[Path]:
    """Pick the catalog file: CLI > environment > config file > bundled samples."""
    if cli_path:
        return cli_path
    if env_config.notices_path:
        return Path(env_config.notices_path)
    if app_config.notices_path:
        return Path(app_config.notices_path)
    return None


def criteria_from_args(args: argparse.Namespace, app_config: AppConfig) -> SearchCriteria:
    """
    Build the search criteria for this invocation.

    Filter flags take precedence; without any, the saved search from the
    config file is used, and without that every notice matches.

    Args:
        args: Parsed CLI arguments
        app_config: Loaded configuration

    Returns:
        SearchCriteria

    Raises:
        ConfigurationError: If a flag value is invalid
    """
    values: Dict[str, Any] = {
        field: getattr(args, dest)
        for dest, field in CRITERIA_ARGS.items()
        if getattr(args, dest) is not None
    }
    if values:
        return build_criteria(values)
    if app_config.search_criteria is not None:
        return app_config.search_criteria
    return SearchCriteria()


def format_json(result: SearchRunResult) -> str:
    """Serialize a search result for --format json."""
    payload = {
        "search_id": result.search_id,
        "cleared": result.cleared,
        "matched_count": result.matched_count,
        "total_count": result.total_notices,
        "criteria": result.criteria.model_dump(mode="json"),
        "notices": [build_notice_payload(notice) for notice in result.notices],
    }
    if result.explanations:
        payload["explanations"] = [build_rationale_dict(item) for item in result.explanations]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for Bid Watch.

    Returns:
        Exit code (0 for success, 1 for configuration or catalog errors).
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        notices_path = resolve_notices_path(args.notices, app_config, env_config)
        logger.info(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "config_path": str(args.config) if args.config else None,
                "notices_path": str(notices_path) if notices_path else None,
                "log_level": env_config.log_level,
            },
        )

        notices = resolve_notices(notices_path)
        pipeline = SearchPipeline(notices, defaults=app_config.defaults)

        if args.clear:
            result = pipeline.clear(explain=args.explain)
        else:
            criteria = criteria_from_args(args, app_config)
            result = pipeline.run(criteria, explain=args.explain)

        if args.format == "json":
            output = format_json(result)
        else:
            output = ResultRenderer().render(result)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except CatalogError as e:
        print(f"Catalog Error: {e}", file=sys.stderr)
        logger.error(
            f"Catalog error: {e}",
            extra={"event": "catalog.error", "error_type": type(e).__name__},
        )
        return 1
    except RenderError as e:
        print(f"Render Error: {e}", file=sys.stderr)
        return 1

    print(output.rstrip("\n"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
