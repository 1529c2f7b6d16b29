"""Notice catalog loading from YAML or JSON files.

A catalog document is either a list of notice records or a mapping with a
``notices`` list. JSON is a subset of YAML, so both are read with PyYAML.
"""

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

import yaml
from pydantic import ValidationError

from bidwatch.domain.models import Notice
from bidwatch.logging import get_logger

from .exceptions import CatalogFileError, CatalogValidationError
from .samples import SAMPLE_NOTICES

logger = get_logger(__name__, component="catalog")


def load_notices(path: Path) -> List[Notice]:
    """
    Load and validate notices from a catalog file.

    Args:
        path: YAML or JSON catalog file

    Returns:
        Notices in file order

    Raises:
        CatalogFileError: If the file is missing, unreadable or unparsable
        CatalogValidationError: If any record is invalid or ids repeat
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise CatalogFileError(f"Notice catalog not found: {path}", str(path)) from e
    except yaml.YAMLError as e:
        raise CatalogFileError(f"Failed to parse notice catalog {path}: {e}", str(path)) from e
    except OSError as e:
        raise CatalogFileError(f"Failed to read notice catalog {path}: {e}", str(path)) from e

    records = _extract_records(document, path)
    notices = parse_notices(records)

    logger.info(
        f"Loaded {len(notices)} notices from {path}",
        extra={
            "event": "catalog.loaded",
            "path": str(path),
            "notice_count": len(notices),
        },
    )
    return notices


def parse_notices(records: Iterable[Mapping[str, Any]]) -> List[Notice]:
    """
    Validate raw records into notices.

    All records are checked before raising, so every problem is reported at
    once.

    Args:
        records: Raw notice mappings

    Returns:
        Validated notices in input order

    Raises:
        CatalogValidationError: If any record is invalid or ids repeat
    """
    notices: List[Notice] = []
    errors: List[str] = []
    seen_ids = set()

    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            errors.append(f"record {index}: expected a mapping, got {type(record).__name__}")
            continue
        try:
            notice = Notice.model_validate(dict(record))
        except ValidationError as e:
            for item in e.errors():
                field_path = ".".join(str(loc) for loc in item["loc"]) or "record"
                errors.append(f"record {index} ({record.get('id', '?')}): {field_path}: {item['msg']}")
            continue

        if notice.id in seen_ids:
            errors.append(f"record {index}: duplicate notice id '{notice.id}'")
            continue
        seen_ids.add(notice.id)
        notices.append(notice)

    if errors:
        raise CatalogValidationError("Notice catalog validation failed", errors=errors)

    return notices


def resolve_notices(path: Optional[Path]) -> List[Notice]:
    """
    Load notices from path, or return the bundled samples when path is None.

    Args:
        path: Optional catalog file

    Returns:
        Notice collection
    """
    if path is None:
        logger.info(
            "No notice catalog configured, using bundled samples",
            extra={"event": "catalog.samples_used", "notice_count": len(SAMPLE_NOTICES)},
        )
        return list(SAMPLE_NOTICES)
    return load_notices(path)


def _extract_records(document: Any, path: Path) -> List[Any]:
    if document is None:
        return []
    if isinstance(document, Mapping):
        document = document.get("notices")
        if document is None:
            raise CatalogFileError(
                f"Notice catalog {path} is a mapping without a 'notices' list", str(path)
            )
    if not isinstance(document, list):
        raise CatalogFileError(
            f"Notice catalog {path} must contain a list of notices", str(path)
        )
    return document
