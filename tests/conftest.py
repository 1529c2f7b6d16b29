"""Shared fixtures for Bid Watch tests."""

import logging
from pathlib import Path

import pytest

from bidwatch.catalog.samples import SAMPLE_NOTICES
from bidwatch.domain.models import Notice
from bidwatch.logging.config import JSONFormatter, KeyValueFormatter
from bidwatch.logging.context import clear_log_context

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding YAML/JSON fixture files."""
    return FIXTURES_DIR


@pytest.fixture
def sample_notices():
    """The three bundled sample notices (two open, one closed)."""
    return list(SAMPLE_NOTICES)


@pytest.fixture
def make_notice():
    """Factory for notices with overridable fields."""

    def _make(**overrides):
        data = {
            "id": "T-001",
            "title": "庁舎清掃業務",
            "agency": "横浜市",
            "region": "神奈川県",
            "classification": "役務",
            "grades": ["B", "C"],
            "published_date": "2025-09-10",
            "deadline": "2025-09-30 17:00",
            "status": "open",
            "budget_range": "100万〜200万円",
        }
        data.update(overrides)
        return Notice.model_validate(data)

    return _make


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Bid Watch environment variables for the test."""
    for name in ("LOG_LEVEL", "BIDWATCH_NOTICES_PATH", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Drop handlers installed by configure_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield root_logger

    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, (JSONFormatter, KeyValueFormatter)):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
