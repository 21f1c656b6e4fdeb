"""Test configuration for pytest."""

import logging
import os
from pathlib import Path

import pytest

from bitlayout import config


RECORD_FIXTURES = Path(__file__).parent / "fixtures" / "records"


@pytest.fixture(autouse=True)
def configure_test_logging(monkeypatch):
    """Keep logging quiet and settings deterministic for every test."""
    os.environ['BITLAYOUT_LOG_LEVEL'] = 'WARNING'
    logging.getLogger().setLevel(logging.WARNING)

    # Validation warns on every rejection; tests reject on purpose
    for logger_name in ['bitlayout.validation.entry', 'bitlayout.output.report']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)

    monkeypatch.delenv('BITLAYOUT_BACKEND', raising=False)
    monkeypatch.delenv('BITLAYOUT_CUSTOM_MESSAGE', raising=False)
    monkeypatch.delenv('BITLAYOUT_REPORT_DIR', raising=False)
    monkeypatch.setattr(config, "_active", None)


@pytest.fixture
def record_fixtures() -> Path:
    return RECORD_FIXTURES
