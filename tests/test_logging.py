import logging

import pytest

from bitlayout.logging import PACKAGE_LOGGER, get_logger


@pytest.fixture
def fresh_package_logger():
    """Detach the package handler so the next get_logger call configures it again."""
    package = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers, saved_level = list(package.handlers), package.level
    package.handlers.clear()
    package.setLevel(logging.NOTSET)
    yield package
    package.handlers[:] = saved_handlers
    package.setLevel(saved_level)


class TestGetLogger:
    def test_single_handler_on_package_logger(self, fresh_package_logger):
        first = get_logger("bitlayout.tests.first")
        second = get_logger("bitlayout.tests.second")

        assert len(fresh_package_logger.handlers) == 1
        assert first.handlers == []
        assert second.handlers == []
        assert get_logger("bitlayout.tests.first") is first

    def test_package_logger_itself(self, fresh_package_logger):
        assert get_logger(PACKAGE_LOGGER) is fresh_package_logger

    def test_level_from_environment(self, fresh_package_logger, monkeypatch):
        monkeypatch.setenv("BITLAYOUT_LOG_LEVEL", "debug")
        assert get_logger("bitlayout.tests.env_level").getEffectiveLevel() == logging.DEBUG

    def test_cli_defaults_to_info(self, fresh_package_logger, monkeypatch):
        monkeypatch.delenv("BITLAYOUT_LOG_LEVEL", raising=False)
        assert get_logger("bitlayout.tests.cli").level == logging.INFO
        assert get_logger("bitlayout.tests.library").getEffectiveLevel() == logging.WARNING

    def test_invalid_level_falls_back(self, fresh_package_logger, monkeypatch):
        monkeypatch.setenv("BITLAYOUT_LOG_LEVEL", "chatty")
        assert get_logger("bitlayout.tests.invalid").getEffectiveLevel() == logging.WARNING

    def test_package_level_silences_children(self, fresh_package_logger):
        child = get_logger("bitlayout.tests.quiet")
        fresh_package_logger.setLevel(logging.CRITICAL)
        assert not child.isEnabledFor(logging.ERROR)
