"""Tests for configuration and logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from sge_acct.config import SgeAcctConfig
from sge_acct.log_config import PACKAGE_LOGGER, configure_logging


class TestSgeAcctConfig:
    """Tests for SgeAcctConfig.validate()."""

    def test_values_usable(self):
        """Loaded configuration passes validation."""
        SgeAcctConfig.validate()
        assert SgeAcctConfig.HEADER_LINES >= 0
        assert SgeAcctConfig.BLOCK_SIZE > 0

    def test_negative_header_lines(self, monkeypatch):
        monkeypatch.setattr(SgeAcctConfig, "HEADER_LINES", -1)
        with pytest.raises(EnvironmentError, match="SGE_ACCT_HEADER_LINES"):
            SgeAcctConfig.validate()

    def test_zero_block_size(self, monkeypatch):
        monkeypatch.setattr(SgeAcctConfig, "BLOCK_SIZE", 0)
        with pytest.raises(EnvironmentError, match="SGE_ACCT_BLOCK_SIZE"):
            SgeAcctConfig.validate()

    def test_all_problems_reported(self, monkeypatch):
        monkeypatch.setattr(SgeAcctConfig, "HEADER_LINES", -2)
        monkeypatch.setattr(SgeAcctConfig, "BLOCK_SIZE", -1)
        with pytest.raises(EnvironmentError) as excinfo:
            SgeAcctConfig.validate()
        assert "SGE_ACCT_HEADER_LINES" in str(excinfo.value)
        assert "SGE_ACCT_BLOCK_SIZE" in str(excinfo.value)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.fixture(autouse=True)
    def _restore_logger(self):
        logger = logging.getLogger(PACKAGE_LOGGER)
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers = handlers
        logger.setLevel(level)

    def test_verbose_sets_debug(self):
        logger = configure_logging(verbose=True)
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG

    def test_default_level_from_config(self, monkeypatch):
        monkeypatch.setattr(SgeAcctConfig, "LOG_LEVEL", "ERROR")
        logger = configure_logging()
        assert logger.level == logging.ERROR

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        monkeypatch.setattr(SgeAcctConfig, "LOG_LEVEL", "CHATTY")
        logger = configure_logging()
        assert logger.level == logging.WARNING

    def test_handlers_not_stacked(self):
        """Repeated setup keeps a single RichHandler."""
        configure_logging()
        logger = configure_logging(verbose=True)
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
