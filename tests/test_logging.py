"""Tests for structlog configuration."""
import logging

import pytest
import structlog

from src.common import constants
from src.common.logging import configure_structlog


def test_configure_installs_console_pipeline():
    configure_structlog()
    config = structlog.get_config()
    processors = config["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert structlog.processors.add_log_level in processors
    assert config["cache_logger_on_first_use"] is True


def test_level_filters_lower_events(capsys):
    configure_structlog("WARNING")
    logger = structlog.get_logger("probe")
    logger.info("hidden_event")
    logger.warning("shown_event")
    out = capsys.readouterr().out
    assert "shown_event" in out
    assert "hidden_event" not in out


def test_numeric_level_accepted(capsys):
    configure_structlog(logging.DEBUG)
    structlog.get_logger("probe").debug("debug_event")
    assert "debug_event" in capsys.readouterr().out


def test_default_level_comes_from_constants(monkeypatch, capsys):
    monkeypatch.setattr("src.common.logging.LOG_LEVEL", "ERROR")
    configure_structlog()
    logger = structlog.get_logger("probe")
    logger.warning("quiet_event")
    logger.error("loud_event")
    out = capsys.readouterr().out
    assert "loud_event" in out
    assert "quiet_event" not in out


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="unknown log level"):
        configure_structlog("CHATTY")


def test_log_level_constant_is_upper_case():
    assert constants.LOG_LEVEL == constants.LOG_LEVEL.upper()
