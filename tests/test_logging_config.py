import logging

import config

from server.utils.logging_config import LOGGER_NAME, setup_logging


def test_setup_is_idempotent():
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert first.name == LOGGER_NAME
    assert len(first.handlers) == 1


def test_explicit_level():
    logger = setup_logging(logging.DEBUG)
    assert logger.level == logging.DEBUG
    setup_logging(logging.INFO)


def test_unknown_configured_level_falls_back_to_info(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "NOPE")
    assert setup_logging().level == logging.INFO


def test_configured_level_is_used(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")
    assert setup_logging().level == logging.WARNING
    monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
    setup_logging()
