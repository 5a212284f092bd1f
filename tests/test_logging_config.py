"""Tests for logging setup."""

import logging

import pytest

from filecache.lib.logging_config import get_log_level_from_env, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    assert get_log_level_from_env() == logging.DEBUG


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'chatty')
    assert get_log_level_from_env() == logging.INFO


def test_setup_logging_force_replaces_handlers(monkeypatch, root_logger):
    monkeypatch.setenv('LOG_LEVEL', 'WARNING')
    root_logger.addHandler(logging.NullHandler())

    setup_logging(force=True)

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)
    assert root_logger.level == logging.WARNING
