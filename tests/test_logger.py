import logging
import os
from unittest import mock

import pytest

from teamboard import logger as logsetup


@pytest.fixture(autouse=True)
def _restore_levels():
    root = logging.getLogger()
    cache = logging.getLogger(logsetup.CACHE_LOGGER)
    saved = (root.level, cache.level)
    yield
    root.setLevel(saved[0])
    cache.setLevel(saved[1])


def test_cache_logger_follows_root_by_default():
    with mock.patch.dict(os.environ, {"LOG_LEVEL": "warning"}, clear=True):
        logsetup.setup_logging()
    cache = logging.getLogger(logsetup.CACHE_LOGGER)
    assert logging.getLogger().level == logging.WARNING
    assert cache.level == logging.NOTSET
    assert not cache.isEnabledFor(logging.INFO)


def test_cache_log_level_overrides_root():
    env = {"LOG_LEVEL": "INFO", "CACHE_LOG_LEVEL": "debug"}
    with mock.patch.dict(os.environ, env, clear=True):
        logsetup.setup_logging()
    assert logging.getLogger(logsetup.CACHE_LOGGER).isEnabledFor(logging.DEBUG)
    assert not logging.getLogger("teamboard.api").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_falls_back():
    env = {"LOG_LEVEL": "chatty", "CACHE_LOG_LEVEL": "loud"}
    with mock.patch.dict(os.environ, env, clear=True):
        logsetup.setup_logging()
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger(logsetup.CACHE_LOGGER).level == logging.INFO


def test_cache_debug_records_reach_handlers(caplog):
    env = {"LOG_LEVEL": "INFO", "CACHE_LOG_LEVEL": "DEBUG"}
    with mock.patch.dict(os.environ, env, clear=True):
        logsetup.setup_logging()
    caplog.set_level(logging.DEBUG, logger=logsetup.CACHE_LOGGER)
    logging.getLogger(logsetup.CACHE_LOGGER).debug("Invalidated users cache")
    assert "Invalidated users cache" in caplog.text
