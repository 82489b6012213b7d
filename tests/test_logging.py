import logging

import pytest

from filedemo.common.errors import ConfigurationError
from filedemo.common.logging import RequestIdFilter, resolve_level, setup_logging
from filedemo.common.request_id import reset_request_id, set_request_id
from filedemo.infra.config import Settings
from filedemo.main import create_app


@pytest.mark.parametrize("level, expected", [("info", logging.INFO), (" DEBUG ", logging.DEBUG), (30, 30)])
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_unknown_level_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        resolve_level("LOUD")


def test_create_app_aborts_on_unknown_log_level(data_dir):
    with pytest.raises(ConfigurationError):
        create_app(Settings(FILES_DIR=str(data_dir), LOG_LEVEL="chatty"))


def test_setup_logging_adds_filter_once():
    setup_logging("INFO")
    setup_logging("INFO")
    for handler in logging.getLogger().handlers:
        filters = [f for f in handler.filters if isinstance(f, RequestIdFilter)]
        assert len(filters) == 1


def test_setup_logging_quiets_uvicorn_access():
    setup_logging("DEBUG")
    try:
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
    finally:
        setup_logging("INFO")


def test_filter_stamps_current_request_id():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    token = set_request_id("rid-42")
    try:
        RequestIdFilter().filter(record)
    finally:
        reset_request_id(token)
    assert record.request_id == "rid-42"
