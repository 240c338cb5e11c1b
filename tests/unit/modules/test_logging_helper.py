"""Unit tests for the logging helper."""

import logging
import os
from unittest.mock import patch

import pytest

from todoapp.modules.logging_helper import LoggingHelper


def test_init_app_registers_extension(app):
    assert isinstance(app.extensions["logging_helper"], LoggingHelper)


def test_root_logger_has_single_handler_after_repeated_init(app):
    helper = app.extensions["logging_helper"]

    helper.init_app(app)
    helper.init_app(app)

    handlers = [h for h in logging.getLogger().handlers if h is helper._handler]
    assert len(handlers) == 1


def test_store_logger_is_not_silenced(app):
    logging.getLogger("todoapp.modules.list_store").setLevel(logging.NOTSET)
    logging.getLogger("some_library").setLevel(logging.NOTSET)

    app.extensions["logging_helper"]._configure_third_party_loggers(app)

    assert logging.getLogger("todoapp.modules.list_store").level == logging.NOTSET
    assert logging.getLogger("some_library").level == logging.WARNING


def test_env_var_sets_logger_level(app):
    with patch.dict(os.environ, {"HYPERCORN_LOG_LEVEL": "DEBUG"}):
        app.extensions["logging_helper"]._load_enabled_loggers(app)

    assert logging.getLogger("hypercorn").level == logging.DEBUG


def test_invalid_level_raises(app):
    with pytest.raises(ValueError):
        app.extensions["logging_helper"].set_logger_level(app, "todoapp", "LOUD")
