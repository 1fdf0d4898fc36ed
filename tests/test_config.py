"""Tests for Config and logging level handling."""

import json
import logging

from collection_driver import Config, set_log_level
from collection_driver.logging_config import logger


def test_missing_file_uses_defaults(tmp_path):
    config = Config.initialize(str(tmp_path / "nope.json"))

    assert config == Config.defaults()
    assert Config.get_db_params() == ("mongodb://localhost:27017", "default_db")


def test_empty_path_uses_defaults():
    Config.initialize("")

    assert Config.get("log_level") == "info"


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"db_uri": "mongodb://db:27017", "db_name": "charts"}))

    Config.initialize(str(path))

    assert Config.get_db_params() == ("mongodb://db:27017", "charts")
    assert Config.get("log_level") == "info"
    assert Config.get("missing", 42) == 42


def test_get_db_params_before_initialize():
    assert Config.get_db_params() == ("mongodb://localhost:27017", "default_db")


def test_set_log_level():
    original = logger.level
    try:
        set_log_level("debug")
        assert logger.level == logging.DEBUG

        set_log_level("bogus")
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(original)


def test_initialize_applies_log_level(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "debug"}))

    Config.initialize(str(path))

    assert logger.level == logging.DEBUG


def test_initialize_defaults_to_info_level(tmp_path):
    logger.setLevel(logging.ERROR)

    Config.initialize(str(tmp_path / "nope.json"))

    assert logger.level == logging.INFO


def test_set_log_level_none_keeps_level():
    logger.setLevel(logging.WARNING)

    set_log_level(None)

    assert logger.level == logging.WARNING


def test_package_logger_has_no_output_handlers():
    assert all(isinstance(handler, logging.NullHandler) for handler in logger.handlers)
