import logging

import pytest

from main import parse_args
from starfall.logger import get_logger, parse_log_level, setup_logger


@pytest.fixture
def restore_logging():
    yield
    setup_logger()


def test_setup_logger_writes_to_the_log_directory(tmp_path, restore_logging):
    setup_logger(logging.DEBUG, log_dir=str(tmp_path))

    get_logger("starfall.test").debug("hello from the tests")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert len(logging.getLogger().handlers) == 2
    assert "hello from the tests" in (tmp_path / "application.log").read_text()


def test_setup_logger_does_not_duplicate_handlers(tmp_path, restore_logging):
    setup_logger(log_dir=str(tmp_path))
    setup_logger(log_dir=str(tmp_path))

    assert len(logging.getLogger().handlers) == 2


@pytest.mark.parametrize(
    "name, level",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (" Error ", logging.ERROR)],
)
def test_parse_log_level(name, level):
    assert parse_log_level(name) == level


def test_parse_log_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        parse_log_level("verbose")


def test_setup_logger_without_console(tmp_path, restore_logging):
    log_path = setup_logger(logging.INFO, log_dir=str(tmp_path), console=False)

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.FileHandler)
    assert log_path == str(tmp_path / "application.log")


def test_cli_log_level_is_parsed():
    assert parse_args(["--log-level", "debug"]).log_level == logging.DEBUG
    assert parse_args([]).log_level is None
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "loud"])
