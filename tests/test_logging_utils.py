"""로깅 설정 테스트"""

import logging
import sys
from pathlib import Path

import pytest
from rich.logging import RichHandler

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from binop.logging_utils import PACKAGE_LOGGER, configure_logging


@pytest.fixture
def restore_loggers():
    root_logger = logging.getLogger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = [
        (logger, logger.level, list(logger.handlers), logger.propagate)
        for logger in (root_logger, package_logger)
    ]
    yield package_logger
    for logger, level, handlers, propagate in saved:
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


def _rich_handlers(logger: logging.Logger) -> list[RichHandler]:
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


def test_configure_logging_sets_package_level(restore_loggers):
    logger = configure_logging("debug")

    assert logger is restore_loggers
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert _rich_handlers(logger)[0].level == logging.DEBUG


def test_configure_logging_leaves_root_logger_alone(restore_loggers):
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    handlers = list(root_logger.handlers)

    configure_logging("ERROR")

    assert root_logger.level == logging.DEBUG
    assert root_logger.handlers == handlers


def test_configure_logging_does_not_duplicate_handlers(restore_loggers):
    configure_logging("INFO")
    configure_logging("ERROR")

    handlers = _rich_handlers(restore_loggers)
    assert len(handlers) == 1
    assert handlers[0].level == logging.ERROR


def test_configure_logging_unknown_level_falls_back(restore_loggers):
    assert configure_logging("LOUD").level == logging.WARNING


def test_configure_logging_writes_to_stderr(restore_loggers, capsys):
    configure_logging("INFO")
    logging.getLogger("binop.driver").info("hello from logger")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hello from logger" in captured.err
