import logging
from logging.handlers import RotatingFileHandler

import pytest

from dictionary_api.app.core.logging_config import setup_logging


@pytest.fixture
def target(request):
    logger = logging.getLogger(f"setup-logging.{request.node.name}")
    access_level = logging.getLogger("uvicorn.access").level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logging.getLogger("uvicorn.access").setLevel(access_level)


def test_console_and_rotating_file_handlers(target, tmp_path):
    setup_logging("debug", str(tmp_path / "dictionary.log"), target=target)
    assert target.level == logging.DEBUG
    assert len(target.handlers) == 2
    assert any(isinstance(h, RotatingFileHandler) for h in target.handlers)
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_second_call_is_a_no_op(target):
    setup_logging("INFO", target=target)
    setup_logging("DEBUG", target=target)
    assert len(target.handlers) == 1
    assert target.level == logging.INFO


def test_debug_keeps_access_log_level(target):
    logging.getLogger("uvicorn.access").setLevel(logging.NOTSET)
    setup_logging("nonsense", debug=True, target=target)
    assert target.level == logging.INFO
    assert logging.getLogger("uvicorn.access").level == logging.NOTSET
