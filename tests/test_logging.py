import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from gamesanpi_feed.utils.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_stderr_output_keeps_stdout_clean():
    configure_logging(level="DEBUG", output="stderr", log_format="text")
    (handler,) = logging.getLogger().handlers

    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert logging.getLogger().level == logging.DEBUG


def test_both_writes_stderr_and_file(tmp_path):
    log_file = tmp_path / "logs" / "feed.log"
    configure_logging(level="INFO", output="both", file_path=str(log_file), log_format="json")
    handlers = logging.getLogger().handlers

    assert len(handlers) == 2
    assert any(isinstance(h, RotatingFileHandler) for h in handlers)
    get_logger("gsf.test").info("hello")
    for h in handlers:
        h.flush()
    assert '"message": "hello"' in log_file.read_text(encoding="utf-8")


def test_env_level_is_used_when_not_given(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    configure_logging(output="stderr")
    assert logging.getLogger().level == logging.WARNING
