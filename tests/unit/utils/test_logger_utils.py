import logging

import pytest

from utils.logger_utils import LOG_FORMAT, NOISY_LOGGERS, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    noisy_levels = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, noisy_level in noisy_levels.items():
        logging.getLogger(name).setLevel(noisy_level)


def test_configure_logging_accepts_level_names(tmp_path):
    log_file = tmp_path / "tools.log"
    configure_logging(str(log_file), "debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert root.handlers[0].formatter._fmt == LOG_FORMAT

    get_logger("Test Logger").debug("hello")
    for handler in root.handlers:
        handler.flush()
    assert "Test Logger - [DEBUG] - hello" in log_file.read_text()


def test_configure_logging_replaces_handlers():
    configure_logging()
    configure_logging()
    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(log_level="chatty")
