"""
Тесты для logging_setup — конфигурация логгера пакета
"""

import logging

import pytest

from fractalcomplex.util.logging_setup import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Восстановление состояния логгера fractalcomplex после теста."""
    logger = logging.getLogger("fractalcomplex")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    yield
    for h in list(logger.handlers):
        logger.removeHandler(h)
        if h not in saved_handlers:
            h.close()
    for h in saved_handlers:
        logger.addHandler(h)
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate


class TestGetLogger:
    def test_package_logger(self):
        assert get_logger().name == "fractalcomplex"

    def test_child_logger(self):
        assert get_logger("contracts").name == "fractalcomplex.contracts"
        assert get_logger("contracts").parent is get_logger()


class TestConfigureLogging:
    def test_console_handler(self):
        logger = configure_logging(level=logging.WARNING)
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_reconfigure_replaces_handlers(self):
        configure_logging()
        logger = configure_logging()
        assert len(logger.handlers) == 1

    def test_no_handlers(self):
        logger = configure_logging(console=False)
        assert logger.handlers == []

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "fractal.log"
        logger = configure_logging(level=logging.DEBUG, console=False, log_file=str(log_file))
        get_logger("contracts").debug("schema %s loaded", "complex_value")
        for h in logger.handlers:
            h.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "DEBUG fractalcomplex.contracts - schema complex_value loaded" in text
