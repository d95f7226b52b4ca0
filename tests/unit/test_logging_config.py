"""
Tests for the logging setup.
"""
import logging

import pytest

from paintestimator.logging_config import LOGGER_NAMESPACE, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAMESPACE)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    def test_console_handler(self, restore_logger):
        logger = setup_logging(level=logging.DEBUG)
        assert logger is restore_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeated_setup_does_not_duplicate(self, restore_logger):
        setup_logging()
        setup_logging()
        assert len(restore_logger.handlers) == 1

    def test_file_handler(self, restore_logger, tmp_path):
        log_file = tmp_path / "estimator.log"
        logger = setup_logging(log_file=str(log_file))
        assert len(logger.handlers) == 2
        logging.getLogger("paintestimator.model.state").info("hello from state")
        for h in logger.handlers:
            h.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in content
        assert "paintestimator.model.state - INFO - hello from state" in content
