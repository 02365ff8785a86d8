"""Tests for logging setup."""

import logging

import pytest
from candle.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave the candle logger as we found it."""
    yield
    logger = logging.getLogger("candle")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_logs_to_stderr(self, capsys):
        """Test that records go to stderr and never stdout."""
        logger = setup_logging("DEBUG", force=True)
        logging.getLogger("candle.parsing").debug("hello")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "candle: DEBUG candle.parsing: hello" in captured.err
        assert logger.propagate is False

    def test_level(self, capsys):
        """Test that records below the level are dropped."""
        setup_logging("ERROR", force=True)
        logging.getLogger("candle").warning("quiet")

        assert capsys.readouterr().err == ""

    def test_unknown_level_means_warning(self):
        """Test the fallback level."""
        assert setup_logging("LOUD", force=True).level == logging.WARNING

    def test_log_file(self, tmp_path):
        """Test the optional file handler."""
        path = tmp_path / "candle.log"
        setup_logging("INFO", log_file=str(path), force=True)
        logging.getLogger("candle").info("to file")

        for handler in logging.getLogger("candle").handlers:
            handler.flush()
        assert "to file" in path.read_text()

    def test_handlers_kept_without_force(self):
        """Test that a second call doesn't stack handlers."""
        setup_logging(force=True)
        logger = setup_logging()

        assert len(logger.handlers) == 1
