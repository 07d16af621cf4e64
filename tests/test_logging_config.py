"""
Unit Tests — Logging Config
===========================
"""
import logging

import pytest

from rubocop_mcp.utils.logging_config import ColoredFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:

    def test_console_only_without_log_dir(self, restore_root_logger):
        setup_logging(level=logging.DEBUG)
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, ColoredFormatter)

    def test_file_handler_with_log_dir(self, restore_root_logger, tmp_path):
        setup_logging(level=logging.INFO, log_dir=str(tmp_path / "logs"))
        assert any(isinstance(h, logging.FileHandler) for h in restore_root_logger.handlers)
        assert (tmp_path / "logs").is_dir()

    def test_project_and_sdk_loggers_configured(self, restore_root_logger):
        setup_logging(level=logging.WARNING)
        assert logging.getLogger("rubocop_mcp").level == logging.WARNING
        assert logging.getLogger("mcp").level == logging.WARNING

    def test_no_stray_main_logger_configured(self, restore_root_logger):
        logging.getLogger("main").setLevel(logging.NOTSET)
        setup_logging(level=logging.ERROR)
        assert logging.getLogger("main").level == logging.NOTSET
