"""
Tests for the logging helpers used by the command-line tools.
"""
import logging
import sys
from datetime import datetime, timedelta
from unittest.mock import MagicMock, patch

import pytest

from graphdl.logging_config import ProgressLogger, log_with_context, setup_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved = root.handlers[:]
    saved_level = root.level
    for handler in saved:
        root.removeHandler(handler)
    yield root
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    for handler in saved:
        root.addHandler(handler)
    root.setLevel(saved_level)


class TestProgressLogger:

    def test_defaults(self):
        progress = ProgressLogger(total=40, desc="Parsing statements")

        assert progress.current == 0
        assert progress.last_log_percent == -1
        assert progress.desc == "Parsing statements"

    def test_logs_every_ten_percent(self):
        log = MagicMock()
        progress = ProgressLogger(total=200, logger=log)

        for _ in range(15):
            progress.update()
        assert log.info.call_count == 0  # 7%

        for _ in range(10):
            progress.update()
        assert log.info.call_count == 1  # 12%

        progress.update(30)
        assert log.info.call_count == 2  # 27%

    def test_item_description_forces_a_line(self):
        log = MagicMock()
        progress = ProgressLogger(total=100, logger=log)

        progress.update(1, item_desc="Prepare or present reports")

        assert "Prepare or present reports" in log.info.call_args[0][0]

    def test_message_format_and_eta(self):
        log = MagicMock()
        progress = ProgressLogger(total=10, desc="Batch", logger=log)
        progress.start_time = datetime.now() - timedelta(seconds=4)

        progress.update(4)

        message = log.info.call_args[0][0]
        assert message.startswith("Batch: 4/10 (40%)")
        assert "ETA:" in message

    def test_no_eta_at_end(self):
        log = MagicMock()
        progress = ProgressLogger(total=3, logger=log)

        progress.update(3)

        assert "ETA:" not in log.info.call_args[0][0]

    def test_empty_batch(self):
        log = MagicMock()
        progress = ProgressLogger(total=0, logger=log)

        progress.update(1, item_desc="only line")

        assert "(0%)" in log.info.call_args[0][0]

    def test_close_completes(self):
        log = MagicMock()
        progress = ProgressLogger(total=50, logger=log)
        progress.update(20)

        progress.close()

        assert progress.current == 50
        assert "50/50" in log.info.call_args[0][0]

    def test_close_after_completion_is_silent(self):
        log = MagicMock()
        progress = ProgressLogger(total=5, logger=log)
        progress.update(5)
        before = log.info.call_count

        progress.close()

        assert log.info.call_count == before


class TestSetupLogging:

    def test_console_only(self, clean_root_logger):
        setup_logging(log_file=None)

        assert len(clean_root_logger.handlers) == 1
        handler = clean_root_logger.handlers[0]
        assert not isinstance(handler, logging.FileHandler)
        assert handler.stream is sys.stderr

    def test_file_and_console(self, clean_root_logger, tmp_path):
        log_file = tmp_path / "graphdl.log"

        setup_logging(log_file=str(log_file))

        file_handlers = [h for h in clean_root_logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert len(clean_root_logger.handlers) == 2

    def test_default_level_is_info(self, clean_root_logger):
        setup_logging(log_file=None)

        assert clean_root_logger.level == logging.INFO

    def test_explicit_level(self, clean_root_logger):
        setup_logging(log_file=None, level=logging.WARNING)

        assert clean_root_logger.level == logging.WARNING
        assert clean_root_logger.handlers[0].level == logging.WARNING

    def test_debug_overrides_level_and_format(self, clean_root_logger):
        setup_logging(log_file=None, level=logging.WARNING, debug=True)

        assert clean_root_logger.level == logging.DEBUG
        fmt = clean_root_logger.handlers[0].formatter._fmt
        assert "%(filename)s" in fmt
        assert "%(lineno)d" in fmt

    def test_normal_format(self, clean_root_logger):
        setup_logging(log_file=None)

        assert "%(lineno)d" not in clean_root_logger.handlers[0].formatter._fmt

    def test_run_separator_written(self, clean_root_logger, tmp_path):
        log_file = tmp_path / "graphdl.log"

        setup_logging(log_file=str(log_file))
        for handler in clean_root_logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "=" * 80 in content
        assert "NEW RUN STARTED" in content

    def test_replaces_existing_handlers(self, clean_root_logger):
        clean_root_logger.addHandler(logging.StreamHandler())
        clean_root_logger.addHandler(logging.StreamHandler())

        setup_logging(log_file=None)

        assert len(clean_root_logger.handlers) == 1


class TestLogWithContext:

    @patch('graphdl.logging_config.logging.getLogger')
    def test_main_message(self, mock_get_logger):
        log = MagicMock()
        mock_get_logger.return_value = log

        log_with_context("Parsed 3 statements", level=logging.INFO)

        log.log.assert_called_once_with(logging.INFO, "Parsed 3 statements")

    @patch('graphdl.logging_config.logging.getLogger')
    def test_context_at_debug(self, mock_get_logger):
        log = MagicMock()
        log.isEnabledFor.return_value = True
        mock_get_logger.return_value = log

        log_with_context("Parsed", context={"file": "tasks.txt", "leaves": 12})

        lines = [c[0][0] for c in log.debug.call_args_list]
        assert any("file: tasks.txt" in line for line in lines)
        assert any("leaves: 12" in line for line in lines)

    @patch('graphdl.logging_config.logging.getLogger')
    def test_context_skipped_without_debug(self, mock_get_logger):
        log = MagicMock()
        log.isEnabledFor.return_value = False
        mock_get_logger.return_value = log

        log_with_context("Parsed", context={"file": "tasks.txt"}, level=logging.INFO)

        assert log.debug.call_count == 0

    @patch('graphdl.logging_config.logging.getLogger')
    def test_long_values_truncated(self, mock_get_logger):
        log = MagicMock()
        log.isEnabledFor.return_value = True
        mock_get_logger.return_value = log

        log_with_context("Parsed", context={"unknown": "w" * 500})

        line = log.debug.call_args[0][0]
        assert line.endswith("...")
        assert len(line) < 250
