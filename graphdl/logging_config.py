import logging
import sys
from datetime import datetime


class ProgressLogger:
    """
    A logger that shows progress information in both console and log file.
    Used by batch parsing, where a progress bar would garble piped output.
    """
    def __init__(self, total, desc="Progress", logger=None):
        self.total = total
        self.current = 0
        self.desc = desc
        self.logger = logger or logging.getLogger()
        self.start_time = datetime.now()
        self.last_log_percent = -1

    def update(self, n=1, item_desc=None):
        """Update progress by n items."""
        self.current += n
        percent = int((self.current / self.total) * 100) if self.total > 0 else 0

        # Log every 10% or when an item description is given
        if percent - self.last_log_percent >= 10 or item_desc or self.current == self.total:
            elapsed = (datetime.now() - self.start_time).total_seconds()
            rate = self.current / elapsed if elapsed > 0 else 0
            eta_seconds = (self.total - self.current) / rate if rate > 0 else 0

            msg_parts = [f"{self.desc}: {self.current}/{self.total} ({percent}%)"]
            if item_desc:
                msg_parts.append(f"- {item_desc}")
            if eta_seconds > 0 and self.current < self.total:
                msg_parts.append(f"[ETA: {int(eta_seconds)}s]")

            self.logger.info(" ".join(msg_parts))
            self.last_log_percent = percent

    def close(self):
        """Mark progress as complete."""
        if self.current < self.total:
            self.current = self.total
            self.update(0)


def setup_logging(log_file='graphdl.log', level=logging.INFO, debug=False):
    """
    Set up logging for the parser and its command-line tools.

    Args:
        log_file: Path to the log file. Defaults to 'graphdl.log'. None logs to console only.
        level: Logging level (default: INFO). Use DEBUG for rule-by-rule traces.
        debug: If True, enables DEBUG level with file/line context.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'

    handlers = []
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        handlers.append(file_handler)

    # stderr keeps stdout clean for parse output
    console_handler = logging.StreamHandler(sys.stderr)
    handlers.append(console_handler)

    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(handler)

    # Add run separator
    logging.info("=" * 80)
    logging.info(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    if debug:
        logging.info("DEBUG MODE ENABLED - Verbose logging active")
    logging.info("=" * 80)


def log_with_context(message, context=None, level=logging.DEBUG):
    """
    Log a message with additional context (inputs, state, etc.).

    Args:
        message: Main log message
        context: Dict of contextual information
        level: Log level (default: DEBUG)
    """
    logger = logging.getLogger()
    logger.log(level, message)

    if context and logger.isEnabledFor(logging.DEBUG):
        for key, value in context.items():
            # Truncate long values
            str_value = str(value)
            if len(str_value) > 200:
                str_value = str_value[:200] + "..."
            logger.debug(f"  └─ {key}: {str_value}")
