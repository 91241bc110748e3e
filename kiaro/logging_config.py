import logging
import sys
from datetime import datetime
from typing import Callable, Optional

DIAGNOSTIC_LOGGER_NAME = "kiaro"

# A sink receives (where, message) for every diagnostic the cipher emits.
DiagnosticSink = Callable[[str, str], None]


def setup_logging(log_file=None, level=logging.INFO, debug=False):
    """
    Set up logging for an application embedding the cipher.

    Args:
        log_file: Optional path to a log file. Console only when None.
        level: Logging level (default: INFO). Use DEBUG to see diagnostics.
        debug: If True, enables DEBUG level with extra context.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG

    if debug:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'

    handlers = []
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        handlers.append(file_handler)

    handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.info("=" * 80)
    logging.info(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    if debug:
        logging.info("DEBUG MODE ENABLED - cipher diagnostics active")
    logging.info("=" * 80)


def truncate_message(message: str, limit: int) -> str:
    """Cut a message to `limit` characters, marking the cut with '...'."""
    if limit >= 0 and len(message) > limit:
        return message[:limit] + "..."
    return message


def logging_sink(where: str, message: str) -> None:
    """Default diagnostic sink: DEBUG records on the 'kiaro' logger."""
    logging.getLogger(DIAGNOSTIC_LOGGER_NAME).debug(f"[KiaroCipher/{where}] {message}")


class DiagnosticLogger:
    """
    Truncating front end for the pluggable diagnostic sink.

    Diagnostics describe lookup decisions and table-building conflicts. They
    are never part of the cipher output.
    """

    def __init__(self, truncate: int = 120, sink: Optional[DiagnosticSink] = None):
        self.truncate = truncate
        self.sink = sink or logging_sink

    def emit(self, where: str, message: str) -> None:
        self.sink(where, truncate_message(message, self.truncate))


def log_with_context(message, context=None, level=logging.DEBUG, limit=200):
    """
    Log a message with additional context (inputs, tables, etc.).

    Args:
        message: Main log message
        context: Dict of contextual information
        level: Log level (default: DEBUG)
        limit: Maximum length of each rendered context value
    """
    logger = logging.getLogger(DIAGNOSTIC_LOGGER_NAME)
    logger.log(level, message)

    if context and logger.isEnabledFor(logging.DEBUG):
        for key, value in context.items():
            logger.debug(f"  └─ {key}: {truncate_message(str(value), limit)}")
