"""
Logging configuration utility.
"""

import logging
import os
import sys
from typing import Optional, TextIO, List

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = 'WARNING',
    format_str: str = None,
    log_file: str = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the root logger for a run.

    Records go to stderr by default, never stdout, which carries the report.
    When log_file is set the same records are also appended to that file;
    its directory is created if needed.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_str: Log record format
        log_file: Optional file that also receives every record
        stream: Console stream for log records (default: sys.stderr)

    Returns:
        The configured root logger
    """
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)
    formatter = logging.Formatter(format_str or DEFAULT_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Replace whatever a previous run installed
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    return root_logger
