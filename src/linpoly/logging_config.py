"""
Logging Configuration
=====================
Log records of the console tool go to the 'linpoly' logger namespace.

The interactive session already owns stdout, so the default level is WARNING:
prompts and results stay readable, and debug records (rejected input,
configured coefficients) only appear when asked for, typically in a log file.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the 'linpoly' logger, replacing any from an earlier call.

    Args:
        level: Threshold for the logger and every handler.
        log_file: Optional path; the file is truncated and receives the same records.
    """
    logger = logging.getLogger("linpoly")
    logger.setLevel(level)
    for old_handler in logger.handlers:
        old_handler.close()
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
