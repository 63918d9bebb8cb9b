"""
Logging Configuration
Sets up the package logger for the command line tool.
"""
import logging
import sys
from typing import Optional


def reset_logging(logger: Optional[logging.Logger] = None) -> None:
    """Detach and close every handler on the package logger."""
    logger = logger or logging.getLogger("cipha")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'cipha' namespace.

    Messages go to stderr so they never mix with cipher output on stdout.

    Args:
        level: Logging level (e.g. logging.INFO, logging.WARNING)
        log_file: Optional path to save logs to a file.

    Raises:
        OSError: ``log_file`` cannot be opened. No handler is attached then.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Open the log file first so a bad path leaves the logger untouched
    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    logger = logging.getLogger("cipha")
    logger.setLevel(level)

    # Avoid duplicate handlers when main() runs more than once in a process
    reset_logging(logger)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if file_handler is not None:
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
