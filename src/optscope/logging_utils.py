"""Logging utilities for optscope."""

import logging
import sys


def setup_logging(debug_mode: bool = False) -> None:
    """Configure root logging to stdout.

    Args:
        debug_mode: Log at DEBUG instead of INFO
    """
    log_level = logging.DEBUG if debug_mode else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(log_format))

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)
