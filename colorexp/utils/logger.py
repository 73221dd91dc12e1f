"""Logging setup for the colorexp command."""

import logging
import sys
from pathlib import Path


def setup_logging(log_file: Path | None = None, log_level: str = "WARNING") -> logging.Logger:
    """Configure the package logger once.

    Diagnostics go to stderr so they never mix with highlighted output on stdout.

    Args:
        log_file: Optional file that receives the same records
        log_level: Level name for both handlers

    Returns:
        The ``colorexp`` logger
    """
    logger = logging.getLogger("colorexp")
    if logger.handlers:
        return logger
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(fmt)
    logger.addHandler(stderr_handler)

    if log_file:
        expanded = log_file.expanduser()
        expanded.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(expanded)
        file_handler.setLevel(level)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    return logger
