"""Logging for the AED-ECG package.

All modules log through the ``aed_ecg`` logger defined here. Console records go to stdout in
the form ``aed_ecg | LEVEL | message``. The console threshold defaults to WARNING, so a normal
run prints only the shock report, while malformed records, missing R-peaks and chart failures
still surface. Load statistics and gate verdicts are logged at INFO, estimator values at DEBUG.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

_formatter = logging.Formatter("%(name)s | %(levelname)s | %(message)s")


def _configure_default_logging() -> logging.Logger:
    """Attach the stdout handler to the package logger once, at import time."""
    logger = logging.getLogger(__package__)
    if not logger.handlers:
        logger.setLevel(logging.WARNING)
        logger.propagate = False
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(_formatter)
        console_handler.setLevel(logging.WARNING)
        logger.addHandler(console_handler)

    return logger


logger = _configure_default_logging()
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _console_handlers() -> list[logging.Handler]:
    return [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]


def set_log_level(log_level: LogLevel) -> None:
    """Set the console log level.

    A file handler attached with set_log_file keeps its own level.

    Args:
        log_level: Log level for console output (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Example:
        >>> set_log_level("DEBUG")  # also print baseline, BPM and uniformity as they are computed
    """
    numeric_level: int = int(getattr(logging, log_level))
    for handler in _console_handlers():
        handler.setLevel(numeric_level)
    file_levels = [h.level for h in logger.handlers if isinstance(h, logging.FileHandler)]
    logger.setLevel(min([numeric_level, *file_levels]))


def set_log_file(log_file: Path, log_level: LogLevel = "DEBUG") -> None:
    """Also write analysis logs to a rotating file.

    An existing file handler is closed and replaced. The console level is not changed.

    Args:
        log_file: Path to log file. Parent directories are created.
        log_level: Log level for the file output (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Example:
        >>> from pathlib import Path
        >>> set_log_file(Path("logs/aed.log"))  # full estimator trail per run, console stays quiet
    """
    numeric_level: int = int(getattr(logging, log_level))
    log_file.parent.mkdir(parents=True, exist_ok=True)

    for h in list(logger.handlers):
        if isinstance(h, logging.FileHandler):
            h.close()
            logger.removeHandler(h)

    file_handler = RotatingFileHandler(log_file, maxBytes=100_000_000, backupCount=3)
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(_formatter)
    logger.addHandler(file_handler)
    console_levels = [h.level for h in _console_handlers()]
    logger.setLevel(min([numeric_level, *console_levels]))
