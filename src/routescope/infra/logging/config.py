from __future__ import annotations

"""
Logging Configuration Models.

Settings consumed by ``configure_logging``: severity threshold, console and
file sinks, and the record formats for each.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted level names; anything else falls back to INFO
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for one CLI run.

    Attributes:
        level: Minimum severity level to capture.
        console: Emit to stderr (stdout stays reserved for JSON results).
        log_file: Optional path of a rotating diagnostic file.
        max_bytes: Rotation threshold for the diagnostic file.
        backup_count: Rotated segments to keep.
        console_fmt: Terminal record format.
        file_fmt: File record format.
        datefmt: Timestamp format for file records.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(threadName)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
