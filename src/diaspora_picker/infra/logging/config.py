from __future__ import annotations

"""
Logging Configuration Models.

Settings object and severity name table consumed by the logging bootstrap.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted level names (case-insensitive) and their numeric values
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
    Immutable description of how the root logger should be wired.

    Attributes:
        level: Minimum severity captured by every handler.
        console: Whether records are echoed to stderr.
        log_file: Optional path of a rotating diagnostic file.
        max_bytes: Size threshold that triggers a file rollover.
        backup_count: Number of rolled-over files kept on disk.
        console_fmt: Record layout for stderr.
        file_fmt: Record layout for the diagnostic file.
        datefmt: Timestamp layout for the diagnostic file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
