from __future__ import annotations

"""
Logging Configuration Models.

The launcher configures logging twice: once with bootstrap settings
before 'launcher.json' is read, so that problems with that file are
recorded, and once more with the validated level and file preference.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, Optional

# Severity names accepted in 'launcher.json'
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

BOOTSTRAP_LEVEL = "INFO"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings of one logging (re)configuration.

    Attributes:
        level: Minimum severity level to capture.
        console: Write records to stderr.
        log_file: Launcher log path, None to keep no log file.
        max_bytes: Size of 'launcher.log' before it is rotated.
        backup_count: Rotated launcher logs kept next to the current one.
        console_fmt: Record format on stderr.
        file_fmt: Record format in the log file.
        datefmt: Timestamp format in the log file.
    """
    level: str = BOOTSTRAP_LEVEL
    console: bool = True
    log_file: Optional[str] = None

    # One launch writes a few dozen lines
    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = CONSOLE_FORMAT
    file_fmt: str = FILE_FORMAT
    datefmt: str = DATE_FORMAT

    def reconfigured(self, level: str, log_to_file: bool) -> LoggingConfig:
        """
        Derive the settings for the validated launcher configuration.

        Args:
            level: Validated 'log_level' value.
            log_to_file: Validated 'log_to_file' value.

        Returns:
            LoggingConfig: Copy keeping the bootstrap log path only if enabled.
        """
        return replace(self, level=level, log_file=self.log_file if log_to_file else None)
