from __future__ import annotations

"""
Logging Configuration Model.

Describes how one CLI run wants its diagnostics routed: the global
threshold, an optional stricter threshold for the console (so `-q` keeps
stderr silent), and the rotating `--logfile` destination. Record formats
are fixed for the whole program.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation policy for --logfile
DEFAULT_MAX_BYTES = 1024 * 1024
DEFAULT_BACKUP_COUNT = 3

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_level(level: Optional[str], fallback: int = logging.INFO) -> int:
    """Convert a severity name to its numeric constant; unknown names give `fallback`."""
    if not level:
        return fallback
    return _LEVEL_MAP.get(str(level).strip().upper(), fallback)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging setup for one run.

    Attributes:
        level: Threshold for the root logger and the log file.
        console: Mirror records to stderr.
        console_level: Stricter stderr threshold; None means `level`.
        log_file: The --logfile target, or None.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept beside it.
    """
    level: str = "INFO"
    console: bool = True
    console_level: Optional[str] = None
    log_file: Optional[str] = None
    max_bytes: int = DEFAULT_MAX_BYTES
    backup_count: int = DEFAULT_BACKUP_COUNT

    @classmethod
    def for_run(
            cls,
            *,
            debug: bool = False,
            quiet: bool = False,
            log_file: Optional[str] = None,
    ) -> LoggingConfig:
        """
        Derive the setup from CLI options.

        `--debug` lowers every threshold to DEBUG. `-q` raises the console
        threshold to WARNING; the log file still records everything at the
        global level.
        """
        return cls(
            level="DEBUG" if debug else "INFO",
            console_level="WARNING" if quiet and not debug else None,
            log_file=log_file or None,
        )

    @property
    def level_int(self) -> int:
        return parse_level(self.level)

    @property
    def console_level_int(self) -> int:
        return parse_level(self.console_level, fallback=self.level_int)
