from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides specialized handler factories and internal tagging mechanisms
to ensure that the application can distinguish its own logging
infrastructure from external or library-injected handlers.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from dirstat.domain.errors import OutputWriteError

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_dirstat_handler"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as an internally-managed application handler.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was initialized by this diagnostic module.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> RotatingFileHandler:
    """
    Initialize a RotatingFileHandler for the user-requested log file.

    The file is opened eagerly; an unusable path fails here instead of
    degrading to console-only logging.

    Args:
        log_file: Target path for the log file.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.
        max_bytes: Rollover threshold in bytes.
        backup_count: Number of archived files to keep.

    Returns:
        RotatingFileHandler: Configured handler.

    Raises:
        OutputWriteError: If the file cannot be opened for appending.
    """
    try:
        _ensure_parent_dir(log_file)
        fh = RotatingFileHandler(
            log_file,
            mode="a",
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        raise OutputWriteError(log_file, e.strerror or str(e)) from e

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file.

    Args:
        path: Path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
