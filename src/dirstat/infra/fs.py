from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the application data directory, path
normalization for user-supplied destinations, and the append-mode output
destination used to duplicate reports into a file.
"""

import os
from typing import Optional, TextIO, Tuple

from dirstat.domain.errors import OutputWriteError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DirStat"
UNIX_APP_DIR_NAME = ".dirstat"

# Reports are appended, never truncated
OUTPUT_FILE_MODE = "a"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(create: bool = True) -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/DirStat
    - Linux/Mac: ~/.dirstat

    Args:
        create: Create the directory hierarchy if it does not exist.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    if create:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError:
            pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# OUTPUT DESTINATION API
# -----------------------------------------------------------------------------

def open_output_file(path: str) -> TextIO:
    """
    Open a report destination in append mode.

    Args:
        path: Target file path (parent directories are created).

    Returns:
        TextIO: Open text handle; the caller owns closing it.

    Raises:
        OutputWriteError: If the destination cannot be opened.
    """
    target = normalize_path(path, fallback=path)
    parent = os.path.dirname(target)
    if parent:
        ok, err = safe_mkdir(parent)
        if not ok:
            raise OutputWriteError(path, err or "cannot create parent directory")
    try:
        return open(target, OUTPUT_FILE_MODE, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e


def write_output(handle: TextIO, text: str, destination: str) -> None:
    """
    Write a fully rendered report to an open destination and flush it.

    Raises:
        OutputWriteError: On any write failure.
    """
    try:
        handle.write(text)
        handle.flush()
    except (OSError, ValueError) as e:
        raise OutputWriteError(destination, str(e)) from e
