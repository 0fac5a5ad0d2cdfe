from __future__ import annotations

"""
Directory Path Registry.

Validates caller-supplied directory candidates into fully-qualified paths
and keeps them in an ordered registry for the tally engine. Resolution is a
pure function of (base directory, candidate): the process working directory
is never changed.
"""

import logging
import os
import stat
from typing import Iterator, List, Optional

from dirstat.domain.errors import InvalidDirectoryError
from dirstat.domain.tally_models import PathEntry

logger = logging.getLogger(__name__)

CURRENT_DIR = "."

# -----------------------------------------------------------------------------
# VALIDATION
# -----------------------------------------------------------------------------

def validate_path(candidate: str, base_dir: Optional[str] = None) -> str:
    """
    Resolve a directory candidate into a fully-qualified path.

    The candidate is used verbatim (surrounding whitespace is part of the
    name). `.` resolves to the base directory. Absolute candidates are
    returned as given; relative candidates are joined to the base directory
    and canonicalized.

    Args:
        candidate: Raw path string (relative or absolute).
        base_dir: Directory relative candidates are resolved against.
                  Defaults to the current working directory.

    Returns:
        str: The resolved directory path.

    Raises:
        InvalidDirectoryError: If the path does not exist or is not a directory.
    """
    if not candidate:
        raise InvalidDirectoryError(str(candidate), "Empty path")

    base = base_dir if base_dir is not None else os.getcwd()
    expanded = os.path.expanduser(candidate)

    if expanded == CURRENT_DIR:
        resolved = os.path.realpath(base)
    elif os.path.isabs(expanded):
        resolved = expanded
    else:
        resolved = os.path.realpath(os.path.join(base, expanded))

    try:
        st = os.stat(resolved)
    except OSError as e:
        raise InvalidDirectoryError(candidate, e.strerror or "No such file or directory") from e

    if not stat.S_ISDIR(st.st_mode):
        raise InvalidDirectoryError(candidate, "Not a directory")

    logger.debug(f"Validated directory '{candidate}' -> '{resolved}'")
    return resolved

# -----------------------------------------------------------------------------
# REGISTRY
# -----------------------------------------------------------------------------

class PathRegistry:
    """
    Ordered collection of validated directory paths.

    Entries keep registration order and are never de-duplicated: a path
    registered twice is traversed and tallied twice.
    """

    def __init__(self) -> None:
        self._entries: List[PathEntry] = []

    def register(self, resolved_path: str) -> PathEntry:
        """Append an already validated path."""
        entry = PathEntry(path=resolved_path)
        self._entries.append(entry)
        logger.debug(f"Registered '{resolved_path}' (count={len(self._entries)})")
        return entry

    def add(self, candidate: str, base_dir: Optional[str] = None) -> PathEntry:
        """
        Validate and register a candidate in one step.

        Raises:
            InvalidDirectoryError: Propagated from validate_path; whether
                                   that aborts the run is the caller's call.
        """
        return self.register(validate_path(candidate, base_dir))

    @property
    def count(self) -> int:
        return len(self._entries)

    def entries(self) -> List[PathEntry]:
        return list(self._entries)

    def paths(self) -> List[str]:
        return [e.path for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PathEntry]:
        return iter(list(self._entries))

    def __getitem__(self, index: int) -> PathEntry:
        return self._entries[index]
