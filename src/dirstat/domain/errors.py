from __future__ import annotations

"""
Error Taxonomy.

Exceptions raised across the registry, engine and interface layers. Per-path
failures are recovered by callers; configuration and destination failures
are fatal to a run.
"""

from typing import Optional


class DirStatError(Exception):
    """Base class for all dirstat errors."""


class InvalidDirectoryError(DirStatError):
    """A candidate path does not exist or is not a directory."""

    def __init__(self, path: str, reason: str = "Not a directory") -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryOpenError(DirStatError):
    """A registered directory could not be opened for enumeration."""

    def __init__(self, path: str, reason: str, errno: Optional[int] = None) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
        self.errno = errno


class ConfigurationError(DirStatError):
    """Invalid combination of run options, detected before traversal."""


class OutputWriteError(DirStatError):
    """The output or log destination rejected a write."""

    def __init__(self, destination: str, reason: str) -> None:
        super().__init__(f"{destination}: {reason}")
        self.destination = destination
        self.reason = reason
