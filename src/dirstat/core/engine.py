from __future__ import annotations

"""
Directory Entry Tally Engine.

Enumerates the immediate children of each registered directory, classifies
every entry into one of the EntryKind categories and accumulates the counts
into a TypeTally. Traversal is strictly one level deep and sequential; a
directory that cannot be opened is reported and skipped without affecting
the counts gathered from the other directories.
"""

import logging
import os
import stat
from typing import Callable, Iterable, Iterator, Optional, Tuple

from dirstat.domain.entry_kinds import EntryKind
from dirstat.domain.errors import DirectoryOpenError
from dirstat.domain.tally_models import PathEntry, PathFailure, ScanReport, TypeTally

logger = logging.getLogger(__name__)

# Synthetic self/parent entries reported ahead of the real children
DOT_ENTRIES: Tuple[str, str] = (".", "..")

# Order matters only for readability: S_IFMT values are mutually exclusive
_MODE_TESTS: Tuple[Tuple[Callable[[int], bool], EntryKind], ...] = (
    (stat.S_ISREG, EntryKind.REGULAR),
    (stat.S_ISDIR, EntryKind.DIRECTORY),
    (stat.S_ISLNK, EntryKind.SYMLINK),
    (stat.S_ISBLK, EntryKind.BLOCK),
    (stat.S_ISCHR, EntryKind.CHARACTER),
    (stat.S_ISFIFO, EntryKind.FIFO),
    (stat.S_ISSOCK, EntryKind.SOCKET),
    (stat.S_ISWHT, EntryKind.WHITEOUT),
)

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def classify_mode(st_mode: int) -> EntryKind:
    """
    Map a raw `st_mode` value to its EntryKind.

    Any file type bits outside the recognized set map to UNKNOWN.
    """
    for test, kind in _MODE_TESTS:
        if test(st_mode):
            return kind
    return EntryKind.UNKNOWN


def classify_entry(entry: os.DirEntry) -> EntryKind:
    """
    Classify a scandir entry without following symlinks.

    The cached directory type answers the common cases; special files need
    an lstat. An entry that vanished or cannot be inspected is UNKNOWN.
    """
    try:
        if entry.is_symlink():
            return EntryKind.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.REGULAR
        return classify_mode(entry.stat(follow_symlinks=False).st_mode)
    except OSError as e:
        logger.debug(f"Cannot inspect '{entry.path}': {e}")
        return EntryKind.UNKNOWN

# -----------------------------------------------------------------------------
# ENUMERATION
# -----------------------------------------------------------------------------

def iter_entries(path: str) -> Iterator[Tuple[str, EntryKind]]:
    """
    Lazily enumerate the immediate entries of a directory.

    Yields `.` and `..` first, both typed DIRECTORY, followed by every real
    child in the order the filesystem returns them. The sequence is single
    pass. The directory handle is released when the generator finishes or
    is closed.

    Args:
        path: Directory to enumerate.

    Yields:
        Tuple[str, EntryKind]: Entry name and its kind.

    Raises:
        OSError: On the first step if the directory cannot be opened, or
                 later if reading it fails mid-way.
    """
    with os.scandir(path) as it:
        for name in DOT_ENTRIES:
            yield name, EntryKind.DIRECTORY
        for entry in it:
            yield entry.name, classify_entry(entry)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan_path(
        entry: PathEntry,
        tally: TypeTally,
        skip_dot_entries: bool = False,
) -> Optional[PathFailure]:
    """
    Enumerate one directory into the tally.

    Args:
        entry: The registered directory.
        tally: Accumulator, mutated in place.
        skip_dot_entries: Drop the `.` and `..` entries by name.

    Returns:
        Optional[PathFailure]: The failure record if the directory could not
                               be opened or fully read, else None. Entries
                               counted before a mid-way failure are kept.
    """
    counted = 0
    try:
        for name, kind in iter_entries(entry.path):
            if skip_dot_entries and name in DOT_ENTRIES:
                continue
            tally.increment(kind)
            counted += 1
    except OSError as e:
        err = DirectoryOpenError(entry.path, e.strerror or str(e), e.errno)
        logger.warning(str(err))
        return PathFailure(path=err.path, error=err.reason, errno=err.errno)

    logger.debug(f"Tallied {counted} entries in '{entry.path}'")
    return None


def iter_process(
        paths: Iterable[PathEntry],
        tally: Optional[TypeTally] = None,
        *,
        skip_dot_entries: bool = False,
) -> Iterator[Tuple[PathEntry, TypeTally, Optional[PathFailure]]]:
    """
    Process paths one at a time, yielding progress after each.

    Drives continuous-update output: every step carries a snapshot of the
    cumulative tally so far.

    Yields:
        Tuple[PathEntry, TypeTally, Optional[PathFailure]]:
            The path just processed, a copy of the running tally and the
            failure for that path (None on success).
    """
    running = tally if tally is not None else TypeTally()
    for entry in paths:
        failure = scan_path(entry, running, skip_dot_entries=skip_dot_entries)
        yield entry, running.copy(), failure


def process_paths(
        paths: Iterable[PathEntry],
        tally: Optional[TypeTally] = None,
        *,
        skip_dot_entries: bool = False,
) -> ScanReport:
    """
    Tally every path, in the given order, into a single aggregate.

    A path that cannot be opened is recorded in the report's failures and
    processing continues with the next one.

    Args:
        paths: Registered directories (registry order).
        tally: Optional existing accumulator to add to.
        skip_dot_entries: Drop the `.` and `..` entries by name.

    Returns:
        ScanReport: The aggregate tally, processed paths and failures.
    """
    report = ScanReport(tally=tally if tally is not None else TypeTally())

    for entry, _snapshot, failure in iter_process(
            paths, report.tally, skip_dot_entries=skip_dot_entries
    ):
        report.paths.append(entry)
        if failure is not None:
            report.failures.append(failure)

    logger.debug(
        f"Scanned {len(report.paths)} director{'y' if len(report.paths) == 1 else 'ies'}: "
        f"{report.tally.total} entries, {len(report.failures)} failure(s)"
    )
    return report
