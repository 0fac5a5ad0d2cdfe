from __future__ import annotations

"""
Directory Entry Kind Enumeration.

Defines the closed set of filesystem entry types recognized by the tally
engine, along with the label tables used by the different report formats.
"""

from enum import Enum
from typing import Dict, Tuple

# -----------------------------------------------------------------------------
# ENTRY KINDS
# -----------------------------------------------------------------------------


class EntryKind(Enum):
    """
    Filesystem-reported kind of a directory entry.

    Declaration order is the canonical column order of CSV and line output.
    """
    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK = "block"
    CHARACTER = "character"
    FIFO = "fifo"
    SOCKET = "socket"
    WHITEOUT = "whiteout"
    UNKNOWN = "unknown"


# -----------------------------------------------------------------------------
# LABEL TABLES
# -----------------------------------------------------------------------------

# Short column headers for line output (8-wide columns)
LINE_HEADERS: Dict[EntryKind, str] = {
    EntryKind.REGULAR: "Regular",
    EntryKind.DIRECTORY: "Dir",
    EntryKind.SYMLINK: "Link",
    EntryKind.BLOCK: "Block",
    EntryKind.CHARACTER: "Char",
    EntryKind.FIFO: "FIFO",
    EntryKind.SOCKET: "Socket",
    EntryKind.WHITEOUT: "WhtOut",
    EntryKind.UNKNOWN: "Unknown",
}

# Fully written names for the CSV header row
CSV_HEADERS: Dict[EntryKind, str] = {
    EntryKind.REGULAR: "Regular",
    EntryKind.DIRECTORY: "Directory",
    EntryKind.SYMLINK: "Link",
    EntryKind.BLOCK: "Block Special",
    EntryKind.CHARACTER: "Character Special",
    EntryKind.FIFO: "FIFO",
    EntryKind.SOCKET: "Socket",
    EntryKind.WHITEOUT: "White Out",
    EntryKind.UNKNOWN: "Unknown",
}

# Descriptive block labels: (singular stem, pluralization mode).
# Order here is the display order of the block report.
BLOCK_LABELS: Tuple[Tuple[EntryKind, str, str], ...] = (
    (EntryKind.DIRECTORY, "director", "replace"),
    (EntryKind.FIFO, "FIFO file", "add"),
    (EntryKind.CHARACTER, "character special file", "add"),
    (EntryKind.BLOCK, "block special file", "add"),
    (EntryKind.REGULAR, "regular file", "add"),
    (EntryKind.SYMLINK, "symlink", "add"),
    (EntryKind.SOCKET, "socket", "add"),
    (EntryKind.WHITEOUT, "union whiteout file", "add"),
    (EntryKind.UNKNOWN, "unknown file type", "add"),
)
