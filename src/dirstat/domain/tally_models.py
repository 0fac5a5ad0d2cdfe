from __future__ import annotations

"""
Tally Domain Data Models.

Defines the records exchanged between the path registry, the tally engine
and the rendering layer: validated path entries, the per-kind counters,
per-path failure records and the aggregate scan report.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional

from dirstat.domain.entry_kinds import EntryKind

# -----------------------------------------------------------------------------
# PATH MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathEntry:
    """
    One validated directory path.

    Attributes:
        path: Absolute, filesystem-resolved directory path.
    """
    path: str


@dataclass(frozen=True)
class PathFailure:
    """
    A registered path that could not be enumerated.

    Attributes:
        path: The directory path that failed.
        error: Human readable reason.
        errno: OS error number when available.
    """
    path: str
    error: str
    errno: Optional[int] = None

# -----------------------------------------------------------------------------
# COUNTERS
# -----------------------------------------------------------------------------

@dataclass
class TypeTally:
    """
    Aggregate counters, one per EntryKind.

    Counters only ever grow; there is no way to decrement or
    reset them short of building a new instance.
    """
    regular: int = 0
    directory: int = 0
    symlink: int = 0
    block: int = 0
    character: int = 0
    fifo: int = 0
    socket: int = 0
    whiteout: int = 0
    unknown: int = 0

    def increment(self, kind: EntryKind, amount: int = 1) -> None:
        """Add `amount` to the counter of `kind`."""
        if amount < 0:
            raise ValueError(f"Tally counters cannot decrease (amount={amount}).")
        name = kind.value
        setattr(self, name, getattr(self, name) + amount)

    def get(self, kind: EntryKind) -> int:
        return int(getattr(self, kind.value))

    @property
    def total(self) -> int:
        """Sum of all counters."""
        return sum(self.values())

    def values(self) -> List[int]:
        """Counter values in canonical EntryKind order."""
        return [self.get(kind) for kind in EntryKind]

    def as_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def copy(self) -> TypeTally:
        return TypeTally(**self.as_dict())

    def merge(self, other: TypeTally) -> None:
        """Fold the counters of another tally into this one."""
        for kind in EntryKind:
            self.increment(kind, other.get(kind))

# -----------------------------------------------------------------------------
# REPORT
# -----------------------------------------------------------------------------

@dataclass
class ScanReport:
    """
    Data product of one engine run.

    Attributes:
        tally: Aggregate counters across every path that could be opened.
        paths: Paths in the order they were processed.
        failures: Paths that could not be (fully) enumerated.
    """
    tally: TypeTally = field(default_factory=TypeTally)
    paths: List[PathEntry] = field(default_factory=list)
    failures: List[PathFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def path_strings(self) -> List[str]:
        return [p.path for p in self.paths]
