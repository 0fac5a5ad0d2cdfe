from __future__ import annotations

"""
Unit tests for the tally domain models.
"""

import pytest

from dirstat.domain.entry_kinds import BLOCK_LABELS, CSV_HEADERS, LINE_HEADERS, EntryKind
from dirstat.domain.tally_models import PathEntry, PathFailure, ScanReport, TypeTally


def test_new_tally_is_all_zero() -> None:
    tally = TypeTally()
    assert tally.total == 0
    assert tally.values() == [0] * len(EntryKind)


def test_increment_and_get() -> None:
    tally = TypeTally()
    tally.increment(EntryKind.FIFO)
    tally.increment(EntryKind.FIFO, 2)
    tally.increment(EntryKind.UNKNOWN)

    assert tally.get(EntryKind.FIFO) == 3
    assert tally.fifo == 3
    assert tally.total == 4


def test_increment_rejects_negative_amounts() -> None:
    tally = TypeTally(regular=2)
    with pytest.raises(ValueError):
        tally.increment(EntryKind.REGULAR, -1)
    assert tally.regular == 2


def test_values_follow_kind_order() -> None:
    tally = TypeTally(regular=1, directory=2, unknown=9)
    assert tally.values() == [1, 2, 0, 0, 0, 0, 0, 0, 9]


def test_copy_is_independent() -> None:
    tally = TypeTally(socket=1)
    snap = tally.copy()
    tally.increment(EntryKind.SOCKET)

    assert snap.socket == 1
    assert tally.socket == 2


def test_merge_adds_counters() -> None:
    a = TypeTally(regular=1, symlink=2)
    a.merge(TypeTally(regular=4, block=1))
    assert a == TypeTally(regular=5, symlink=2, block=1)


def test_as_dict_uses_kind_values_as_keys() -> None:
    assert set(TypeTally().as_dict()) == {kind.value for kind in EntryKind}


def test_label_tables_cover_every_kind() -> None:
    assert set(LINE_HEADERS) == set(EntryKind)
    assert set(CSV_HEADERS) == set(EntryKind)
    assert {kind for kind, _stem, _mode in BLOCK_LABELS} == set(EntryKind)
    assert all(len(label) <= 8 for label in LINE_HEADERS.values())


def test_scan_report_ok_and_paths() -> None:
    report = ScanReport(paths=[PathEntry("/a"), PathEntry("/b")])
    assert report.ok
    assert report.path_strings() == ["/a", "/b"]

    report.failures.append(PathFailure("/b", "Permission denied", 13))
    assert not report.ok


def test_path_entry_is_immutable() -> None:
    entry = PathEntry("/a")
    with pytest.raises(AttributeError):
        entry.path = "/b"  # type: ignore[misc]
