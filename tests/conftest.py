from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory so a real ~/.dirstat config never
   leaks into a test run.
3. Shared fixtures for building directory trees and configuration dicts.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME (and LOCALAPPDATA) at an empty temporary directory."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home))
    return home


@pytest.fixture
def make_dir(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory building a directory with regular files and subdirectories.

    Usage: make_dir("name", files=["a", "b"], dirs=["sub"])
    """

    def _make(name: str, files: Iterable[str] = (), dirs: Iterable[str] = ()) -> Path:
        root = tmp_path / name
        root.mkdir()
        for f in files:
            (root / f).write_text("x", encoding="utf-8")
        for d in dirs:
            (root / d).mkdir()
        return root

    return _make


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "continuous": False,
        "linear": False,
        "csv": False,
        "quiet": False,
        "recurse": False,
        "skip_dot_entries": False,
        "output_file": "",
        "log_file": "",
    }
