from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: argument parsing, exit codes, stream output and the
append-mode output file.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "dirstat" / "main.py"


def run_cli(args: List[str], home: Path, cwd: Optional[Path] = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with an isolated HOME.

    Args:
        args: Command line arguments (excluding interpreter and script path).
        home: Directory used as HOME so no real config file is read.
        cwd: Optional working directory for the subprocess.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def home(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("e2e_home")


def test_help(home: Path) -> None:
    """TC-01: --help lists the options and exits 0."""
    result = run_cli(["--help"], home)
    assert result.returncode == 0
    for flag in ("-C", "-L", "-c", "-q", "-o", "-l"):
        assert flag in result.stdout


def test_version(home: Path) -> None:
    """TC-02: -v prints the program name and version."""
    result = run_cli(["-v"], home)
    assert result.returncode == 0
    assert result.stdout.startswith("dirstat ")


def test_block_report_for_working_directory(home: Path, make_dir) -> None:
    """TC-03: No DIRECTORY argument scans the working directory."""
    root = make_dir("work", files=["a", "b", "c"], dirs=["sub"])
    result = run_cli(["-s"], home, cwd=root)

    assert result.returncode == 0, result.stderr
    assert "Totals:" in result.stdout
    assert "       3:regular files\n" in result.stdout
    assert "       1:directory\n" in result.stdout


def test_dot_entries_counted_by_default(home: Path, make_dir) -> None:
    """TC-04: Without -s the '.' and '..' entries count as directories."""
    root = make_dir("dots", files=["a"])
    result = run_cli(["-cq", str(root)], home)

    assert result.returncode == 0, result.stderr
    assert result.stdout == "1,2,0,0,0,0,0,0,0\n"


def test_continuous_needs_two_directories(home: Path, make_dir) -> None:
    """TC-05: -C with a single directory exits 2 without output."""
    result = run_cli(["-C", str(make_dir("one"))], home)
    assert result.returncode == 2
    assert result.stdout == ""
    assert "multiple directories" in result.stderr


def test_invalid_directory_exits_2(home: Path, tmp_path: Path) -> None:
    """TC-06: A missing directory is fatal when no log file is given."""
    result = run_cli([str(tmp_path / "missing")], home)
    assert result.returncode == 2
    assert "missing" in result.stderr


def test_csv_output_file_is_appended(home: Path, make_dir, tmp_path: Path) -> None:
    """TC-07: -c -o writes block to stdout and appends CSV to the file."""
    root = make_dir("csv", files=["a"])
    out = tmp_path / "stats.csv"

    for _ in range(2):
        result = run_cli(["-c", "-s", "-o", str(out), str(root)], home)
        assert result.returncode == 0, result.stderr
        assert "Totals:" in result.stdout

    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines.count("1,0,0,0,0,0,0,0,0") == 2
    assert lines[0] == "Directory"


def test_continuous_linear_rows(home: Path, make_dir) -> None:
    """TC-08: -C -L prints one cumulative row per directory."""
    a = make_dir("a", files=["1"])
    b = make_dir("b", files=["2", "3"])
    result = run_cli(["-C", "-L", "-q", "-s", str(a), str(b)], home)

    assert result.returncode == 0, result.stderr
    rows = result.stdout.splitlines()
    assert [r.split("|")[1].strip() for r in rows] == ["1", "3"]


def test_quiet_run_writes_only_the_report(home: Path, make_dir) -> None:
    """TC-09: -q prints the values row and nothing on stderr."""
    root = make_dir("quiet", files=["a"])
    result = run_cli(["-q", "-c", "-s", str(root)], home)

    assert result.returncode == 0
    assert result.stdout == "1,0,0,0,0,0,0,0,0\n"
    assert result.stderr == ""
