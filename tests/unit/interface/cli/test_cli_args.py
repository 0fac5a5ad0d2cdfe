from __future__ import annotations

"""
Unit tests for the CLI argument schema and override mapping.
"""

import pytest

from dirstat.domain.constants import AUTHOR, PROGNAME, RELEASE_DATE, VERSION
from dirstat.interface.cli.args import args_to_overrides, build_parser


def test_no_arguments_yield_no_overrides() -> None:
    args = build_parser().parse_args([])
    assert args.directories == []
    assert args_to_overrides(args) == {}


def test_short_flags_map_to_config_keys() -> None:
    args = build_parser().parse_args(
        ["-C", "-L", "-c", "-q", "-r", "-s", "-o", "out.txt", "-l", "err.log", "d1", "d2"]
    )

    assert args.directories == ["d1", "d2"]
    assert args_to_overrides(args) == {
        "continuous": True,
        "linear": True,
        "csv": True,
        "quiet": True,
        "recurse": True,
        "skip_dot_entries": True,
        "output_file": "out.txt",
        "log_file": "err.log",
    }


def test_combined_short_flags() -> None:
    args = build_parser().parse_args(["-cq", "dir"])
    assert args_to_overrides(args) == {"csv": True, "quiet": True}


def test_long_flags() -> None:
    args = build_parser().parse_args(["--linear", "--output", "x", "--skip-dots"])
    assert args_to_overrides(args) == {"linear": True, "output_file": "x", "skip_dot_entries": True}


def test_empty_output_string_is_still_an_override() -> None:
    args = build_parser().parse_args(["-o", ""])
    assert args_to_overrides(args) == {"output_file": ""}


def test_short_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["-v"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"{PROGNAME} {VERSION}"


def test_long_version_includes_author_and_date(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["-V"])
    assert exc.value.code == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [f"{PROGNAME} {VERSION}", AUTHOR, RELEASE_DATE]


def test_unknown_option_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["-Z"])
    assert exc.value.code == 2
    assert "usage:" in capsys.readouterr().err
