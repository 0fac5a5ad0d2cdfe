from __future__ import annotations

"""
Report Renderer.

Converts a ScanReport into its textual representations: the descriptive
block, CSV, and the fixed-width line table (also used for continuous
updates). Also decides which format goes to stdout and which to the
output file for a given option set.
"""

import csv
import io
from typing import Any, Dict, List, Sequence

from dirstat.domain.entry_kinds import BLOCK_LABELS, CSV_HEADERS, LINE_HEADERS, EntryKind
from dirstat.domain.tally_models import ScanReport, TypeTally

FORMAT_BLOCK = "block"
FORMAT_CSV = "csv"
FORMAT_LINE = "line"

COLUMN_WIDTH = 8

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def pluralize(count: int, mode: str) -> str:
    """
    Return the suffix that makes a label agree with `count`.

    Args:
        count: Number of things being labelled.
        mode: "add" appends "s" ("file"/"files"); "replace" completes a
              stem ending in "y"/"ies" ("director" -> "directory"/"directories").
    """
    singular = count == 1
    if mode == "add":
        return "" if singular else "s"
    if mode == "replace":
        return "y" if singular else "ies"
    raise ValueError(f"Unknown pluralization mode: {mode!r}")


def render_directory_list(paths: Sequence[str], style: str = FORMAT_BLOCK) -> str:
    """
    Render the list of scanned directories.

    Block style uses a `Directories:` header with tab-indented paths; CSV
    style uses a bare header and one path per row.
    """
    header = f"Director{pluralize(len(paths), 'replace')}"
    if style == FORMAT_CSV:
        return "".join([header + "\n"] + [f"{p}\n" for p in paths])
    return "".join([header + ":\n"] + [f"\t{p}\n" for p in paths])

# -----------------------------------------------------------------------------
# FORMATS
# -----------------------------------------------------------------------------

def render_block(report: ScanReport, quiet: bool = False) -> str:
    """Render the descriptive block report."""
    lines: List[str] = []
    if not quiet:
        lines.append(render_directory_list(report.path_strings(), FORMAT_BLOCK))
        lines.append("\nTotals:\n")

    for kind, stem, mode in BLOCK_LABELS:
        count = report.tally.get(kind)
        lines.append(f"{count:{COLUMN_WIDTH}d}:{stem}{pluralize(count, mode)}\n")

    return "".join(lines)


def render_csv(report: ScanReport, quiet: bool = False) -> str:
    """Render the CSV report: optional directory list and header, then values."""
    buf = io.StringIO()
    if not quiet:
        buf.write(render_directory_list(report.path_strings(), FORMAT_CSV))

    writer = csv.writer(buf, lineterminator="\n")
    if not quiet:
        writer.writerow([CSV_HEADERS[kind] for kind in EntryKind])
    writer.writerow(report.tally.values())
    return buf.getvalue()


def render_deco() -> str:
    """Horizontal rule matching the line table columns."""
    return "".join("+" + "-" * (COLUMN_WIDTH + 1) for _ in EntryKind) + "+\n"


def render_line_header(paths: Sequence[str]) -> str:
    """Directory list and column headers framed by decorations."""
    cells = "".join(f"{LINE_HEADERS[kind]:>{COLUMN_WIDTH}} |" for kind in EntryKind)
    return (
        render_directory_list(paths, FORMAT_BLOCK)
        + render_deco()
        + f"|{cells}\n"
        + render_deco()
    )


def render_line_row(tally: TypeTally) -> str:
    """One table row of counts, without a line terminator."""
    return "|" + "".join(f"{v:{COLUMN_WIDTH}d} |" for v in tally.values())


def render_line(report: ScanReport, quiet: bool = False) -> str:
    """Render the line table for a completed report."""
    out = ""
    if not quiet:
        out += render_line_header(report.path_strings())
    out += render_line_row(report.tally) + "\n"
    if not quiet:
        out += render_deco()
    return out


RENDERERS = {
    FORMAT_BLOCK: render_block,
    FORMAT_CSV: render_csv,
    FORMAT_LINE: render_line,
}


def render(report: ScanReport, fmt: str, quiet: bool = False) -> str:
    """Dispatch to the renderer registered for `fmt`."""
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt!r}") from None
    return renderer(report, quiet=quiet)

# -----------------------------------------------------------------------------
# FORMAT SELECTION
# -----------------------------------------------------------------------------

def select_stdout_format(config: Dict[str, Any]) -> str:
    """
    Pick the stdout format for an option set.

    Line output wins for continuous mode, for linear without CSV, and for
    linear CSV when the CSV goes to the output file. CSV goes to stdout
    only when it is not also headed for the output file.
    """
    continuous = bool(config.get("continuous"))
    linear = bool(config.get("linear"))
    use_csv = bool(config.get("csv"))
    has_out = bool(config.get("output_file"))

    if continuous or (linear and not use_csv) or (linear and use_csv and has_out):
        return FORMAT_LINE
    if use_csv and not linear and not has_out:
        return FORMAT_CSV
    return FORMAT_BLOCK


def select_file_format(config: Dict[str, Any]) -> str:
    """The output file receives CSV when requested, the block report otherwise."""
    return FORMAT_CSV if config.get("csv") else FORMAT_BLOCK
