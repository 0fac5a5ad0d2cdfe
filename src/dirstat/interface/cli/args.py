from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from dirstat.domain.constants import AUTHOR, PROGNAME, RELEASE_DATE, VERSION
from dirstat.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirstat CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=PROGNAME,
        usage=i18n.t("app.usage", default="%(prog)s [OPTION]... [DIRECTORY]..."),
        description=i18n.t("app.description"),
        epilog=i18n.t("app.epilog"),
        # Keeps the multi-line -V output intact
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    p.add_argument(
        "directories",
        nargs="*",
        metavar="DIRECTORY",
        help=i18n.t("cli.args.directories"),
    )

    # --- Output Format ---
    p.add_argument(
        "-C", "--continuous",
        action="store_true",
        help=i18n.t("cli.args.continuous"),
    )
    p.add_argument(
        "-L", "--linear",
        action="store_true",
        help=i18n.t("cli.args.linear"),
    )
    p.add_argument(
        "-c", "--csv",
        action="store_true",
        help=i18n.t("cli.args.csv"),
    )
    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        help=i18n.t("cli.args.quiet"),
    )

    # --- Destinations ---
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        metavar="OUTFILE",
        default=None,
        help=i18n.t("cli.args.output"),
    )
    p.add_argument(
        "-l", "--logfile",
        dest="log_file",
        metavar="LOGFILE",
        default=None,
        help=i18n.t("cli.args.logfile"),
    )

    # --- Traversal ---
    p.add_argument(
        "-r", "--recurse",
        action="store_true",
        help=i18n.t("cli.args.recurse"),
    )
    p.add_argument(
        "-s", "--skip-dots",
        dest="skip_dot_entries",
        action="store_true",
        help=i18n.t("cli.args.skip_dots"),
    )

    # --- Identity ---
    p.add_argument(
        "-v", "--version",
        action="version",
        version=f"{PROGNAME} {VERSION}",
        help=i18n.t("cli.args.version"),
    )
    p.add_argument(
        "-V", "--Version",
        action="version",
        version=f"{PROGNAME} {VERSION}\n{AUTHOR}\n{RELEASE_DATE}",
        help=i18n.t("cli.args.version_full"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags that were not given are left out so that config file values
    survive the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for flag in ("continuous", "linear", "csv", "quiet", "recurse", "skip_dot_entries"):
        if getattr(args, flag):
            overrides[flag] = True

    if args.output_file is not None:
        overrides["output_file"] = args.output_file
    if args.log_file is not None:
        overrides["log_file"] = args.log_file

    return overrides
