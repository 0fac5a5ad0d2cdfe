from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults, config
file, CLI overrides), logging bootstrap, directory registration, option
checks, the tally run, and report rendering to stdout and the optional
output file.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from dirstat.core.engine import iter_process, process_paths
from dirstat.core.registry import PathRegistry
from dirstat.core.render import (
    render,
    render_deco,
    render_line_header,
    render_line_row,
    select_file_format,
    select_stdout_format,
)
from dirstat.core.validator import check_run_options, validate_config
from dirstat.domain.config import get_default_config, load_config
from dirstat.domain.errors import ConfigurationError, InvalidDirectoryError, OutputWriteError
from dirstat.domain.tally_models import ScanReport
from dirstat.infra.fs import open_output_file, write_output
from dirstat.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from dirstat.interface.cli import args as cli_args
from dirstat.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 3. Map, merge and validate
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Logging bootstrap (console on stderr, optional LOGFILE)
    logging_conf = LoggingConfig.for_run(
        debug=args.debug,
        quiet=clean_conf["quiet"],
        log_file=clean_conf["log_file"],
    )
    try:
        configure_logging(logging_conf, force=True)
    except OutputWriteError as e:
        print(
            "ERROR: " + i18n.t("cli.errors.output", destination=e.destination, reason=e.reason),
            file=sys.stderr,
        )
        return EXIT_FAILURE

    try:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
        return run(clean_conf, args.directories, stdout=sys.stdout)
    except KeyboardInterrupt:
        logger.warning(i18n.t("cli.status.interrupted"))
        return EXIT_INTERRUPTED
    finally:
        shutdown_logging()


def run(
        conf: Dict[str, Any],
        directories: List[str],
        stdout: TextIO,
        base_dir: Optional[str] = None,
) -> int:
    """
    Register directories, tally them and render the report.

    Args:
        conf: Validated configuration.
        directories: Raw directory candidates; empty means the working directory.
        stdout: Stream receiving the primary report.
        base_dir: Resolution base for relative candidates.

    Returns:
        int: Process exit code.
    """
    base = base_dir if base_dir is not None else os.getcwd()

    # 1. Registration (invalid directories are fatal unless errors are logged to a file)
    registry = PathRegistry()
    tolerate_invalid = bool(conf.get("log_file"))
    for candidate in directories or ["."]:
        try:
            registry.add(candidate, base_dir=base)
        except InvalidDirectoryError as e:
            if not tolerate_invalid:
                logger.error(i18n.t("cli.errors.invalid_directory", path=e.path, reason=e.reason))
                return EXIT_USAGE
            logger.warning(i18n.t("cli.status.skipped", path=e.path, reason=e.reason))

    # 2. Pre-flight option checks
    try:
        for notice in check_run_options(conf, registry.count):
            logger.warning(notice)
    except ConfigurationError as e:
        logger.error(i18n.t("cli.errors.configuration", error=str(e)))
        return EXIT_USAGE

    # 3. Traversal and rendering
    out_handle: Optional[TextIO] = None
    try:
        if conf.get("output_file"):
            out_handle = open_output_file(conf["output_file"])

        report = _execute(conf, registry, stdout)

        if out_handle is not None:
            text = render(report, select_file_format(conf), quiet=bool(conf.get("quiet")))
            write_output(out_handle, text, conf["output_file"])

    except OutputWriteError as e:
        logger.error(i18n.t("cli.errors.output", destination=e.destination, reason=e.reason))
        return EXIT_FAILURE
    except Exception as e:
        logger.critical(i18n.t("cli.errors.unexpected", error=str(e)), exc_info=True)
        return EXIT_FAILURE
    finally:
        if out_handle is not None:
            out_handle.close()

    logger.debug(f"Run complete: {report.tally.as_dict()}")
    return EXIT_OK

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _execute(conf: Dict[str, Any], registry: PathRegistry, stdout: TextIO) -> ScanReport:
    """Run the engine and write the stdout report in the selected format."""
    quiet = bool(conf.get("quiet"))
    skip_dots = bool(conf.get("skip_dot_entries"))

    if not conf.get("continuous"):
        report = process_paths(registry, skip_dot_entries=skip_dots)
        stdout.write(render(report, select_stdout_format(conf), quiet=quiet))
        stdout.flush()
        return report

    # Continuous: one refreshed row per processed directory
    linear = bool(conf.get("linear"))
    report = ScanReport()

    if not quiet:
        stdout.write(render_line_header(registry.paths()))

    for entry, snapshot, failure in iter_process(
            registry, report.tally, skip_dot_entries=skip_dots
    ):
        report.paths.append(entry)
        if failure is not None:
            report.failures.append(failure)

        row = render_line_row(snapshot)
        stdout.write(row + "\n" if linear else "\r" + row)
        stdout.flush()

    if not linear:
        stdout.write("\n")
    if not quiet:
        stdout.write(render_deco())
    stdout.flush()
    return report

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known option keys are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "continuous", "linear", "csv", "quiet",
        "recurse", "skip_dot_entries",
        "output_file", "log_file",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
