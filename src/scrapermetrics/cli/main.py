"""
Command-line interface for scrapermetrics.

Subcommands:
    command   print the GNU time wrapped form of a command
    run       run a command under GNU time and record its resource usage
    load      record the resource usage from an existing report file
    show      print one stored record
    list      print every stored record
    summary   print aggregate statistics over the stored records
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import polars as pl

from ..config import get_config, get_config_info, set_config_path
from ..models.metric import METRIC_FIELDS, MetricRecord
from ..recorder import read_from_file
from ..reporting import summarize
from ..storage import get_default_store
from ..system.commands import check_time_installed, command, run_command, TIME_COMMAND
from ..validation import ValidationError, handle_cli_error

# --- Logging Setup ---
# Logs go to stderr so that command output on stdout stays machine-readable.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def format_record(record: MetricRecord) -> str:
    """Render a record as aligned `field: value` lines, `-` for absent fields."""
    lines = [f"{'id':<10} {record.id}"]
    for name in METRIC_FIELDS:
        value = getattr(record, name)
        lines.append(f"{name:<10} {'-' if value is None else value}")
    cpu_time = record.cpu_time
    lines.append(f"{'cpu_time':<10} {'-' if cpu_time is None else round(cpu_time, 2)}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrapermetrics",
        description="Measure and record the resource usage of scraper runs with GNU time.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.toml (defaults to conf/config.toml in the repository).",
    )
    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    command_parser = subparsers.add_parser(
        "command", help="Print the command line that measures TARGET."
    )
    command_parser.add_argument("output_path", help="File GNU time writes its report to.")
    command_parser.add_argument("target", nargs=argparse.REMAINDER, help="Command to measure.")

    run_parser = subparsers.add_parser(
        "run", help="Run TARGET under GNU time and record its resource usage."
    )
    run_parser.add_argument(
        "-o", "--output", type=Path,
        help="Report file (defaults to metrics.general.output_filename in --cwd).",
    )
    run_parser.add_argument("--cwd", type=Path, help="Working directory for TARGET.")
    run_parser.add_argument("target", nargs=argparse.REMAINDER, help="Command to measure.")

    load_parser = subparsers.add_parser(
        "load", help="Record the resource usage from an existing GNU time report."
    )
    load_parser.add_argument("path", type=Path, help="Report file to read.")

    show_parser = subparsers.add_parser("show", help="Print one stored record.")
    show_parser.add_argument("record_id", type=int, help="Identifier of the record.")

    subparsers.add_parser("list", help="Print every stored record.")
    subparsers.add_parser("summary", help="Print aggregate statistics over stored records.")

    return parser


def _target_command(parser: argparse.ArgumentParser, target: List[str]) -> str:
    if target and target[0] == "--":
        target = target[1:]
    if not target:
        parser.error("a target command is required")
    return " ".join(target)


def _run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    target = _target_command(parser, args.target)
    if not check_time_installed():
        handle_cli_error(
            FileNotFoundError(f"GNU time not found at {TIME_COMMAND}"),
            context="checking for GNU time",
            exit_code=1,
            logger=logger,
        )

    # GNU time resolves a relative -o path against the child's working directory.
    cwd = (args.cwd or Path.cwd()).resolve()
    if args.output is not None and args.output.is_absolute():
        output_path = args.output
    else:
        output_path = cwd / (args.output or get_config().metrics.output_filename)
    # A report left over from an earlier run must not be recorded twice.
    if output_path.exists():
        output_path.unlink()

    wrapped = command(target, str(output_path))
    logger.info(f"Running: {wrapped}")
    returncode, stdout, stderr = run_command(wrapped, cwd=cwd)
    logger.info(f"Measured command exited with code {returncode}")
    if stdout:
        sys.stdout.write(stdout)
    if stderr:
        sys.stderr.write(stderr)

    record = read_from_file(output_path, get_default_store())
    if record is None:
        logger.error(f"GNU time did not write a report to {output_path}")
        return 1
    print(format_record(record))
    return 0


def _load(args: argparse.Namespace) -> int:
    record = read_from_file(args.path, get_default_store())
    if record is None:
        logger.error(f"No report file at {args.path}")
        return 1
    print(format_record(record))
    return 0


def _show(args: argparse.Namespace) -> int:
    record = get_default_store().get(args.record_id)
    if record is None:
        logger.error(f"No metric record with id {args.record_id}")
        return 1
    print(format_record(record))
    return 0


def _list() -> int:
    with pl.Config(tbl_cols=-1, tbl_rows=-1):
        print(get_default_store().to_dataframe())
    return 0


def _summary() -> int:
    stats = summarize(get_default_store().to_dataframe())
    for key, value in stats.items():
        print(f"{key:<24} {'-' if value is None else value}")
    return 0


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Entry point of the `scrapermetrics` command.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Raises:
        SystemExit: With the subcommand's exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.subcommand == "command":
        print(command(_target_command(parser, args.target), args.output_path))
        sys.exit(0)

    if args.config is not None:
        set_config_path(args.config)
    try:
        app_config = get_config()
    except (FileNotFoundError, KeyError, ValueError, ValidationError) as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            logger=logger,
        )
    logging.getLogger().setLevel(app_config.metrics.log_level)
    logger.debug(f"Configuration: {get_config_info()}")
    logger.debug(f"Storage settings: {app_config.metrics.storage.to_dict()}")

    try:
        if args.subcommand == "run":
            status = _run(args, parser)
        elif args.subcommand == "load":
            status = _load(args)
        elif args.subcommand == "show":
            status = _show(args)
        elif args.subcommand == "list":
            status = _list()
        else:
            status = _summary()
    except (OSError, ValueError, pl.exceptions.PolarsError) as e:
        handle_cli_error(e, context=args.subcommand, exit_code=1, logger=logger)

    sys.exit(status)


if __name__ == "__main__":
    main_cli()
