"""Command-line interface for the ClickUp timer helper."""

import argparse
import sys
from pathlib import Path

from . import __version__
from .app import format_cli_output, run
from .config import ConfigError, load_settings
from .types import EXIT_CONFIG


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clk", description="ClickUp helper CLI")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, help="Console log level (default: WARNING)")
    parser.add_argument("--log-file", type=Path, default=None, help="Optional path for detailed logs")
    parser.add_argument("--log-file-level", default=None, help="Log level for the log file (default: DEBUG)")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("status", help="Show current running timer")
    subparsers.add_parser("meetings", help="Switch timer to the 'Meetings' task")
    subparsers.add_parser("tasks", help="List tasks assigned to me")
    switch_parser = subparsers.add_parser("switch", help="Switch to a task by ID")
    switch_parser.add_argument("query", help="Task ID to start tracking")
    switch_parser.add_argument("-d", "--description", default=None, help="Description for the time entry")
    subparsers.add_parser("back", help="Switch to the previous task (most recent time entry before current)")
    subparsers.add_parser("stop", help="Stop the current timer")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        return EXIT_CONFIG

    try:
        settings = load_settings(
            log_level=args.log_level,
            log_file=args.log_file,
            log_file_level=args.log_file_level,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    result = run(
        args.command,
        settings,
        query=getattr(args, "query", None),
        description=getattr(args, "description", None),
    )
    out, err = format_cli_output(result)
    if out:
        print(out)
    if err:
        print(err, file=sys.stderr)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
