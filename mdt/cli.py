#!/usr/bin/env python3
"""
Command-line interface for mdt.

Converts tables between CSV and markdown:
    mdt md  -f data.csv --align lrc     CSV -> markdown table
    mdt csv -f table.md                 markdown table -> CSV
    mdt fmt -f table.md                 re-format a markdown table
"""

import argparse
import csv
import logging
import sys
from typing import List, Optional

from .tables.table_converter import TableConverter
from .tables.components.alignment_spec import parse_alignment_spec
from .tables.components.input_source import STDIN_PATH, open_input
from .utils.config import get_default_delimiter, get_default_no_header, get_log_level

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout carries only table output."""
    level = logging.DEBUG if verbose else getattr(logging, get_log_level())
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def _build_converter(args) -> TableConverter:
    return TableConverter(no_header=args.no_header, delimiter=args.delimiter)


def cmd_md(args):
    """Convert CSV data into a markdown table."""
    alignments = parse_alignment_spec(args.align or "")
    converter = _build_converter(args)
    with open_input(args.file) as stream:
        markdown = converter.csv_to_markdown(stream, alignments)
    print(markdown)


def cmd_csv(args):
    """Convert a markdown table into CSV."""
    converter = _build_converter(args)
    with open_input(args.file) as stream:
        converter.markdown_to_csv(stream, sys.stdout)


def cmd_fmt(args):
    """Re-format a markdown table."""
    # Only override alignments when explicitly given; otherwise keep the parsed ones
    alignments = parse_alignment_spec(args.align) if args.align else None
    converter = _build_converter(args)
    with open_input(args.file) as stream:
        markdown = converter.format_markdown(stream, alignments)
    print(markdown)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its global options and subcommands."""
    parser = argparse.ArgumentParser(
        prog="mdt",
        description="Convert markdown tables between markdown and the CSV format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mdt md -f people.csv
  mdt md -f people.csv --align lrc
  cat table.md | mdt csv
  mdt --delimiter ';' csv -f table.md
  mdt fmt -f table.md --align c
        """
    )

    parser.add_argument(
        "-f", "--file",
        default=STDIN_PATH,
        metavar="FILE",
        help="Path to the FILE from which to read or - to read from stdin (default: -)"
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        default=get_default_no_header(),
        help="Do not interpret the first row as the table header"
    )
    parser.add_argument(
        "--delimiter",
        default=get_default_delimiter(),
        help="CSV field delimiter character (default: ,)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    md_parser = subparsers.add_parser("md", help="Convert CSV formatted data into a markdown table")
    md_parser.add_argument(
        "--align",
        default=None,
        help="Sequence of alignment characters for each column: "
             "default (d), left (l), right (r) and center (c)"
    )

    subparsers.add_parser("csv", help="Convert a markdown table into the CSV format")

    fmt_parser = subparsers.add_parser("fmt", help="Re-format a markdown table")
    fmt_parser.add_argument(
        "--align",
        default=None,
        help="Override the alignment of the table (same characters as for md)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.verbose)

    command_handlers = {
        "md": cmd_md,
        "csv": cmd_csv,
        "fmt": cmd_fmt,
    }

    try:
        command_handlers[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except (ValueError, OSError, csv.Error) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
