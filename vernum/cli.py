"""vernum CLI — find the latest version of versioned files.

Usage:
    vernum list <directory> [--pattern <glob>] [--case-sensitive | --case-insensitive] [--json]
    vernum latest <directory> <name> [<name> ...]
    vernum parse <filename> [<filename> ...]
    vernum bump <version> [--down] [--separator <sep>]
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from vernum import __version__


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vernum",
        description="vernum: group versioned files and find the latest one",
        epilog="Versioned names look like <base>-<major>.<minor>.<revision>.<ext>",
    )
    parser.add_argument("--version", action="version", version=f"vernum {__version__}")
    parser.add_argument(
        "--log-level", type=str, default=None, help="Log level (default: VERNUM_LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- list ---
    list_parser = subparsers.add_parser("list", help="List version families in a directory")
    list_parser.add_argument("directory", type=str, help="Directory to scan")
    list_parser.add_argument(
        "--pattern", type=str, default=None, help="Only families whose original name matches"
    )
    _add_case_arguments(list_parser)
    list_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    # --- latest ---
    latest_parser = subparsers.add_parser("latest", help="Print the latest file of a family")
    latest_parser.add_argument("directory", type=str, help="Directory to scan")
    latest_parser.add_argument("names", nargs="+", help="Original or versioned file names")
    _add_case_arguments(latest_parser)

    # --- parse ---
    parse_parser = subparsers.add_parser("parse", help="Show how filenames are decomposed")
    parse_parser.add_argument("filenames", nargs="+", help="Filenames to decompose")
    parse_parser.add_argument("--json", action="store_true", help="Print JSON")

    # --- bump ---
    bump_parser = subparsers.add_parser("bump", help="Print the next or previous revision")
    bump_parser.add_argument("version_text", metavar="version", help="Version string")
    bump_parser.add_argument("--down", action="store_true", help="Step to the previous revision")
    bump_parser.add_argument(
        "--separator", type=str, default=None, help="Version separator (default: '.')"
    )

    return parser


def _add_case_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--case-sensitive",
        dest="case_sensitive",
        action="store_const",
        const=True,
        default=None,
        help="Compare original names case-sensitively",
    )
    group.add_argument(
        "--case-insensitive",
        dest="case_sensitive",
        action="store_const",
        const=False,
        help="Compare original names case-insensitively",
    )


def cmd_list(args: argparse.Namespace) -> int:
    """List the version families of a directory."""
    from vernum.report import groups_to_json, print_groups
    from vernum.versioning import glob_filter, list_directory_grouped

    name_filter = glob_filter(args.pattern) if args.pattern else None
    groups = list_directory_grouped(
        args.directory, name_filter, case_sensitive=args.case_sensitive
    )

    if args.json:
        print(groups_to_json(groups))
    else:
        print_groups(groups)
    return 0


def cmd_latest(args: argparse.Namespace) -> int:
    """Print the latest file for each requested name."""
    from vernum.versioning import find_latest

    missing = 0
    for name in args.names:
        latest = find_latest(args.directory, name, case_sensitive=args.case_sensitive)
        if latest is None:
            print(f"Error: No file found for {name} in {args.directory}", file=sys.stderr)
            missing += 1
            continue
        print(latest)
    return 1 if missing else 0


def cmd_parse(args: argparse.Namespace) -> int:
    """Show the decomposition of each filename."""
    from vernum.versioning import FilenameParts

    parts = [FilenameParts.decompose(name) for name in args.filenames]

    if args.json:
        print(json.dumps([p.to_dict() for p in parts], indent=2))
        return 0

    for p in parts:
        version = str(p.version) if p.version is not None else "-"
        print(f"{p.filename}")
        print(f"  base name:  {p.base_name}")
        print(f"  version:    {version}")
        print(f"  extensions: {p.extensions or '-'}")
        print(f"  original:   {p.original_name}")
    return 0


def cmd_bump(args: argparse.Namespace) -> int:
    """Print the next (or previous) revision of a version."""
    from vernum.core.config import get_config
    from vernum.versioning import VersionNumber

    separator = args.separator or get_config().version_separator
    version = VersionNumber.parse(args.version_text, separator)
    stepped = version.prev_revision() if args.down else version.next_revision()
    print(stepped)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    from vernum.core.config import get_config
    from vernum.core.logging_config import configure_logging

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level or get_config().log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command is None:
        parser.print_help()
        return 0

    dispatch = {
        "list": cmd_list,
        "latest": cmd_latest,
        "parse": cmd_parse,
        "bump": cmd_bump,
    }

    try:
        return dispatch[args.command](args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
