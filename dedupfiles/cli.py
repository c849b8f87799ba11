"""Command-line entry point for finding and recycling duplicate files."""

from __future__ import annotations

import argparse
import os
import sys

from .recycle import RecycleBin
from .system import DeduplicationSystem

_RULE = "=" * 80
_THIN_RULE = "-" * 79


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dedupfiles",
        description="Find files with identical contents and recycle the extras.",
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory to scan (default: .)"
    )
    parser.add_argument(
        "--buckets", type=int, default=1000, help="number of hash buckets"
    )
    parser.add_argument(
        "--recycle-bin",
        help="directory duplicates are moved to (default: DIRECTORY/.recycle-bin)",
    )
    parser.add_argument(
        "-y", "--yes", action="store_true", help="recycle duplicates without asking"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the deduplicator and return the process exit status."""
    args = _build_parser().parse_args(argv)
    if args.buckets <= 0:
        print("error: --buckets must be a positive integer", file=sys.stderr)
        return 2
    bin_dir = args.recycle_bin or os.path.join(args.directory, ".recycle-bin")

    print(_RULE)
    print("                           FILE DEDUPLICATION SYSTEM")
    print(_RULE)
    print("\n \t\t Initializing the File Deduplication System")
    system = DeduplicationSystem(args.directory, args.buckets)

    print("\nStep 1: Scanning and processing files in the directory...")
    print(_THIN_RULE)
    try:
        system.process_files()
    except OSError:
        print(f"Error opening directory: {args.directory}", file=sys.stderr)
        return 1
    print("\n\nFile scanning and processing completed successfully!")

    print("\n\nStep 2: Identifying and Handling duplicates...")
    print(_THIN_RULE)
    confirm = (lambda prompt: "y") if args.yes else _ask
    system.handle_duplicates(confirm, RecycleBin(bin_dir))

    print("\n" + "=" * 79)
    print("                  File Deduplication Process Completed")
    print("=" * 79 + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())