"""
cli_entry.py - CLI Entry Point

Parses arguments, runs the traversal and turns errors into exit codes
"""

import argparse
import logging
import sys
from typing import List, Optional

from .. import __version__
from ..core import (
    DiskFS, InvalidFilenameError, UnixizeOptions, load_snapshot, unixize,
)
from .cli_interactive import ask

PROG = "unf"

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Rename files and directories to unix-friendly names "
                    "(letters, digits, '.', '_' and '-')",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Ask before renaming each path
  unf "My Photo.JPG"

  # Rename a whole tree without asking
  unf -rf "My Files/"

  # Show what would be renamed
  unf -rd "My Files/"
"""
    )

    parser.add_argument("paths", nargs="+", metavar="PATH",
                        help="The paths of filenames to unixize")
    parser.add_argument("--recursive", "-r", action="store_true",
                        help="Recursively unixize filenames in directories")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--force", "-f", action="store_true",
                      help="Do not interactively prompt to rename each file")
    mode.add_argument("--dry-run", "-d", action="store_true",
                      help="Do not actually rename files, only print the renames that would happen")

    parser.add_argument("--quiet", "-q", action="store_true", help="Do not write to stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Write debug logs to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Log to stderr; debug level when verbose"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("unf")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def run(args: argparse.Namespace) -> int:
    """Run the traversal for parsed arguments"""
    options = UnixizeOptions.from_args(args)

    if options.dry_run:
        fs = load_snapshot(args.paths)
    else:
        fs = DiskFS()
    logger.debug("options: %s, backend: %s", options, type(fs).__name__)

    result = unixize(args.paths, fs, options, confirm=ask)
    logger.debug("%s", result.summary())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return run(args)
    except (OSError, InvalidFilenameError) as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
