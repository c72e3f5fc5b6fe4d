"""
cli_entry.py - CLI Entry Point

Parses flags into RenameOptions, builds the plan and applies it.

Exit codes:
    0  success (also when the user declines at the prompt)
    1  missing or invalid options
    2  traversal or transfer failure
"""

import argparse
import logging
import os
import sys
import time
from typing import List, Optional

from colorama import init, deinit, Fore, Style

from sweep_core import (
    RenameOptions, TransferStrategy, walk, execute_transfer,
    ConfigurationError, TraversalError, TransferError, __version__,
)
from .cli_interactive import can_proceed, report_plan, print_plan

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 2

logger = logging.getLogger(__name__)


class SweepArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with EXIT_USAGE instead of 2"""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = SweepArgumentParser(
        prog="sweep-rename",
        description="Remove or replace a substring in file names across a directory tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Preview removing "_draft" from every file name
  sweep-rename -p ./docs -s _draft -d -v

  # Replace "IMG" with "photo" in .jpg files, asking first
  sweep-rename -p ./photos -s IMG --replace photo -t .jpg -i

  # Regex mode, copying instead of renaming
  sweep-rename -p ./data -s "a.*a" --replace bbb -r --action copy
"""
    )

    parser.add_argument("-p", "--path", type=str, default="", help="Path to the root directory (required)")
    parser.add_argument("-s", "--search", type=str, default="", help="String (or regex with -r) to find (required)")
    parser.add_argument("-t", "--type", dest="extension", type=str, default="",
                        help="Only modify files with this extension (e.g., .txt)")
    parser.add_argument("--replace", type=str, default="", help="Replacement string (default: remove the match)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--dry-run", action="store_true", help="Preview only, do not execute")
    parser.add_argument("-i", "--interactive", action="store_true", help="Ask for confirmation before executing")
    parser.add_argument("-r", "--regex", action="store_true", help="Treat the search string as a regular expression")
    parser.add_argument("--action", choices=[s.value for s in TransferStrategy],
                        default=TransferStrategy.RENAME.value, help="Transfer action (default: rename)")
    parser.add_argument("--resolve-deletions", action="store_true",
                        help="Add _1, _2... suffixes for existing files even when removing the match")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def setup_logging(debug: bool = False) -> None:
    """Configure root logging; SWEEP_DEBUG in the environment also enables debug"""
    level = logging.DEBUG if debug or os.environ.get("SWEEP_DEBUG") else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def build_options(args: argparse.Namespace) -> RenameOptions:
    """Map parsed arguments onto RenameOptions"""
    return RenameOptions(
        root=args.path,
        search=args.search,
        extension=args.extension,
        replace=args.replace,
        regex=args.regex,
        resolve_deletions=args.resolve_deletions,
    )


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Handle one invocation"""
    if not args.path or not args.search:
        parser.print_usage()
        print(f"{Fore.RED}Error: -p/--path and -s/--search are required{Style.RESET_ALL}")
        return EXIT_USAGE

    options = build_options(args)
    try:
        options.validate()
    except ConfigurationError as e:
        print(f"{Fore.RED}Error: {e}{Style.RESET_ALL}")
        return EXIT_USAGE

    strategy = TransferStrategy(args.action)
    logger.debug("Options: %s, action: %s", options, strategy.value)

    try:
        plan = walk(options)
    except TraversalError as e:
        print(f"{Fore.RED}walk dir: {e}{Style.RESET_ALL}")
        return EXIT_FAILURE

    if args.dry_run:
        report_plan(plan, verbose=args.verbose)
        return EXIT_OK

    if args.interactive:
        print(f"Found {len(plan)} file(s). Proceed?(y/n) ", end="", flush=True)
        if not can_proceed():
            print("Aborted.")
            return EXIT_OK

    if args.verbose:
        print_plan(plan)

    start = time.perf_counter()
    try:
        processed = execute_transfer(plan, strategy)
    except TransferError as e:
        print(f"{Fore.RED}{strategy.value.capitalize()}: {e}{Style.RESET_ALL}")
        print(f"{e.processed} file(s) were {strategy.verb}.")
        return EXIT_FAILURE

    if args.verbose:
        elapsed = time.perf_counter() - start
        print(f"{strategy.verb.capitalize()} {processed} file(s) in {elapsed:.3f}s.")

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    # Colors are stripped automatically when stdout is not a terminal
    init()
    try:
        return run(args, parser)
    finally:
        deinit()


if __name__ == "__main__":
    sys.exit(main())
