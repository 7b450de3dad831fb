"""Command-line entry point for the duplicate-symlink finder."""

import argparse
import logging
from typing import Any, List, NoReturn, Optional, Sequence, Union

import coloredlogs  # type: ignore[import]

from . import defaults
from .collector import ScanError
from .finder import NoLinksFoundError, find_duplicate_symlinks

PROG = "find-dupe-symlinks"

USAGE = f"""Usage: {PROG} <arguments>

  -d <directory>   The directory to look in.

  [-v]             Enable verbose output.
"""


class ConfigError(Exception):
    """Raised for bad or missing command-line arguments."""


class _ArgumentParser(argparse.ArgumentParser):
    """Raise `ConfigError` instead of exiting with argparse's status 2."""

    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


class _StartDirAction(argparse.Action):  # pylint: disable=R0903
    """Store `-d` once, and only if it's non-empty."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if not values:
            raise ConfigError("You must provide a parameter to -d")
        if getattr(namespace, self.dest, None) is not None:
            raise ConfigError("You specified -d twice.")
        setattr(namespace, self.dest, values)


def get_parser() -> argparse.ArgumentParser:
    """Get the parser for the finder's arguments."""
    parser = _ArgumentParser(
        prog=PROG,
        description="Find symbolic links, under a directory, which point to "
        "the same target.",
        epilog="Notes: (1) symbolic links are never followed. "
        "(2) targets are compared lexically, after collapsing repeated and "
        "trailing slashes.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        add_help=False,  # only -d, -v & -l; anything else is a usage failure
    )
    parser.add_argument(
        "-d",
        dest="start_dir",
        metavar="DIRECTORY",
        default=defaults.START_DIR,
        action=_StartDirAction,
        help="the directory to look in",
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        default=defaults.VERBOSE,
        action="store_true",
        help="enable verbose output",
    )
    parser.add_argument(
        "-l",
        "--log",
        default=defaults.LOG_LEVEL,
        help="the output logging level",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse and validate `argv`, raising `ConfigError` if it's no good."""
    args = get_parser().parse_args(argv)
    if args.start_dir is None:
        raise ConfigError("You must specify a directory to start in (-d).")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Find duplicate symlinks, and return the exit code."""
    try:
        args = parse_args(argv)
    except ConfigError as e:
        print(e)
        print(USAGE)
        return defaults.EXIT_FAILURE

    coloredlogs.install(level=args.log.upper())
    for arg, val in vars(args).items():
        logging.info(f"{arg}: {val}")

    try:
        find_duplicate_symlinks(args.start_dir, args.verbose)
    except NoLinksFoundError as e:
        logging.warning(e)
        print("No links found")
        return defaults.EXIT_FAILURE
    except ScanError as e:
        logging.error(f"Scan aborted, {e.__class__.__name__}: {e}")
        print(f"Scan failed: {e}")
        return defaults.EXIT_FAILURE

    return defaults.EXIT_SUCCESS
