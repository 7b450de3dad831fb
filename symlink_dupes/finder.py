"""Find duplicate symlinks under a directory."""

import logging
from typing import List

from . import defaults
from .collector import collect_symlinks
from .reporter import report
from .utils.types import DuplicatePair


class NoLinksFoundError(Exception):
    """Raised when a scan finds no symlinks at all."""

    def __init__(self, start_dir: str) -> None:
        self.start_dir = start_dir
        super().__init__(f"No links found under {start_dir}")


def find_duplicate_symlinks(
    start_dir: str, verbose: bool = defaults.VERBOSE
) -> List[DuplicatePair]:
    """Scan `start_dir`, recursively, then report duplicate symlinks.

    Zero symlinks is its own failure (`NoLinksFoundError`), separate from
    finding symlinks but no duplicates.
    """
    logging.info(f"Collecting symlinks under {start_dir}...")

    links = collect_symlinks(start_dir, verbose)
    if not links:
        raise NoLinksFoundError(start_dir)

    logging.info(f"Found {len(links)} symlinks under {start_dir}.")
    return report(links)
