"""Recursively collect symbolic links under a directory."""

import logging
import os
import stat
from typing import Optional

from . import defaults
from .normalizer import SEPARATOR, NormalizationError, normalize_path
from .utils.types import LinkCollection, LinkRecord


class ScanError(Exception):
    """Raised when any part of a directory scan fails.

    The scan is all-or-nothing, so this aborts the whole walk.
    """

    def __init__(
        self, path: str, operation: str, error: Optional[BaseException] = None
    ) -> None:
        self.path = path
        self.operation = operation
        self.error = error
        super().__init__(self._message())

    def _message(self) -> str:
        if isinstance(self.error, OSError) and self.error.strerror:
            return f"{self.operation}({self.path}): {self.error.strerror}"
        if self.error is not None:
            return f"{self.operation}({self.path}): {self.error}"
        return f"{self.operation}: {self.path}"


class UnsupportedFileTypeError(ScanError):
    """Raised for an entry that is not a file, directory, nor symlink."""

    def __init__(self, path: str, kind: str = "unknown") -> None:
        self.kind = kind
        super().__init__(path, f"Unhandled file type ({kind})")


def file_kind(mode: int) -> str:
    """Name the non-processable file type of `mode`."""
    if stat.S_ISSOCK(mode):
        return "socket"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISBLK(mode):
        return "block device"
    if stat.S_ISCHR(mode):
        return "char device"
    return "unknown"


def read_link_record(full_path: str, verbose: bool = defaults.VERBOSE) -> LinkRecord:
    """Read the symlink at `full_path` and normalize its target."""
    if verbose:
        print(f"Symbolic link: {full_path}")
    logging.debug(f"Symbolic link: {full_path}")

    try:
        raw_target = os.readlink(full_path)
    except OSError as e:
        raise ScanError(full_path, "readlink", e) from e

    try:
        target_path = normalize_path(raw_target)
    except NormalizationError as e:
        raise ScanError(full_path, "normalize", e) from e

    if verbose:
        print(f"{full_path} links to {target_path}")
    logging.debug(f"{full_path} links to {target_path}")

    return {"link_path": full_path, "target_path": target_path}


def _collect_entry(
    dir_path: str, name: str, verbose: bool, links: LinkCollection
) -> None:
    """Classify one directory entry and append whatever links it holds."""
    full_path = f"{dir_path}{SEPARATOR}{name}"

    try:
        mode = os.lstat(full_path).st_mode
    except OSError as e:
        raise ScanError(full_path, "lstat", e) from e

    if stat.S_ISREG(mode):
        return
    if stat.S_ISLNK(mode):
        links.append(read_link_record(full_path, verbose))
        return
    if stat.S_ISDIR(mode):
        # directories are never recorded themselves, only what's in them
        links.extend(collect_symlinks(full_path, verbose))
        return

    logging.debug(f"Non-processable file: {full_path}")
    raise UnsupportedFileTypeError(full_path, file_kind(mode))


def collect_symlinks(
    dir_path: str, verbose: bool = defaults.VERBOSE
) -> LinkCollection:
    """Return every symlink rooted at `dir_path`, in discovery order.

    Symlinks are never followed. Any error, at any depth, raises
    `ScanError` and nothing collected so far is returned.
    """
    if not dir_path:
        raise ScanError(dir_path, "scandir", ValueError("empty directory path"))

    if verbose:
        print(f"Opening directory {dir_path}")
    logging.debug(f"Scanning directory: {dir_path}...")

    try:
        scan = os.scandir(dir_path)
    except OSError as e:
        raise ScanError(dir_path, "opendir", e) from e

    links: LinkCollection = []
    try:
        with scan:
            for dir_entry in scan:  # no '.' nor '..'
                _collect_entry(dir_path, dir_entry.name, verbose, links)
    # entry failures are already ScanErrors, so this is readdir/closedir
    except OSError as e:
        raise ScanError(dir_path, "readdir", e) from e

    logging.debug(f"Scan finished, directory: {dir_path} ({len(links)} links)")
    return links
