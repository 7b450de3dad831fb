"""Type hints."""

from typing import List, TypedDict

Path = str


class LinkRecord(TypedDict):
    """One symbolic link found during a scan."""

    link_path: Path  # "<parent dir>/<entry name>", as joined
    target_path: Path  # normalized readlink() result


class DuplicatePair(TypedDict):
    """Two links sharing a normalized target.

    `link_a` was discovered before `link_b`.
    """

    link_a: Path
    link_b: Path
    target: Path


# discovery order
LinkCollection = List[LinkRecord]
