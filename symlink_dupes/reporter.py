"""Find and print symlinks that share a normalized target."""

import logging
from typing import Dict, List

from .utils.types import DuplicatePair, LinkCollection


def find_duplicate_pairs(links: LinkCollection) -> List[DuplicatePair]:
    """Return every pair of links with identical targets.

    Each unordered pair appears exactly once, ordered the way an all-pairs
    scan would produce them: by the first link's position, then the second's.
    """
    positions: Dict[str, List[int]] = {}
    for i, link in enumerate(links):
        positions.setdefault(link["target_path"], []).append(i)

    pairs: List[DuplicatePair] = []
    for i, link in enumerate(links):
        for j in positions[link["target_path"]]:
            if j <= i:
                continue
            pairs.append(
                {
                    "link_a": link["link_path"],
                    "link_b": links[j]["link_path"],
                    "target": link["target_path"],
                }
            )
    return pairs


def format_pair(pair: DuplicatePair) -> str:
    """Get the report line for `pair`."""
    return (
        f"Duplicate symlink found: {pair['link_a']} and {pair['link_b']}"
        f" both link to {pair['target']}"
    )


def report(links: LinkCollection) -> List[DuplicatePair]:
    """Print a line for each duplicate pair, and return the pairs."""
    pairs = find_duplicate_pairs(links)
    logging.info(f"Found {len(pairs)} duplicate pair(s) among {len(links)} links.")

    if not pairs:
        print("No duplicate symlinks found")
    for pair in pairs:
        print(format_pair(pair))

    return pairs
