"""Lexical normalization of symlink target strings."""

from typing import Optional

SEPARATOR = "/"


class NormalizationError(ValueError):
    """Raised when there is no path to normalize."""


def normalize_path(path: Optional[str]) -> str:
    """Collapse repeated separators and drop any trailing separator.

    Never touches the filesystem: `.`/`..` are kept as-is and nothing is
    resolved. The root, `"/"`, is left alone.

    Examples:
        "a//b///c" -> "a/b/c"
        "/x//y/"   -> "/x/y"
        "//"       -> "/"
    """
    if not path:
        raise NormalizationError(f"Cannot normalize an empty path ({path!r})")

    chars = []
    for char in path:
        if char == SEPARATOR and chars and chars[-1] == SEPARATOR:
            continue
        chars.append(char)
    collapsed = "".join(chars)

    # an all-separator path collapses to one separator; keep it
    return collapsed.rstrip(SEPARATOR) or SEPARATOR
