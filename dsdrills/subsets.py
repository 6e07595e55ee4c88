"""Enumeration of the subsets of the first n lower-case letters."""

import re
import string
import sys
from pathlib import Path

MAX_ELEMENTS = 26
DEFAULT_INPUT = "data.txt"

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def subsets(n):
    """Yield every subset of the first n letters, the empty one first.

    Subsets come in depth-first order, taking an element before leaving it out.
    """
    if not 1 <= n <= MAX_ELEMENTS:
        raise ValueError(f"element count must be between 1 and {MAX_ELEMENTS}: {n}")
    return _extend((), 0, n)


def _extend(prefix, start, n):
    yield prefix
    for index in range(start, n):
        yield from _extend(prefix + (string.ascii_lowercase[index],), index + 1, n)


def format_subset(subset):
    """Join the letters of a subset with single spaces."""
    return " ".join(subset)


def _read_count(text):
    match = _LEADING_INTEGER.match(text)
    if match is None:
        raise ValueError("input must start with an integer")
    return int(match.group(1))


def main(argv=None):
    """Print all subsets for the count in the input file, or WRONG."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        listing = subsets(_read_count(path.read_text()))
    except (OSError, ValueError, UnicodeDecodeError):
        print("WRONG")
        return 0
    for subset in listing:
        print(format_subset(subset))
    return 0


if __name__ == "__main__":
    sys.exit(main())