"""Memoised Fibonacci numbers and the reader for the index file."""

import re
import sys
from functools import lru_cache
from pathlib import Path

MAX_INDEX = 90
DEFAULT_INPUT = "data.txt"

_SINGLE_INTEGER = re.compile(r"\s*([+-]?\d+)\s*")


@lru_cache(maxsize=None)
def _fib(n):
    if n <= 1:
        return n
    return _fib(n - 1) + _fib(n - 2)


def fib(n):
    """Return F(n), computing each earlier term only once."""
    if n < 0:
        raise ValueError(f"Fibonacci index must not be negative: {n}")
    # Fill the cache from the bottom so the recursion never runs deep.
    for k in range(n + 1):
        _fib(k)
    return _fib(n)


def read_index(text):
    """Parse text holding exactly one integer between 0 and MAX_INDEX."""
    match = _SINGLE_INTEGER.fullmatch(text)
    if match is None:
        raise ValueError("input must be a single integer")
    n = int(match.group(1))
    if not 0 <= n <= MAX_INDEX:
        raise ValueError(f"index must be between 0 and {MAX_INDEX}: {n}")
    return n


def main(argv=None):
    """Print F(n) for the index in the input file, or WRONG."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        n = read_index(path.read_text())
    except (OSError, ValueError, UnicodeDecodeError):
        print("WRONG")
        return 0
    print(fib(n))
    return 0


if __name__ == "__main__":
    sys.exit(main())