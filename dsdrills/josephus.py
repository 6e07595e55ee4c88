"""The Josephus problem solved with a list and with a rotating ring."""

import re
import sys
from collections import deque
from pathlib import Path

MIN_PEOPLE = 3
MAX_PEOPLE = 100
DEFAULT_INPUT = "input.txt"

_TWO_INTEGERS = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)\s*")


def _check(n, m):
    if n < 0:
        raise ValueError(f"number of people must not be negative: {n}")
    if m < 1:
        raise ValueError(f"step must be at least 1: {m}")


def josephus_array(n, m):
    """Return the elimination order of people 1..n, counting m each round."""
    _check(n, m)
    people = list(range(1, n + 1))
    order = []
    index = 0
    while people:
        index = (index + m - 1) % len(people)
        order.append(people.pop(index))
    return order


def josephus_ring(n, m):
    """Return the same elimination order, computed on a rotating ring."""
    _check(n, m)
    ring = deque(range(1, n + 1))
    order = []
    while ring:
        ring.rotate(-(m - 1))
        order.append(ring.popleft())
    return order


def read_parameters(text):
    """Parse 'n m' with MIN_PEOPLE <= n <= MAX_PEOPLE and 1 <= m <= n."""
    match = _TWO_INTEGERS.fullmatch(text)
    if match is None:
        raise ValueError("input must be exactly two integers")
    n, m = int(match.group(1)), int(match.group(2))
    if not MIN_PEOPLE <= n <= MAX_PEOPLE:
        raise ValueError(f"number of people must be between {MIN_PEOPLE} and {MAX_PEOPLE}: {n}")
    if not 1 <= m <= n:
        raise ValueError(f"step must be between 1 and {n}: {m}")
    return n, m


def main(argv=None):
    """Print the elimination order twice, once per method, or WRONG."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        n, m = read_parameters(path.read_text())
    except (OSError, ValueError, UnicodeDecodeError):
        print("WRONG")
        return 1
    for solve in (josephus_array, josephus_ring):
        print(" ".join(str(p) for p in solve(n, m)))
    return 0


if __name__ == "__main__":
    sys.exit(main())