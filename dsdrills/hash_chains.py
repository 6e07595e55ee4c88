"""Hash table of chains kept sorted by the full hash value of their keys."""

import sys
from bisect import bisect_left
from itertools import islice
from operator import itemgetter
from pathlib import Path

from .hash_open import string_hash

DEFAULT_INPUT = "input2.txt"
DEFAULT_DIVISOR = 97
LOOKUPS = ("Alice", "Bob", "Kele", "Mimi")
REMOVALS = ("Alice", "Lihua", "Bob", "Kele", "Mimi")

_HASH = itemgetter(0)


class SortedChain:
    """Key/value entries ordered by the hash of their key."""

    def __init__(self):
        self._entries = []

    def _locate(self, key):
        digest = string_hash(key)
        position = bisect_left(self._entries, digest, key=_HASH)
        found = (
            position < len(self._entries)
            and self._entries[position][0] == digest
            and self._entries[position][1] == key
        )
        return digest, position, found

    def find(self, key):
        """Return the value stored for key, or None if it is absent."""
        _, position, found = self._locate(key)
        return self._entries[position][2] if found else None

    def insert(self, key, value):
        """Store value under key, replacing any earlier value."""
        digest, position, found = self._locate(key)
        if found:
            self._entries[position] = (digest, key, value)
        else:
            self._entries.insert(position, (digest, key, value))

    def erase(self, key):
        """Remove key if present."""
        _, position, found = self._locate(key)
        if found:
            del self._entries[position]

    def __iter__(self):
        return ((key, value) for _, key, value in self._entries)

    def __len__(self):
        return len(self._entries)


class HashChainsWithTails:
    """A table of sorted chains, one per bucket."""

    def __init__(self, divisor=DEFAULT_DIVISOR):
        if divisor < 1:
            raise ValueError(f"divisor must be positive: {divisor}")
        self.divisor = divisor
        self._buckets = [SortedChain() for _ in range(divisor)]

    def home_bucket(self, key):
        """Return the index of the bucket that holds key."""
        return string_hash(key) % self.divisor

    def find(self, key):
        """Return the value stored for key, or None if it is absent."""
        return self._buckets[self.home_bucket(key)].find(key)

    def insert(self, key, value):
        """Store value under key, replacing any earlier value."""
        self._buckets[self.home_bucket(key)].insert(key, value)

    def erase(self, key):
        """Remove key if present."""
        self._buckets[self.home_bucket(key)].erase(key)

    def items(self):
        """Yield key/value pairs bucket by bucket, each bucket in hash order."""
        for chain in self._buckets:
            yield from chain

    def __len__(self):
        return sum(len(chain) for chain in self._buckets)


def _read_records(text):
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    count = int(tokens[0])
    stream = iter(tokens[1:])
    records = list(islice(zip(stream, stream), count))
    if len(records) < count:
        raise ValueError(f"expected {count} records, found {len(records)}")
    return [(name, int(score)) for name, score in records]


def _print_items(table):
    for key, value in table.items():
        print(f"{key}  {value}")


def main(argv=None):
    """Load name/score records, list them, look some up and erase some."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        records = _read_records(path.read_text())
    except (OSError, ValueError, UnicodeDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    table = HashChainsWithTails(8)
    for name, score in records:
        table.insert(name, score)
    print()
    _print_items(table)
    print()
    for name in LOOKUPS:
        score = table.find(name)
        print(f"{name}: {'not found' if score is None else score}")
    for name in REMOVALS:
        table.erase(name)
    _print_items(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())