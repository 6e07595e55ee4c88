"""Open-addressing hash table that remembers which buckets were never used."""

import sys
from itertools import islice
from pathlib import Path

DEFAULT_INPUT = "input1.txt"
DEFAULT_DIVISOR = 11
REARRANGE_RATIO = 0.6
LOOKUPS = ("Alice", "Bob", "Kele", "Mimi")
REMOVALS = ("Alice", "Lihua", "Bob", "Kele", "Mimi")

_HASH_MASK = (1 << 64) - 1


class TableFullError(Exception):
    """Raised when no bucket can take a new key."""


def string_hash(key):
    """Hash a string as value = 5 * value + byte, wrapping at 64 bits."""
    value = 0
    for byte in key.encode():
        value = (5 * value + byte) & _HASH_MASK
    return value


class OpenHashTable:
    """Linear-probing table whose deleted buckets stay marked as used.

    A search stops at a bucket that was never used, so deleted buckets keep
    probe chains intact.  When enough buckets have been vacated the table is
    rebuilt and those marks are cleared.
    """

    def __init__(self, divisor=DEFAULT_DIVISOR):
        if divisor < 1:
            raise ValueError(f"divisor must be positive: {divisor}")
        self.divisor = divisor
        self._slots = [None] * divisor
        self._never_used = [True] * divisor
        self._size = 0

    def _home(self, key):
        return string_hash(key) % self.divisor

    def _search(self, key):
        home = self._home(key)
        for offset in range(self.divisor):
            bucket = (home + offset) % self.divisor
            slot = self._slots[bucket]
            if self._never_used[bucket] or (slot is not None and slot[0] == key):
                return bucket
        return None

    def find(self, key):
        """Return the value stored for key, or None if it is absent."""
        bucket = self._search(key)
        if bucket is None or self._slots[bucket] is None:
            return None
        return self._slots[bucket][1]

    def insert(self, key, value):
        """Store value under key, replacing any earlier value."""
        bucket = self._search(key)
        if bucket is None:
            raise TableFullError("hash table is full")
        if self._slots[bucket] is None:
            self._never_used[bucket] = False
            self._size += 1
        self._slots[bucket] = (key, value)

    def remove(self, key):
        """Delete key, then rebuild the table if too many buckets are vacated."""
        bucket = self._search(key)
        if bucket is None or self._slots[bucket] is None:
            raise KeyError(key)
        self._slots[bucket] = None
        self._size -= 1
        self.rearrange()

    def rearrange(self):
        """Rebuild the table when vacated buckets reach the ratio; tell whether it did."""
        vacated = sum(
            1
            for slot, never in zip(self._slots, self._never_used)
            if slot is None and not never
        )
        if self.divisor * REARRANGE_RATIO > vacated:
            return False
        slots = [None] * self.divisor
        for entry in self._slots:
            if entry is None:
                continue
            bucket = self._home(entry[0])
            while slots[bucket] is not None:
                bucket = (bucket + 1) % self.divisor
            slots[bucket] = entry
        self._slots = slots
        self._never_used = [slot is None for slot in slots]
        return True

    def __len__(self):
        return self._size


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


def main(argv=None):
    """Load name/score records, look some up and remove some."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        records = _read_records(path.read_text())
    except (OSError, ValueError, UnicodeDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    table = OpenHashTable(7)
    try:
        for name, score in records:
            table.insert(name, score)
    except TableFullError as exc:
        print(exc)
    print()
    try:
        for name in LOOKUPS:
            score = table.find(name)
            if score is None:
                raise KeyError(name)
            print(score)
        for name in REMOVALS:
            table.remove(name)
            print(f"removed {name}")
    except KeyError as exc:
        print(f"key not found: {exc.args[0]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())