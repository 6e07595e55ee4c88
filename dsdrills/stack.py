"""A linked stack and removal of every occurrence of an item from it."""

import sys
from pathlib import Path

DEFAULT_INPUT = "input2.txt"


class LinkedStack:
    """A last-in first-out stack built from linked cells."""

    def __init__(self):
        self._top = None
        self._size = 0

    def push(self, item):
        """Put an item on top."""
        self._top = (item, self._top)
        self._size += 1

    def pop(self):
        """Remove and return the top item."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        item, self._top = self._top
        self._size -= 1
        return item

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._top is not None


def delete_all(stack, item):
    """Remove every occurrence of item, keeping the others in their order."""
    kept = LinkedStack()
    while stack:
        popped = stack.pop()
        if popped != item:
            kept.push(popped)
    while kept:
        stack.push(kept.pop())


def main(argv=None):
    """Read a target and characters, drop the target, print from the top down."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        text = path.read_text()
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    chars = [c for c in text if not c.isspace()]
    stack = LinkedStack()
    if chars:
        target, *rest = chars
        for c in rest:
            stack.push(c)
        delete_all(stack, target)
    popped = []
    while stack:
        popped.append(stack.pop())
    print(" ".join(popped))
    return 0


if __name__ == "__main__":
    sys.exit(main())