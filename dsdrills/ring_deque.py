"""A deque with a fixed capacity and a small command interpreter for it."""

import sys
from collections import deque
from pathlib import Path

DEFAULT_CAPACITY = 30
COMMAND_CAPACITY = 10
DEFAULT_INPUT = "input.txt"


class BoundedDeque:
    """A double-ended queue that refuses to grow beyond its capacity."""

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be positive: {capacity}")
        self.capacity = capacity
        self._items = deque()

    def _check_room(self):
        if self.is_full():
            raise OverflowError("push onto full deque")

    def _check_items(self, action):
        if not self._items:
            raise IndexError(f"{action} on empty deque")

    def push_front(self, item):
        """Add an item at the left end."""
        self._check_room()
        self._items.appendleft(item)

    def push_back(self, item):
        """Add an item at the right end."""
        self._check_room()
        self._items.append(item)

    def pop_front(self):
        """Remove and return the leftmost item."""
        self._check_items("pop")
        return self._items.popleft()

    def pop_back(self):
        """Remove and return the rightmost item."""
        self._check_items("pop")
        return self._items.pop()

    def front(self):
        """Return the leftmost item."""
        self._check_items("get")
        return self._items[0]

    def back(self):
        """Return the rightmost item."""
        self._check_items("get")
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def is_full(self):
        return len(self._items) == self.capacity

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


_ADDERS = {"AddLeft": BoundedDeque.push_front, "AddRight": BoundedDeque.push_back}
_REMOVERS = {"DeleteLeft": BoundedDeque.pop_front, "DeleteRight": BoundedDeque.pop_back}
_PEEKS = {"Left": BoundedDeque.front, "Right": BoundedDeque.back}


def _contents(dq):
    return " ".join(str(item) for item in dq)


def _next_int(stream, command):
    try:
        return int(next(stream))
    except (StopIteration, ValueError):
        raise ValueError(f"{command} needs an integer argument") from None


def run_commands(tokens, capacity=COMMAND_CAPACITY):
    """Run deque commands and return the lines they print.

    An add on a full deque or a delete on an empty one reports FULL or
    EMPTY and ends the run; End ends it with an empty line.
    """
    dq = BoundedDeque(capacity)
    output = []
    stream = iter(tokens)
    for command in stream:
        if command == "End":
            output.append("")
            break
        if command in _ADDERS:
            value = _next_int(stream, command)
            if dq.is_full():
                output.append("FULL")
                break
            _ADDERS[command](dq, value)
            output.append(_contents(dq))
        elif command in _REMOVERS:
            if dq.is_empty():
                output.append("EMPTY")
                break
            _REMOVERS[command](dq)
            output.append(_contents(dq))
        elif command in _PEEKS:
            output.append("EMPTY" if dq.is_empty() else str(_PEEKS[command](dq)))
        elif command == "IsEmpty":
            output.append("YES" if dq.is_empty() else "NO")
        elif command == "IsFull":
            output.append("YES" if dq.is_full() else "NO")
        else:
            output.append("WRONG")
    return output


def main(argv=None):
    """Run the commands in the input file and print their output."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        lines = run_commands(path.read_text().split())
    except (OSError, ValueError, UnicodeDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())