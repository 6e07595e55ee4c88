"""Linked chains: a singly linked chain and a circular doubly linked one."""

from itertools import cycle, islice, zip_longest

_MISSING = object()


class _Node:
    __slots__ = ("item", "next")

    def __init__(self, item, next_node=None):
        self.item = item
        self.next = next_node


class Chain:
    """A singly linked list that keeps a pointer to its last node."""

    def __init__(self, items=()):
        self._head = None
        self._tail = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_back(self, item):
        """Append an item at the end."""
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert(self, item, index):
        """Insert an item so that it ends up at position index."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index out of range: {index}")
        if index == self._size:
            self.push_back(item)
            return
        if index == 0:
            self._head = _Node(item, self._head)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(item, before.next)
        self._size += 1

    def _node_at(self, index):
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def get(self, index):
        """Return the item at position index."""
        if not 0 <= index < self._size:
            raise IndexError(f"get index out of range: {index}")
        return self._node_at(index).item

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self):
        return self._size

    def __str__(self):
        return " ".join(str(item) for item in self)


class _Link:
    __slots__ = ("item", "prev", "next")

    def __init__(self, item=None):
        self.item = item
        self.prev = self
        self.next = self


class CircularChain:
    """A circular doubly linked list with a header node."""

    def __init__(self, items=()):
        self._head = _Link()
        self._size = 0
        for item in items:
            self.push_back(item)

    def _link_before(self, node, anchor):
        node.prev = anchor.prev
        node.next = anchor
        anchor.prev.next = node
        anchor.prev = node
        self._size += 1

    def _node_at(self, index):
        # The header stands at position -1 and at position len(self).
        node = self._head
        if index < self._size // 2:
            for _ in range(index + 1):
                node = node.next
        else:
            for _ in range(self._size - index):
                node = node.prev
        return node

    def push_back(self, item):
        """Append an item at the end."""
        self._link_before(_Link(item), self._head)

    def insert(self, item, index):
        """Insert an item at position index, walking from the nearer end."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index out of range: {index}")
        self._link_before(_Link(item), self._node_at(index))

    def get(self, index):
        """Return the item at position index, walking from the nearer end."""
        if not 0 <= index < self._size:
            raise IndexError(f"get index out of range: {index}")
        return self._node_at(index).item

    def split(self):
        """Move alternate nodes into two new chains and leave this one empty."""
        first, second = CircularChain(), CircularChain()
        targets = cycle((first, second))
        node = self._head.next
        while node is not self._head:
            following = node.next
            target = next(targets)
            target._link_before(node, target._head)
            node = following
        self._head.next = self._head.prev = self._head
        self._size = 0
        return first, second

    def __iter__(self):
        node = self._head.next
        while node is not self._head:
            yield node.item
            node = node.next

    def __reversed__(self):
        node = self._head.prev
        while node is not self._head:
            yield node.item
            node = node.prev

    def __len__(self):
        return self._size

    def __str__(self):
        return " ".join(str(item) for item in self)


def meld(a, b):
    """Interleave a and b, then append what remains of the longer one."""
    result = Chain()
    for x, y in zip_longest(a, b, fillvalue=_MISSING):
        if x is not _MISSING:
            result.push_back(x)
        if y is not _MISSING:
            result.push_back(y)
    return result


def split(chain):
    """Copy alternate items of chain into two new circular chains."""
    return (
        CircularChain(islice(chain, 0, None, 2)),
        CircularChain(islice(chain, 1, None, 2)),
    )