"""Array-backed binary heaps: max, min, and a max heap guarded by sentinels."""

import operator


def _levels(items):
    levels = []
    start, width = 0, 1
    while start < len(items):
        levels.append(list(items[start:start + width]))
        start += width
        width *= 2
    return levels


class _ArrayHeap:
    """A binary heap in a list; _before(a, b) tells whether a belongs above b."""

    _before = None

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._items = []

    def _top(self):
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def _push(self, item):
        if len(self._items) == self.capacity:
            self.capacity = max(1, 2 * self.capacity)
        heap = self._items
        heap.append(item)
        current = len(heap) - 1
        while current > 0:
            parent = (current - 1) // 2
            if not self._before(item, heap[parent]):
                break
            heap[current] = heap[parent]
            current = parent
        heap[current] = item

    def _pop(self):
        if not self._items:
            raise IndexError("heap is empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._sift_down(0, last)
        return top

    def _sift_down(self, current, item):
        heap = self._items
        size = len(heap)
        child = 2 * current + 1
        while child < size:
            if child + 1 < size and self._before(heap[child + 1], heap[child]):
                child += 1
            if not self._before(heap[child], item):
                break
            heap[current] = heap[child]
            current = child
            child = 2 * current + 1
        heap[current] = item

    def _initialize(self, items):
        self._items = list(items)
        self.capacity = len(self._items)
        for root in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(root, self._items[root])


class MaxHeap(_ArrayHeap):
    """A heap whose root holds the largest item."""

    _before = staticmethod(operator.gt)

    def __init__(self, capacity):
        """Create an empty heap with room for capacity items before growing."""
        super().__init__(capacity)

    def top(self):
        """Return the largest item."""
        return self._top()

    def push(self, item):
        """Add an item, doubling the capacity when the heap is full."""
        self._push(item)

    def pop(self):
        """Remove and return the largest item."""
        return self._pop()

    def initialize(self, items):
        """Replace the contents with items and arrange them into a heap."""
        self._initialize(items)

    def level_order(self):
        """Return the stored items level by level, one list per level."""
        return _levels(self._items)

    def __len__(self):
        return len(self._items)


class MinHeap(_ArrayHeap):
    """A heap whose root holds the smallest item."""

    _before = staticmethod(operator.lt)

    def __init__(self, capacity):
        """Create an empty heap with room for capacity items before growing."""
        super().__init__(capacity)

    def top(self):
        """Return the smallest item."""
        return self._top()

    def push(self, item):
        """Add an item, doubling the capacity when the heap is full."""
        self._push(item)

    def pop(self):
        """Remove and return the smallest item."""
        return self._pop()

    def initialize(self, items):
        """Replace the contents with items and arrange them into a heap."""
        self._initialize(items)

    def level_order(self):
        """Return the stored items level by level, one list per level."""
        return _levels(self._items)

    def __len__(self):
        return len(self._items)


class SentinelMaxHeap:
    """A max heap whose sift loops rely on a largest and a smallest sentinel value.

    Every item must lie between min_element and max_element.
    """

    def __init__(self, capacity, max_element, min_element):
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        if min_element > max_element:
            raise ValueError("min_element must not exceed max_element")
        self.capacity = capacity
        self.max_element = max_element
        self.min_element = min_element
        # Slot 0 holds the upper sentinel; the items live in slots 1..n.
        self._slots = [max_element]

    def top(self):
        """Return the largest item."""
        if len(self._slots) == 1:
            raise IndexError("heap is empty")
        return self._slots[1]

    def push(self, item):
        """Add an item, doubling the capacity when the heap is full."""
        if not self.min_element <= item <= self.max_element:
            raise ValueError(f"item outside the sentinel range: {item!r}")
        if len(self) == self.capacity:
            self.capacity = max(1, 2 * self.capacity)
        slots = self._slots
        slots.append(item)
        current = len(slots) - 1
        while item > slots[current // 2]:
            slots[current] = slots[current // 2]
            current //= 2
        slots[current] = item

    def pop(self):
        """Remove and return the largest item."""
        if len(self._slots) == 1:
            raise IndexError("heap is empty")
        slots = self._slots
        top = slots[1]
        last = slots.pop()
        size = len(slots) - 1
        if size:
            current, child = 1, 2
            while child <= size:
                right = slots[child + 1] if child + 1 <= size else self.min_element
                if slots[child] < right:
                    child += 1
                if last >= slots[child]:
                    break
                slots[current] = slots[child]
                current = child
                child *= 2
            slots[current] = last
        return top

    def level_order(self):
        """Return the stored items level by level, one list per level."""
        return _levels(self._slots[1:])

    def __len__(self):
        return len(self._slots) - 1