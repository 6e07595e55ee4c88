"""Timing comparison of the plain max heap and the sentinel max heap."""

import random
import sys
import time
from dataclasses import dataclass

from .heaps import MaxHeap, SentinelMaxHeap

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
RAND_MAX = 2**31 - 1
DEFAULT_SIZES = (2_000_000, 4_000_000, 6_000_000, 8_000_000, 10_000_000)
DEFAULT_SEED = 42
HEADER = (
    "maxheap push T(ms)\tmaxheap pop T(ms)\tmyheap push T(ms)\t"
    "myheap pop T(ms)\tmaxheap Time(ms)\tmyheap Time(ms)"
)
SEPARATOR = "\t\t\t"


@dataclass(frozen=True)
class HeapTiming:
    """Processor time in milliseconds spent pushing and popping one data set."""

    size: int
    maxheap_push: float
    maxheap_pop: float
    sentinel_push: float
    sentinel_pop: float

    @property
    def maxheap_total(self):
        return self.maxheap_push + self.maxheap_pop

    @property
    def sentinel_total(self):
        return self.sentinel_push + self.sentinel_pop


def _elapsed_ms(run, heap):
    start = time.process_time()
    run(heap)
    return 1000.0 * (time.process_time() - start)


def time_heaps(size, seed=DEFAULT_SEED):
    """Time pushing then popping size random integers through both heaps."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    rng = random.Random(seed)
    data = [rng.randint(0, RAND_MAX) for _ in range(size)]

    def push_all(heap):
        for x in data:
            heap.push(x)

    def pop_all(heap):
        for _ in range(size):
            heap.pop()

    guarded = SentinelMaxHeap(size, INT_MAX, INT_MIN)
    sentinel_push = _elapsed_ms(push_all, guarded)
    sentinel_pop = _elapsed_ms(pop_all, guarded)

    plain = MaxHeap(size)
    maxheap_push = _elapsed_ms(push_all, plain)
    maxheap_pop = _elapsed_ms(pop_all, plain)

    return HeapTiming(size, maxheap_push, maxheap_pop, sentinel_push, sentinel_pop)


def run_benchmark(sizes=DEFAULT_SIZES, seed=DEFAULT_SEED):
    """Time the heaps once for each size, with the same seed every time."""
    return [time_heaps(size, seed) for size in sizes]


def format_report(timings):
    """Render the timings as a tab-separated table under a header line."""
    rows = (
        SEPARATOR.join(
            f"{value:.1f}"
            for value in (
                t.maxheap_push,
                t.maxheap_pop,
                t.sentinel_push,
                t.sentinel_pop,
                t.maxheap_total,
                t.sentinel_total,
            )
        )
        for t in timings
    )
    return "\n".join([HEADER, *rows])


def main(argv=None):
    """Run the benchmark for the sizes given, or for the default sizes."""
    args = sys.argv[1:] if argv is None else argv
    try:
        sizes = [int(arg) for arg in args] if args else list(DEFAULT_SIZES)
        timings = run_benchmark(sizes, DEFAULT_SEED)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(format_report(timings))
    return 0


if __name__ == "__main__":
    sys.exit(main())