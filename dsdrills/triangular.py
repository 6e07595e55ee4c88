"""Lower and upper triangular matrices packed into one list."""

import sys
from itertools import product


class _TriangularMatrix:
    """Shared storage and checks for square triangular matrices, indexed from 1.

    Subclasses supply _stored(i, j), which tells whether a cell lies inside
    the triangle, and _offset(i, j), its position in the packed list.
    """

    def __init__(self, n):
        if n < 0:
            raise ValueError(f"matrix size must not be negative: {n}")
        self.n = n
        self._cells = [0] * (n * (n + 1) // 2)

    def _check(self, i, j):
        if not (1 <= i <= self.n and 1 <= j <= self.n):
            raise IndexError(f"index ({i}, {j}) out of range for size {self.n}")

    def _set(self, i, j, value):
        self._check(i, j)
        if self._stored(i, j):
            self._cells[self._offset(i, j)] = value
        elif value != 0:
            raise ValueError(f"({i}, {j}) lies outside the triangle and must be 0")

    def _get(self, i, j):
        self._check(i, j)
        if self._stored(i, j):
            return self._cells[self._offset(i, j)]
        return 0

    def _transposed(self, kind):
        result = kind(self.n)
        for i, j in product(range(1, self.n + 1), repeat=2):
            if self._stored(i, j):
                result.set(j, i, self._get(i, j))
        return result

    def _format(self):
        return "\n".join(
            "".join(f"{self._get(i, j):>4} " for j in range(1, self.n + 1))
            for i in range(1, self.n + 1)
        )


class LowerTriangularMatrix(_TriangularMatrix):
    """A matrix whose entries above the diagonal are zero."""

    def __init__(self, n):
        """Create an n-by-n lower triangular matrix of zeros."""
        super().__init__(n)

    @staticmethod
    def _stored(i, j):
        return i >= j

    @staticmethod
    def _offset(i, j):
        return i * (i - 1) // 2 + j - 1

    def set(self, i, j, value):
        """Store value at (i, j); only zero may go above the diagonal."""
        self._set(i, j, value)

    def get(self, i, j):
        """Return the value at (i, j)."""
        return self._get(i, j)

    def transpose(self):
        """Return the transpose as an upper triangular matrix."""
        return self._transposed(UpperTriangularMatrix)

    def format(self):
        """Render the full matrix, each cell right-aligned in four columns."""
        return self._format()


class UpperTriangularMatrix(_TriangularMatrix):
    """A matrix whose entries below the diagonal are zero."""

    def __init__(self, n):
        """Create an n-by-n upper triangular matrix of zeros."""
        super().__init__(n)

    @staticmethod
    def _stored(i, j):
        return i <= j

    @staticmethod
    def _offset(i, j):
        return j * (j - 1) // 2 + i - 1

    def set(self, i, j, value):
        """Store value at (i, j); only zero may go below the diagonal."""
        self._set(i, j, value)

    def get(self, i, j):
        """Return the value at (i, j)."""
        return self._get(i, j)

    def transpose(self):
        """Return the transpose as a lower triangular matrix."""
        return self._transposed(LowerTriangularMatrix)

    def format(self):
        """Render the full matrix, each cell right-aligned in four columns."""
        return self._format()


def main(argv=None):
    """Fill a lower matrix with i*j and print it and its transpose."""
    args = sys.argv[1:] if argv is None else argv
    text = args[0] if args else sys.stdin.readline()
    try:
        lower = LowerTriangularMatrix(int(text.strip()))
    except ValueError as exc:
        print(f"invalid size: {exc}", file=sys.stderr)
        return 1
    for i in range(1, lower.n + 1):
        for j in range(1, i + 1):
            lower.set(i, j, i * j)
    print(lower.format())
    print()
    print(lower.transpose().format())
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())