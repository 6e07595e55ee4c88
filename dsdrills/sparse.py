"""Sparse matrices kept as row-major lists of nonzero terms."""

import sys
from collections import defaultdict
from operator import attrgetter
from pathlib import Path
from typing import Any, NamedTuple


class MatrixTerm(NamedTuple):
    """One stored entry of a sparse matrix, indexed from 1."""

    row: int = 0
    col: int = 0
    value: Any = 0


def _by_row(terms):
    rows = defaultdict(dict)
    for term in terms:
        rows[term.row][term.col] = term.value
    return rows


class SparseMatrix:
    """A rows x cols matrix holding its terms in row-major order."""

    def __init__(self, rows=0, cols=0, terms=()):
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix shape must not be negative: {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.terms = []
        for row, col, value in terms:
            self.add_term(row, col, value)

    def add_term(self, row, col, value):
        """Append a term; terms must come in strictly increasing row-major order."""
        if not (1 <= row <= self.rows and 1 <= col <= self.cols):
            raise IndexError(f"term ({row}, {col}) out of range for {self.rows}x{self.cols}")
        if self.terms and (row, col) <= (self.terms[-1].row, self.terms[-1].col):
            raise ValueError(f"term ({row}, {col}) is not in row-major order")
        self.terms.append(MatrixTerm(row, col, value))

    def transpose(self):
        """Return the transposed matrix, its terms again in row-major order."""
        result = SparseMatrix(self.cols, self.rows)
        result.terms = [
            MatrixTerm(term.col, term.row, term.value)
            for term in sorted(self.terms, key=attrgetter("col"))
        ]
        return result

    def __matmul__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        left_rows = _by_row(self.terms)
        right_cols = _by_row(other.transpose().terms)
        result = SparseMatrix(self.rows, other.cols)
        for i in range(1, self.rows + 1):
            row = left_rows.get(i)
            if not row:
                continue
            for j in range(1, other.cols + 1):
                column = right_cols.get(j)
                if not column:
                    continue
                total = sum(value * column[k] for k, value in row.items() if k in column)
                if total != 0:
                    result.terms.append(MatrixTerm(i, j, total))
        return result

    def to_rows(self):
        """Return the matrix as a dense list of rows."""
        dense = [[0] * self.cols for _ in range(self.rows)]
        for term in self.terms:
            dense[term.row - 1][term.col - 1] = term.value
        return dense

    def format_terms(self):
        """List the stored terms, one 'row col value' line each."""
        return "\n".join(f"{t.row} {t.col} {t.value}" for t in self.terms)

    def format_matrix(self):
        """Render the dense matrix, every value followed by a space."""
        return "\n".join("".join(f"{value} " for value in row) for row in self.to_rows())


def parse_sparse(tokens):
    """Read 'rows cols count' and then count 'row col value' triples from tokens.

    Passing the same iterator again reads the next matrix.
    """
    stream = iter(tokens)

    def take():
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError("unexpected end of matrix input") from None

    rows, cols, count = take(), take(), take()
    if count < 0:
        raise ValueError(f"term count must not be negative: {count}")
    matrix = SparseMatrix(rows, cols)
    for _ in range(count):
        row, col, value = take(), take(), take()
        matrix.add_term(row, col, value)
    return matrix


def _example():
    a = SparseMatrix(4, 3, [(1, 2, 2), (2, 3, 1), (3, 2, 2), (4, 1, 1)])
    b = SparseMatrix(
        3,
        4,
        [(1, 1, 1), (1, 2, 1), (1, 3, 4), (2, 1, 3), (2, 2, 2), (2, 3, 3), (3, 4, 5)],
    )
    return a, b


def main(argv=None):
    """Multiply two matrices read from a file, or the built-in example."""
    args = sys.argv[1:] if argv is None else argv
    try:
        if args:
            stream = iter(Path(args[0]).read_text().split())
            a, b = parse_sparse(stream), parse_sparse(stream)
        else:
            a, b = _example()
        product = a @ b
    except (OSError, ValueError, IndexError, UnicodeDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    for label, matrix in (("a", a), ("b", b), ("a*b", product)):
        print(f"Matrix {label}:")
        print(matrix.format_matrix())
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())