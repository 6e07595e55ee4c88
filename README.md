# dsdrills

A collection of classic data-structure exercises. Each one is a small
Python module; most of them also come with a command that reads an input
file and prints the result.

## What is inside

| Module | Topic |
| --- | --- |
| `dsdrills.fibonacci` | `fib(n)` with memoisation; `read_index` accepts one integer from 0 to 90 |
| `dsdrills.subsets` | `subsets(n)` yields every subset of the first `n` letters, the empty one first, in lexicographic order |
| `dsdrills.graph` | `DirectedGraph` and `UndirectedGraph` on an adjacency matrix: shortest path by breadth-first search, transitive closure |
| `dsdrills.josephus` | The Josephus elimination order, with a list (`josephus_array`) and a rotating ring (`josephus_ring`) |
| `dsdrills.stack` | `LinkedStack` and `delete_all`, which removes every occurrence of an item |
| `dsdrills.chain` | `Chain` (singly linked) and `CircularChain` (circular, doubly linked, header node); `meld` and `split` |
| `dsdrills.triangular` | Packed `LowerTriangularMatrix` and `UpperTriangularMatrix`, each transposing into the other |
| `dsdrills.sparse` | `SparseMatrix` with row-major terms, `transpose()` and multiplication with `@` |
| `dsdrills.hash_open` | `OpenHashTable`: linear probing with "never used" marks, rebuilt when vacated buckets pile up |
| `dsdrills.hash_chains` | `HashChainsWithTails`: one `SortedChain` per bucket, entries ordered by their key's hash |
| `dsdrills.ring_deque` | `BoundedDeque` with a fixed capacity, and `run_commands` for a small command language |
| `dsdrills.expression` | `to_postfix`, `build_tree` and a sideways rendering of expression trees |
| `dsdrills.binary_tree` | `TreeNode` read from pre-order tokens: node count, mirroring, level order, width |
| `dsdrills.heaps` | `MaxHeap`, `MinHeap` and `SentinelMaxHeap` |
| `dsdrills.benchmark` | Timing of `MaxHeap` against `SentinelMaxHeap` |
| `dsdrills.huffman` | Huffman coding: `frequencies`, `build_tree`, `code_table`, `compress`, `decompress` |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from dsdrills.fibonacci import fib
from dsdrills.graph import DirectedGraph, format_path
from dsdrills.sparse import SparseMatrix

fib(90)          # 2880067194370816120

g = DirectedGraph(4)
g.add_edge(1, 2)
g.add_edge(2, 4)
path = g.find_path(1, 4)   # [1, 2, 4]
print(format_path(path))

a = SparseMatrix(2, 2)
a.add_term(1, 1, 3)
b = a.transpose()
product = a @ b
print(product.format_matrix())
```

Vertices and matrix indices are numbered from 1. Invalid indices and
operations on empty structures raise exceptions (`IndexError`,
`ValueError`, `KeyError`, `OverflowError` as fits the case) rather than
returning special values.

## Commands

Each command takes an optional argument; without it, it uses the default
shown.

| Command | Input | Output |
| --- | --- | --- |
| `dsdrills-fib [FILE]` | file (default `data.txt`) holding one integer 0–90 | F(n), or `WRONG` |
| `dsdrills-subsets [FILE]` | file (default `data.txt`) starting with an integer 1–26 | every subset, one per line, the empty one as an empty first line; or `WRONG` |
| `dsdrills-josephus [FILE]` | file (default `input.txt`) holding `n m`, 3 ≤ n ≤ 100, 1 ≤ m ≤ n | the elimination order, once per method; or `WRONG` |
| `dsdrills-delete-all [FILE]` | file (default `input2.txt`): a target character, then characters pushed on a stack | the remaining characters from the top down |
| `dsdrills-triangular [N]` | a size, or a line from standard input | a lower matrix filled with `i*j`, then its transpose |
| `dsdrills-sparse [FILE]` | two matrices, each `rows cols count` then `row col value` triples in row-major order; without a file, a built-in example | both matrices and their product |
| `dsdrills-hash-open [FILE]` | file (default `input1.txt`): a count, then `name score` pairs | looks up Alice, Bob, Kele and Mimi, then removes Alice, Lihua, Bob, Kele and Mimi, stopping at the first missing key |
| `dsdrills-hash-chains [FILE]` | same format (default `input2.txt`) | all entries, the same lookups, then the entries left after erasing |
| `dsdrills-deque [FILE]` | file (default `input.txt`) of commands `AddLeft x`, `AddRight x`, `DeleteLeft`, `DeleteRight`, `Left`, `Right`, `IsEmpty`, `IsFull`, `End` | the output of each command on a deque of capacity 10 |
| `dsdrills-expression [FILE]` | file (default `input2.txt`) whose first word is an infix expression over `a`–`z`, `+ - * /` and parentheses | the expression tree drawn sideways, or `ERROR` |
| `dsdrills-tree [FILE]` | file (default `input3.txt`) of pre-order integers; any other token marks an empty subtree | node count, levels before and after mirroring, maximum width |
| `dsdrills-heap-benchmark [SIZE ...]` | sizes (default 2, 4, 6, 8 and 10 million) | push and pop times in milliseconds for both max heaps |
| `dsdrills-huffman [TEXT]` | text, or a line from standard input | the code bits, sizes before and after, ratio, and the decoded text |

Note that `dsdrills.benchmark.main` with its default sizes pushes tens of
millions of items in pure Python and takes a long while; pass smaller
sizes for a quick run.

## What it does not do

- `dsdrills.graph`, `dsdrills.chain` and `dsdrills.heaps` are library
  modules only; they have no command.
- `dsdrills-huffman` works in memory on one line of text. It does not
  read or write compressed files, and its decoder needs the same
  frequency table that was used for encoding.