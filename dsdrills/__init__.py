"""Classic data-structure exercises: chains, matrices, hash tables, heaps, trees, graphs and Huffman coding."""

__version__ = "0.1.0"

__all__ = [
    "benchmark",
    "binary_tree",
    "chain",
    "expression",
    "fibonacci",
    "graph",
    "hash_chains",
    "hash_open",
    "heaps",
    "huffman",
    "josephus",
    "ring_deque",
    "sparse",
    "stack",
    "subsets",
    "triangular",
]