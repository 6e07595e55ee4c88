"""Huffman coding of a line of text, built with a min-priority queue."""

import heapq
import sys
from collections import Counter
from dataclasses import dataclass
from itertools import count
from typing import Optional

INTERNAL_SYMBOL = "\0"


@dataclass
class HuffmanNode:
    """A Huffman tree node; leaves carry a symbol, inner nodes the sum of weights."""

    symbol: str
    weight: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self):
        return self.left is None and self.right is None


def frequencies(text):
    """Count each character of text, in order of first appearance."""
    return dict(Counter(text))


def build_tree(freqs):
    """Build a Huffman tree, merging the two lightest nodes until one is left.

    The lighter of each pair becomes the left child; ties go to the node
    that entered the queue first.
    """
    if not freqs:
        raise ValueError("cannot build a Huffman tree without symbols")
    order = count()
    queue = []
    for symbol, weight in freqs.items():
        if weight <= 0:
            raise ValueError(f"weight must be positive: {symbol!r} has {weight}")
        heapq.heappush(queue, (weight, next(order), HuffmanNode(symbol, weight)))
    while len(queue) > 1:
        _, _, left = heapq.heappop(queue)
        _, _, right = heapq.heappop(queue)
        merged = HuffmanNode(INTERNAL_SYMBOL, left.weight + right.weight, left, right)
        heapq.heappush(queue, (merged.weight, next(order), merged))
    return queue[0][2]


def code_table(tree):
    """Map each leaf symbol to its code: 0 for a left branch, 1 for a right one.

    A tree that is a single leaf gives its symbol the one-bit code 0.
    """
    if tree.is_leaf:
        return {tree.symbol: (0,)}
    table = {}
    stack = [(tree, ())]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            table[node.symbol] = path
            continue
        stack.append((node.right, path + (1,)))
        stack.append((node.left, path + (0,)))
    return table


def compress(text, freqs):
    """Encode text with the Huffman code for freqs; return a list of bits."""
    table = code_table(build_tree(freqs))
    bits = []
    for symbol in text:
        try:
            bits.extend(table[symbol])
        except KeyError:
            raise ValueError(f"symbol {symbol!r} has no code") from None
    return bits


def decompress(bits, freqs):
    """Decode bits with the Huffman code for freqs; a trailing partial code is dropped."""
    table = code_table(build_tree(freqs))
    reverse = {code: symbol for symbol, code in table.items()}
    if len(reverse) != len(table):
        raise ValueError("code table is not one-to-one")
    result = []
    code = ()
    for bit in bits:
        code += (int(bit),)
        symbol = reverse.get(code)
        if symbol is not None:
            result.append(symbol)
            code = ()
    return "".join(result)


def format_bits(bits):
    """Render bits as a string of 0 and 1."""
    return "".join(str(int(bit)) for bit in bits)


def main(argv=None):
    """Encode one line of text, report the sizes, and decode it again."""
    args = sys.argv[1:] if argv is None else argv
    text = args[0] if args else sys.stdin.readline().rstrip("\n")
    if not text:
        print("nothing to encode", file=sys.stderr)
        return 1
    print()
    print(f"Input: {text}")
    input_bits = 8 * len(text.encode())
    print(f"Size before encoding: {input_bits} bits")
    freqs = frequencies(text)
    encoded = compress(text, freqs)
    print(f"Encoded: {format_bits(encoded)}")
    print(f"Size after encoding: {len(encoded)} bits")
    print(f"Compression ratio: {len(encoded) / input_bits:g}")
    print(f"Decoded: {decompress(encoded, freqs)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())