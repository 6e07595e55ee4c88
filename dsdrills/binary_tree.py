"""Binary trees read in pre-order, with level-order walks and width."""

import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

DEFAULT_INPUT = "input3.txt"
NULL_TOKEN = "null"


@dataclass
class TreeNode:
    """A binary tree node; level is its depth, the root at 0."""

    data: Any
    level: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def _children(self):
        return (child for child in (self.left, self.right) if child is not None)

    def _breadth_first(self):
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node._children())

    def count_leaves(self):
        """Count the nodes of the tree: a leaf counts 1, an inner node 1 plus its subtrees."""
        return 1 + sum(child.count_leaves() for child in self._children())

    def swap_children(self):
        """Swap left and right subtrees throughout the tree."""
        self.left, self.right = self.right, self.left
        for child in self._children():
            child.swap_children()

    def level_order(self):
        """Return the data of each level, left to right, one list per level."""
        levels = [[]]
        current = self.level
        for node in self._breadth_first():
            if node.level > current:
                levels.append([])
                current += 1
            levels[-1].append(node.data)
        return levels

    def max_width(self):
        """Return the largest node count of a level, leaving the deepest level out."""
        best = width = 0
        current = self.level
        for node in self._breadth_first():
            if node.level > current:
                best = max(best, width)
                width = 0
                current += 1
            width += 1
        return best

    def inorder(self):
        """Return the data of the tree in in-order."""
        left = self.left.inorder() if self.left is not None else []
        right = self.right.inorder() if self.right is not None else []
        return left + [self.data] + right


def parse_preorder(tokens):
    """Build a tree from pre-order tokens; any token that is not an integer marks an empty subtree."""
    stream = iter(tokens)

    def build(level):
        token = next(stream, None)
        if token is None:
            return None
        try:
            value = int(token)
        except ValueError:
            return None
        node = TreeNode(value, level)
        node.left = build(level + 1)
        node.right = build(level + 1)
        return node

    return build(0)


def parse_null_preorder(tokens):
    """Build a tree of integers from pre-order tokens where 'null' marks an empty subtree."""
    stream = iter(tokens)

    def build(level):
        token = next(stream, None)
        if token is None or token == NULL_TOKEN:
            return None
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"cannot read node value: {token!r}") from None
        node = TreeNode(value, level)
        node.left = build(level + 1)
        node.right = build(level + 1)
        return node

    return build(0)


def _format_levels(levels):
    return "\n".join("".join(f"{data}  " for data in level) for level in levels)


def main(argv=None):
    """Read a tree, print its node count, its levels before and after swapping, and its width."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        tree = parse_preorder(path.read_text().split())
    except (OSError, UnicodeDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    if tree is None:
        print("empty tree", file=sys.stderr)
        return 1
    print("Node count:")
    print(tree.count_leaves())
    print()
    print("Before swap:")
    print(_format_levels(tree.level_order()))
    tree.swap_children()
    print()
    print("After swap:")
    print(_format_levels(tree.level_order()))
    print()
    print("Max width:")
    print(tree.max_width())
    return 0


if __name__ == "__main__":
    sys.exit(main())