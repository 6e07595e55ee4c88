"""Infix expressions over single letters, their postfix form and tree."""

import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

OPERATORS = frozenset("+-*/")
INDENT = 4
DEFAULT_INPUT = "input2.txt"


@dataclass
class ExprNode:
    """A node of an expression tree; level is its depth, the root at 0."""

    symbol: str
    level: int
    left: Optional["ExprNode"] = None
    right: Optional["ExprNode"] = None


def _yields_to(top, incoming):
    """Tell whether the stacked symbol has lower priority than the incoming one."""
    if top == "(":
        return True
    return top in "+-" and incoming in "*/"


def to_postfix(expression):
    """Convert an infix expression over letters a-z to postfix."""
    output = []
    pending = []
    for symbol in expression:
        if "a" <= symbol <= "z":
            output.append(symbol)
        elif symbol == ")":
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if not pending:
                raise ValueError("unmatched ')'")
            pending.pop()
        elif symbol == "(" or not pending:
            pending.append(symbol)
        else:
            while pending and not _yields_to(pending[-1], symbol):
                output.append(pending.pop())
            pending.append(symbol)
    if "(" in pending:
        raise ValueError("unmatched '('")
    output.extend(reversed(pending))
    return "".join(output)


def build_tree(postfix):
    """Build an expression tree from a postfix string, reading it from the end."""
    symbols = list(postfix)

    def build(level):
        if not symbols:
            return None
        node = ExprNode(symbols.pop(), level)
        if node.symbol in OPERATORS:
            node.right = build(level + 1)
            node.left = build(level + 1)
        return node

    return build(0)


def _rotated_lines(node):
    if node is None:
        return
    yield from _rotated_lines(node.right)
    yield " " * (INDENT * node.level) + node.symbol
    yield from _rotated_lines(node.left)


def render_rotated(tree):
    """Draw the tree turned on its side: right subtree on top, indented by depth."""
    return "\n".join(_rotated_lines(tree))


def level_order(tree):
    """Return one string per level, the symbols of that level left to right."""
    levels = []
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        if node.level >= len(levels):
            levels.append("")
        levels[node.level] += node.symbol
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return levels


def inorder(tree):
    """Return the symbols of the tree in in-order."""
    if tree is None:
        return []
    return inorder(tree.left) + [tree.symbol] + inorder(tree.right)


def main(argv=None):
    """Read an infix expression and draw its tree turned on its side."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        tokens = path.read_text().split()
        if not tokens:
            raise ValueError("no expression")
        tree = build_tree(to_postfix(tokens[0]))
    except (OSError, ValueError, UnicodeDecodeError):
        print("ERROR")
        return 1
    print(render_rotated(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())