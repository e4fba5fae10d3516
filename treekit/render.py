"""Text rendering of binary trees as connected rows of labels."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from treekit.measure import height
from treekit.node import Node


def _put(row: list[str], index: int, char: str) -> None:
    if index < 0:
        return
    if index >= len(row):
        row.extend(" " * (index + 1 - len(row)))
    row[index] = char


def _layout(node: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    """Draw the subtree into rows and return the width it takes."""
    if node is None:
        return 0
    label = f"({node.value:03d})"
    width = len(label)
    is_left = node.parent is not None and node.parent.left is node
    left = _layout(node.left, offset, level + 1, rows)
    right = _layout(node.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows[level], offset + left + i, char)
    if level:
        above = rows[level - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one line per level; empty for no tree."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = ("".join(row).rstrip(" ").ljust(2) for row in rows)
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to a file, standard output by default."""
    out = sys.stdout if file is None else file
    out.write(render(tree))