"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import Optional

from treekit.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for no tree."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _levels(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root."""
    count = 0
    if tree is None:
        return count
    while tree.parent is not None:
        tree = tree.parent
        count += 1
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 1 if tree.left is not None or tree.right is not None else 0
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right subtree's height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    return is_full(tree.right) and is_full(tree.left)


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all its leaves share one level."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if _levels(tree.left) != _levels(tree.right):
        return False
    return is_perfect(tree.left) and is_perfect(tree.right)