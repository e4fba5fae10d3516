"""Small demonstration programs that build sample trees and report on them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Optional, TextIO

from treekit.measure import (
    balance,
    depth,
    height,
    internal_nodes,
    is_full,
    is_perfect,
    leaves,
    size,
)
from treekit.node import Node
from treekit.render import print_tree
from treekit.traversal import inorder, postorder, preorder

_NULL = "(nil)"


def _base_tree() -> Node:
    """Build the tree 98 -> (12, 402) used by most demonstrations."""
    root = Node(98)
    root.left = Node(12, parent=root)
    root.right = Node(402, parent=root)
    return root


def _grown_tree() -> Node:
    """Build the base tree and insert 54 and 128 on the right side."""
    root = _base_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _full_seven() -> Node:
    """Build a perfect tree of seven nodes used by the traversal demos."""
    root = Node(98)
    root.left = Node(12, parent=root)
    root.right = Node(402, parent=root)
    root.left.left = Node(6, parent=root.left)
    root.left.right = Node(56, parent=root.left)
    root.right.left = Node(256, parent=root.right)
    root.right.right = Node(512, parent=root.right)
    return root


def _family_tree() -> Node:
    """Build the tree used by the sibling and uncle demonstrations."""
    root = Node(98)
    root.left = Node(12, parent=root)
    root.right = Node(128, parent=root)
    root.left.right = Node(54, parent=root.left)
    root.right.right = Node(402, parent=root.right)
    root.left.left = Node(10, parent=root.left)
    root.right.left = Node(110, parent=root.right)
    root.right.right.left = Node(200, parent=root.right.right)
    root.right.right.right = Node(512, parent=root.right.right)
    return root


def _demo_node(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, parent=root)
    root.left.left = Node(6, parent=root.left)
    root.left.right = Node(16, parent=root.left)
    root.right = Node(402, parent=root)
    root.right.left = Node(256, parent=root.right)
    root.right.right = Node(512, parent=root.right)
    print_tree(root, out)


def _demo_insert_left(out: TextIO) -> None:
    root = _base_tree()
    print_tree(root, out)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = _base_tree()
    print_tree(root, out)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _grown_tree()
    print_tree(root, out)
    root.delete()


def _demo_is_leaf(out: TextIO) -> None:
    root = _grown_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a leaf: {int(node.is_leaf())}", file=out)


def _demo_is_root(out: TextIO) -> None:
    root = _grown_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a root: {int(node.is_root())}", file=out)


def _traversal_demo(walk: Callable[[Optional[Node]], object]) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _full_seven()
        print_tree(root, out)
        for value in walk(root):
            print(value, file=out)

    return demo


def _measure_demo(
    measure: Callable[[Optional[Node]], int], template: str
) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _grown_tree()
        print_tree(root, out)
        for node in (root, root.right, root.left.right):
            print(template.format(value=node.value, result=measure(node)), file=out)

    return demo


def _demo_balance(out: TextIO) -> None:
    root = _grown_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {balance(node):+d}", file=out)


def _demo_is_full(out: TextIO) -> None:
    root = _grown_tree()
    root.left.left = Node(10, parent=root.left)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(is_full(node))}", file=out)


def _demo_is_perfect(out: TextIO) -> None:
    root = _grown_tree()
    root.left.left = Node(10, parent=root.left)
    root.right.left = Node(10, parent=root.right)

    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)

    root.right.right.left = Node(10, parent=root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)

    root.right.right.right = Node(10, parent=root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}", file=out)


def _describe(node: Optional[Node]) -> str:
    return _NULL if node is None else str(node.value)


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_describe(node.sibling())}", file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_describe(node.uncle())}", file=out)


_DEMOS: dict[int, Callable[[TextIO], None]] = {
    0: _demo_node,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: _demo_is_leaf,
    5: _demo_is_root,
    6: _traversal_demo(preorder),
    7: _traversal_demo(inorder),
    8: _traversal_demo(postorder),
    9: _measure_demo(height, "Height from {value}: {result}"),
    10: _measure_demo(depth, "Depth of {value}: {result}"),
    11: _measure_demo(size, "Size of {value}: {result}"),
    12: _measure_demo(leaves, "Leaves in {value}: {result}"),
    13: _measure_demo(internal_nodes, "Nodes in {value}: {result}"),
    14: _demo_balance,
    15: _demo_is_full,
    16: _demo_is_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int, out: Optional[TextIO] = None) -> None:
    """Run the numbered demonstration, writing to out (standard output by default)."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demonstration numbered {number}") from None
    demo(sys.stdout if out is None else out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstrations named on the command line, or all of them."""
    parser = argparse.ArgumentParser(
        prog="treekit-demo", description="Run binary tree demonstrations."
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        choices=sorted(_DEMOS),
        metavar="N",
        help="demonstration number (0-18); all are run when none is given",
    )
    args = parser.parse_args(argv)
    numbers = args.numbers or sorted(_DEMOS)
    for index, number in enumerate(numbers):
        if index:
            print()
        run_demo(number)
    return 0


if __name__ == "__main__":
    sys.exit(main())