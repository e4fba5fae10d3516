# treekit

Small, dependency-free binary trees whose nodes know their parent. Build a
tree node by node, ask questions about it, walk it in the usual orders and
draw it as ASCII art.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building a tree

Nodes are `treekit.node.Node` objects holding an integer `value` and the
links `parent`, `left` and `right`. New children are added with
`insert_left` and `insert_right`. If the slot is already taken, the old child
is pushed one level down beneath the new one, on the same side. Both methods
return the new node.

```python
from treekit.node import Node
from treekit.render import print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)
print_tree(root)
```

prints

```
  .--(098)--.
(012)     (402)
```

You can also link nodes by hand. `Node(value, parent=p)` only records the
parent. You still have to assign it as `p.left` or `p.right` yourself.

Each node can also tell you about its neighbourhood:

- `is_leaf()`: the node has no children
- `is_root()`: the node has no parent
- `sibling()`: the other child of the parent, or `None`
- `uncle()`: the sibling of the parent, or `None`
- `delete()`: detach the node from its parent and unlink every node of its
  subtree

## Measuring

`treekit.measure` holds functions that take a node, or `None` for the empty
tree:

| function | result |
| --- | --- |
| `height(tree)` | edges on the longest path down from the node (0 for `None`) |
| `depth(tree)` | edges up to the root |
| `size(tree)` | number of nodes |
| `leaves(tree)` | nodes with no children |
| `internal_nodes(tree)` | nodes with at least one child |
| `balance(tree)` | height of the left subtree minus height of the right subtree |
| `is_full(tree)` | every node has zero or two children (`False` for `None`) |
| `is_perfect(tree)` | full, with all leaves on the same level (`False` for `None`) |

## Walking

`treekit.traversal` has three generators that yield node values:
`preorder(tree)`, `inorder(tree)` and `postorder(tree)`.

```python
from treekit.traversal import inorder

print(list(inorder(root)))   # [12, 98, 402]
```

## Drawing

`treekit.render.render(tree)` returns the drawing as a string, one line per
level. It returns an empty string for `None`. `print_tree(tree, file)` writes
the same drawing to a text stream, or to standard output when no stream is
given. Values are shown in parentheses, zero-padded to at least three digits.

## Demonstrations

There are 19 numbered walkthroughs, 0 to 18. Each one builds a sample tree
and shows one operation on it: creating nodes, inserting, deleting, the
leaf/root checks, the three traversals, the measurements, and the
sibling/uncle lookups. Run one or more of them by number, or leave out the
numbers to run them all:

```
treekit-demo 6
treekit-demo
```

From Python, `treekit.demo.run_demo(number, out)` writes the same output to
any text stream. It raises `ValueError` for an unknown number.