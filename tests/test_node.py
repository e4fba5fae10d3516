import pytest

from treekit.node import Node


@pytest.fixture
def family():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_fields():
    node = Node(98)
    assert node.value == 98
    assert node.parent is None
    assert node.left is None
    assert node.right is None


def test_constructor_records_parent_without_linking():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None
    assert root.right is None


def test_insert_left_into_empty_slot():
    root = Node(98)
    child = root.insert_left(54)
    assert root.left is child
    assert child.parent is root
    assert child.value == 54
    assert child.left is None and child.right is None


def test_insert_left_pushes_old_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_old_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_is_leaf():
    root = Node(98)
    root.insert_right(402)
    root.insert_right(128)
    assert not root.is_leaf()
    assert not root.right.is_leaf()
    assert root.right.right.is_leaf()


def test_is_root():
    root = Node(98)
    child = root.insert_right(128)
    grandchild = child.insert_right(402)
    assert root.is_root()
    assert not child.is_root()
    assert not grandchild.is_root()


def test_sibling(family):
    root = family
    assert root.left.sibling() is root.right
    assert root.right.left.sibling() is root.right.right
    assert root.left.right.sibling() is root.left.left
    assert root.sibling() is None


def test_sibling_of_only_child_is_none():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_uncle(family):
    root = family
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_delete_whole_tree(family):
    root = family
    left = root.left
    root.delete()
    assert root.left is None and root.right is None
    assert left.parent is None
    assert left.left is None and left.right is None


def test_delete_subtree_detaches_from_parent(family):
    root = family
    right = root.right
    right.delete()
    assert root.right is None
    assert root.left is not None and root.left.value == 12
    assert right.parent is None