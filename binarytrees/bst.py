"""Binary search trees: validation, insertion, search and removal."""

from __future__ import annotations

from typing import Iterable, Optional

from binarytrees.node import Node


def is_bst(tree: Optional[Node]) -> bool:
    """True if the tree is a binary search tree with no duplicate values."""
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> tuple[Node, Optional[Node]]:
    """Insert ``value`` and return ``(root, new_node)``.

    ``new_node`` is None when the value is already in the tree.
    """
    if root is None:
        node = Node(value)
        return node, node
    parent = root
    current: Optional[Node] = root
    while current is not None:
        if value == current.value:
            return root, None
        parent = current
        current = current.left if value < current.value else current.right
    node = Node(value, parent=parent)
    if value < parent.value:
        parent.left = node
    else:
        parent.right = node
    return root, node


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a binary search tree by inserting values in order; duplicates are skipped."""
    root: Optional[Node] = None
    for value in values:
        root, _ = bst_insert(root, value)
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None."""
    node = tree
    while node is not None:
        if value == node.value:
            return node
        node = node.left if value < node.value else node.right
    return None


def _minimum(tree: Node) -> Node:
    while tree.left is not None:
        tree = tree.left
    return tree


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the tree and return the resulting root.

    A node with two children takes the value of its in-order successor,
    which is then removed in its place.
    """
    node = bst_search(root, value)
    if node is None:
        return root
    if node.left is not None and node.right is not None:
        successor = _minimum(node.right)
        node.value = successor.value
        node = successor
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    if parent is None:
        root = child
    elif parent.left is node:
        parent.left = child
    else:
        parent.right = child
    node.parent = node.left = node.right = None
    return root