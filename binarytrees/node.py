"""Binary tree nodes and the basic operations on their links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding an integer and links to its relatives."""

    value: int
    parent: Optional[Node] = None
    left: Optional[Node] = None
    right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _require_parent(parent: Optional[Node]) -> Node:
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    return parent


def insert_left(parent: Optional[Node], value: int) -> Node:
    """Insert a new left child; an existing left child becomes its left child."""
    parent = _require_parent(parent)
    new = Node(value, parent=parent, left=parent.left)
    parent.left = new
    if new.left is not None:
        new.left.parent = new
    return new


def insert_right(parent: Optional[Node], value: int) -> Node:
    """Insert a new right child; an existing right child becomes its right child."""
    parent = _require_parent(parent)
    new = Node(value, parent=parent, right=parent.right)
    parent.right = new
    if new.right is not None:
        new.right.parent = new
    return new


def delete(tree: Optional[Node]) -> None:
    """Detach a whole subtree and break every link inside it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if the node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if the node exists and has no parent."""
    return node is not None and node.parent is None


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if node is parent.left else parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    return sibling(node.parent)