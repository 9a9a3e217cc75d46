"""Left and right rotations of a binary tree around a node."""

from __future__ import annotations

from typing import Optional

from binarytrees.node import Node


def _replace_in_parent(old: Node, new: Node) -> None:
    parent = old.parent
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    elif parent.right is old:
        parent.right = new


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate left around ``tree`` and return the new subtree root.

    Returns None when the tree is missing or has no right child.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    _replace_in_parent(tree, pivot)
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate right around ``tree`` and return the new subtree root.

    Returns None when the tree is missing or has no left child.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    _replace_in_parent(tree, pivot)
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot