"""AVL trees: validation, insertion, removal and construction from arrays."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from binarytrees.bst import bst_insert, bst_remove
from binarytrees.metrics import balance
from binarytrees.node import Node
from binarytrees.rotate import rotate_left, rotate_right


def is_avl(tree: Optional[Node]) -> bool:
    """True if the tree is a search tree whose every node has balance within one."""
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if abs(balance(node)) > 1:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def avl_insert(root: Optional[Node], value: int) -> tuple[Node, Optional[Node]]:
    """Insert ``value``, rebalance, and return ``(root, new_node)``.

    ``new_node`` is None when the value is already in the tree.
    """
    root, new = bst_insert(root, value)
    if new is None:
        return root, None
    node = new.parent
    while node is not None:
        factor = balance(node)
        if factor > 1:
            if value > node.left.value:
                rotate_left(node.left)
            node = rotate_right(node)
        elif factor < -1:
            if value < node.right.value:
                rotate_right(node.right)
            node = rotate_left(node)
        if node.parent is None:
            root = node
        node = node.parent
    return root, new


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting values in order; duplicates are skipped."""
    root: Optional[Node] = None
    for value in values:
        root, _ = avl_insert(root, value)
    return root


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    if node is None or (node.left is None and node.right is None):
        return node
    _rebalance(node.left)
    _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` as in a search tree, then rebalance bottom-up."""
    root = bst_remove(root, value)
    if root is None:
        return None
    return _rebalance(root)


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build an AVL tree from sorted values by repeatedly taking the middle."""
    if not values:
        return None
    middle = (len(values) - 1) // 2
    tree = Node(values[middle])

    def build(parent: Node, lo: int, hi: int) -> None:
        if hi - lo <= 1:
            return
        mid = (hi - lo) // 2 + lo
        new = Node(values[mid], parent=parent)
        if values[mid] > parent.value:
            parent.right = new
        elif values[mid] < parent.value:
            parent.left = new
        build(new, lo, mid)
        build(new, mid, hi)

    build(tree, -1, middle)
    build(tree, middle, len(values))
    return tree