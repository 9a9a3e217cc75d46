"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from binarytrees.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def height(tree: Optional[Node]) -> int:
    """Number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None:
        return 0
    levels = 0
    frontier = [tree]
    while True:
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
        if not frontier:
            return levels
        levels += 1


def depth(tree: Optional[Node]) -> int:
    """Number of edges from the node up to its root; 0 for None."""
    count = 0
    node = tree
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.left is None and node.right is None)


def inner_nodes(tree: Optional[Node]) -> int:
    """Number of nodes with at least one child."""
    return size(tree) - leaves(tree)


def _counted_height(tree: Optional[Node]) -> int:
    return 0 if tree is None else height(tree) + 1


def balance(tree: Optional[Node]) -> int:
    """Height of the left subtree minus height of the right; 0 for None."""
    if tree is None:
        return 0
    return _counted_height(tree.left) - _counted_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """True if every level of the tree is completely filled."""
    if tree is None:
        return False
    return (1 << (height(tree) + 1)) - 1 == size(tree)


def is_complete(tree: Optional[Node]) -> bool:
    """True if every level but the last is filled and the last fills leftwards."""
    if tree is None:
        return False
    total = size(tree)
    queue = deque([(tree, 0)])
    while queue:
        node, index = queue.popleft()
        if index >= total:
            return False
        if node.left is not None:
            queue.append((node.left, 2 * index + 1))
        if node.right is not None:
            queue.append((node.right, 2 * index + 2))
    return True


def ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Lowest common ancestor of two nodes, or None if they share none."""
    if first is None or second is None:
        return None
    depth_first, depth_second = depth(first), depth(second)
    while depth_first > depth_second:
        first = first.parent
        depth_first -= 1
    while depth_second > depth_first:
        second = second.parent
        depth_second -= 1
    while first is not None and second is not None:
        if first is second:
            return first
        first, second = first.parent, second.parent
    return None