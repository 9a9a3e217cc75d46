"""Depth-first and breadth-first walks over a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from binarytrees.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    stack = [tree] if tree is not None else []
    reversed_order: list[int] = []
    while stack:
        node = stack.pop()
        reversed_order.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_order)


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)