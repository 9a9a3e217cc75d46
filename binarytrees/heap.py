"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

from binarytrees.metrics import is_complete, size
from binarytrees.node import Node


def is_heap(tree: Optional[Node]) -> bool:
    """True if the tree is complete and no child holds more than its parent."""
    if tree is None or not is_complete(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.value > node.value:
                    return False
                stack.append(child)
    return True


def _free_slot_parent(root: Node) -> tuple[Node, bool]:
    """Return the parent of the first empty slot and whether that slot is on the right."""
    remaining = size(root)
    level, level_width = 0, 1
    while remaining >= level_width:
        remaining -= level_width
        level_width *= 2
        level += 1
    # ``remaining`` now counts the nodes on the bottom level; its bits spell
    # the path from the root to the empty slot, 1 meaning right.
    node = root
    bit = 1 << (level - 1)
    while bit != 1:
        child = node.right if remaining & bit else node.left
        assert child is not None
        node = child
        bit >>= 1
    return node, bool(remaining & 1)


def heap_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert ``value`` into the heap and return ``(root, node)``.

    ``node`` is the node that holds ``value`` once it has been sifted up.
    """
    if root is None:
        node = Node(value)
        return node, node
    parent, on_right = _free_slot_parent(root)
    new = Node(value, parent=parent)
    if on_right:
        parent.right = new
    else:
        parent.left = new
    while new.parent is not None and new.value > new.parent.value:
        new.value, new.parent.value = new.parent.value, new.value
        new = new.parent
    return root, new


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting the values in order."""
    root: Optional[Node] = None
    for value in values:
        root, _ = heap_insert(root, value)
    return root


def _last_node(root: Node) -> Node:
    queue = deque([root])
    node = root
    while queue:
        node = queue.popleft()
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return node


def _sift_down(root: Node) -> None:
    node = root
    while node.left is not None:
        if node.right is None or node.left.value > node.right.value:
            child = node.left
        else:
            child = node.right
        if node.value > child.value:
            break
        node.value, child.value = child.value, node.value
        node = child


def heap_extract(root: Optional[Node]) -> tuple[int, Optional[Node]]:
    """Remove the root value of the heap and return ``(value, new_root)``.

    Raises IndexError when the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if root.left is None and root.right is None:
        return value, None
    last = _last_node(root)
    root.value = last.value
    parent = last.parent
    assert parent is not None
    if parent.right is not None:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return value, root


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap and return its values from largest to smallest."""
    result: list[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        result.append(value)
    return result