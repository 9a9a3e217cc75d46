"""Demonstration runs of the search-tree, AVL, heap and traversal operations.

Each demo builds a sample tree, exercises one operation and returns the text
it produces: tree drawings interleaved with short result lines.
"""

from __future__ import annotations

from typing import Optional

from binarytrees.avl import array_to_avl, avl_insert, avl_remove, is_avl, sorted_array_to_avl
from binarytrees.bst import array_to_bst, bst_insert, bst_remove, bst_search, is_bst
from binarytrees.heap import array_to_heap, heap_extract, heap_insert, is_heap
from binarytrees.metrics import ancestor, is_complete
from binarytrees.node import Node, delete
from binarytrees.printer import render
from binarytrees.rotate import rotate_left, rotate_right
from binarytrees.traversal import levelorder

SAMPLE = (79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95)
SORTED_SAMPLE = (1, 2, 20, 21, 22, 32, 34, 47, 62, 68, 79, 84, 87, 91, 95, 98)
INSERT_SEQUENCE = (98, 402, 12, 46, 128, 256, 512, 50)
BST_INSERT_SEQUENCE = (98, 402, 12, 46, 128, 256, 512, 1)

_NIL = "(nil)"


def _left(parent: Node, value: int) -> Node:
    parent.left = Node(value, parent=parent)
    return parent.left


def _right(parent: Node, value: int) -> Node:
    parent.right = Node(value, parent=parent)
    return parent.right


def _describe(node: Optional[Node]) -> str:
    return _NIL if node is None else str(node.value)


def _search_sample_tree() -> Node:
    """The six-node tree shared by the completeness, search-tree and AVL demos.

    Its 402 node is hung under 128 but records the root as its parent.
    """
    root = Node(98)
    left = _left(root, 12)
    right = _right(root, 128)
    _right(left, 54)
    right.right = Node(402, parent=root)
    _left(left, 10)
    return root


def _heap_sample_tree() -> Node:
    root = Node(98)
    left = _left(root, 90)
    _right(root, 85)
    _right(left, 80)
    _left(left, 79)
    return root


def demo_ancestor() -> str:
    """Find lowest common ancestors of three node pairs."""
    root = Node(98)
    left = _left(root, 12)
    right = _right(root, 402)
    _right(left, 54)
    right_right = _right(right, 128)
    _left(left, 10)
    right_left = _left(right, 45)
    _left(right_right, 92)
    right_right_right = _right(right_right, 65)
    out = [render(root)]
    for first, second in (
        (left, right),
        (right_left, right_right_right),
        (right_right, right_right_right),
    ):
        found = ancestor(first, second)
        out.append(f"Ancestor of [{first.value}] & [{second.value}]: {_describe(found)}\n")
    return "".join(out)


def demo_levelorder() -> str:
    """Draw a tree, then list its values level by level."""
    root = Node(98)
    left = _left(root, 12)
    right = _right(root, 402)
    _left(left, 6)
    _right(left, 56)
    _left(right, 256)
    _right(right, 512)
    out = [render(root)]
    out.extend(f"{value}\n" for value in levelorder(root))
    delete(root)
    return "".join(out)


def demo_is_complete() -> str:
    """Check completeness while the tree grows."""
    root = _search_sample_tree()
    out = [
        render(root),
        f"Is {root.value} complete: {int(is_complete(root))}\n",
        f"Is {root.left.value} complete: {int(is_complete(root.left))}\n",
    ]
    _left(root.right, 112)
    out += [render(root), f"Is {root.value} complete: {int(is_complete(root))}\n"]
    _left(root.left.left, 8)
    out += [render(root), f"Is {root.value} complete: {int(is_complete(root))}\n"]
    _left(root.left.right, 23)
    out += [render(root), f"Is {root.value} complete: {int(is_complete(root))}\n"]
    delete(root)
    return "".join(out)


def demo_rotate_left() -> str:
    """Rotate a right-leaning tree left twice."""
    root = Node(98)
    right = _right(root, 128)
    _right(right, 402)
    out = [render(root), f"Rotate-left {root.value}\n"]
    root = rotate_left(root)
    out += [render(root), "\n"]
    _right(root.right, 450)
    _left(root.right, 420)
    out += [render(root), f"Rotate-left {root.value}\n"]
    root = rotate_left(root)
    out.append(render(root))
    return "".join(out)


def demo_rotate_right() -> str:
    """Rotate a left-leaning tree right twice."""
    root = Node(98)
    left = _left(root, 64)
    _left(left, 32)
    out = [render(root), f"Rotate-right {root.value}\n"]
    root = rotate_right(root)
    out += [render(root), "\n"]
    _left(root.left, 20)
    _right(root.left, 56)
    out += [render(root), f"Rotate-right {root.value}\n"]
    root = rotate_right(root)
    out.append(render(root))
    return "".join(out)


def demo_is_bst() -> str:
    """Check the search-tree property before and after adding a misplaced value."""
    root = _search_sample_tree()
    out = [
        render(root),
        f"Is {root.value} bst: {int(is_bst(root))}\n",
        f"Is {root.left.value} bst: {int(is_bst(root.left))}\n",
    ]
    _left(root.right, 97)
    out += [render(root), f"Is {root.value} bst: {int(is_bst(root))}\n"]
    return "".join(out)


def demo_bst_insert() -> str:
    """Insert values into a search tree, including one duplicate."""
    root: Optional[Node] = None
    out = []
    for value in BST_INSERT_SEQUENCE:
        root, node = bst_insert(root, value)
        out.append(f"Inserted: {node.value}\n")
    root, node = bst_insert(root, 128)
    out.append(f"Node should be nil -> {_describe(node)}\n")
    out.append(render(root))
    return "".join(out)


def demo_array_to_bst() -> str:
    """Build a search tree from the sample array and draw it."""
    return render(array_to_bst(SAMPLE))


def demo_bst_search() -> str:
    """Search the sample search tree for a present and a missing value."""
    tree = array_to_bst(SAMPLE)
    out = [render(tree)]
    node = bst_search(tree, 32)
    out += [f"Found: {node.value}\n", render(node)]
    node = bst_search(tree, 512)
    out.append(f"Node should be nil -> {_describe(node)}\n")
    return "".join(out)


def demo_bst_remove() -> str:
    """Remove three values from the sample search tree."""
    tree = array_to_bst(SAMPLE)
    out = [render(tree)]
    for value in (79, 21, 68):
        tree = bst_remove(tree, value)
        out += [f"Removed {value}...\n", render(tree)]
    delete(tree)
    return "".join(out)


def demo_is_avl() -> str:
    """Check the AVL property on several variations of a sample tree."""
    root = _search_sample_tree()
    out = [
        render(root),
        f"Is {root.value} avl: {int(is_avl(root))}\n",
        f"Is {root.left.value} avl: {int(is_avl(root.left))}\n",
    ]
    _left(root.right, 97)
    out += [render(root), f"Is {root.value} avl: {int(is_avl(root))}\n"]
    root = _search_sample_tree()
    deep = _right(root.right.right, 430)
    out += [render(root), f"Is {root.value} avl: {int(is_avl(root))}\n"]
    _left(deep, 420)
    out += [render(root), f"Is {root.value} avl: {int(is_avl(root))}\n"]
    return "".join(out)


def demo_avl_insert() -> str:
    """Insert values into an AVL tree, drawing it after each insertion."""
    root: Optional[Node] = None
    out = []
    for index, value in enumerate(INSERT_SEQUENCE):
        root, node = avl_insert(root, value)
        prefix = "" if index == 0 else "\n"
        out += [f"{prefix}Inserted: {node.value}\n", render(root)]
    return "".join(out)


def demo_array_to_avl() -> str:
    """Build an AVL tree from the sample array and draw it."""
    return render(array_to_avl(SAMPLE))


def demo_avl_remove() -> str:
    """Remove five values from the sample AVL tree."""
    tree = array_to_avl(SAMPLE)
    out = [render(tree)]
    for value in (47, 79, 32, 34, 22):
        tree = avl_remove(tree, value)
        out += [f"Removed {value}...\n", render(tree)]
    delete(tree)
    return "".join(out)


def demo_sorted_array_to_avl() -> str:
    """Build an AVL tree from a sorted array; show the array and the tree."""
    tree = sorted_array_to_avl(SORTED_SAMPLE)
    line = "".join(f"({value:03d})" for value in SORTED_SAMPLE)
    return f"{line}\n{render(tree)}"


def demo_is_heap() -> str:
    """Check the max-heap property on variations of a sample tree."""
    root = _heap_sample_tree()
    out = [
        render(root),
        f"Is {root.value} heap: {int(is_heap(root))}\n",
        f"Is {root.left.value} heap: {int(is_heap(root.left))}\n",
    ]
    _left(root.right, 97)
    out += [render(root), f"Is {root.value} heap: {int(is_heap(root))}\n"]
    root = _heap_sample_tree()
    _right(root.right, 79)
    out += [render(root), f"Is {root.value} heap: {int(is_heap(root))}\n"]
    return "".join(out)


def demo_heap_insert() -> str:
    """Insert values into a max heap, drawing it after each insertion."""
    root: Optional[Node] = None
    out = []
    for index, value in enumerate(INSERT_SEQUENCE):
        root, node = heap_insert(root, value)
        prefix = "" if index == 0 else "\n"
        out += [f"{prefix}Inserted: {node.value}\n", render(root)]
    return "".join(out)


def demo_heap_extract() -> str:
    """Extract the three largest values from the sample heap."""
    tree = array_to_heap(SAMPLE)
    out = [render(tree)]
    for _ in range(3):
        value, tree = heap_extract(tree)
        out += [f"Extracted: {value}\n", render(tree)]
    delete(tree)
    return "".join(out)