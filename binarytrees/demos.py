"""Demonstration runs of the basic node, traversal and measurement operations.

Each demo builds a sample tree, exercises one operation and returns the text
it produces. ``main`` prints the output of the demos named on the command line.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Optional, Sequence

from binarytrees import advanced_demos
from binarytrees.metrics import balance, depth, height, inner_nodes, is_full, is_perfect, leaves, size
from binarytrees.node import Node, delete, insert_left, insert_right, is_leaf, is_root, sibling, uncle
from binarytrees.printer import render
from binarytrees.traversal import inorder, postorder, preorder

_NIL = "(nil)"


def _left(parent: Node, value: int) -> Node:
    parent.left = Node(value, parent=parent)
    return parent.left


def _right(parent: Node, value: int) -> Node:
    parent.right = Node(value, parent=parent)
    return parent.right


def _describe(node: Optional[Node]) -> str:
    return _NIL if node is None else str(node.value)


def _three_node_tree() -> Node:
    root = Node(98)
    _left(root, 12)
    _right(root, 402)
    return root


def _grown_tree() -> Node:
    """The five-node tree built by inserting 54 and 128 into the three-node one."""
    root = _three_node_tree()
    insert_right(root.left, 54)
    insert_right(root, 128)
    return root


def _seven_node_tree(left_right: int) -> Node:
    root = _three_node_tree()
    _left(root.left, 6)
    _right(root.left, left_right)
    _left(root.right, 256)
    _right(root.right, 512)
    return root


def _family_tree() -> Node:
    root = Node(98)
    left = _left(root, 12)
    right = _right(root, 128)
    _right(left, 54)
    right_right = _right(right, 402)
    _left(left, 10)
    _left(right, 110)
    _left(right_right, 200)
    _right(right_right, 512)
    return root


def _walk(order: Callable[[Optional[Node]], Iterable[int]]) -> str:
    root = _seven_node_tree(56)
    return render(root) + "".join(f"{value}\n" for value in order(root))


def _measure(label: str, measure: Callable[[Optional[Node]], int]) -> str:
    root = _grown_tree()
    out = [render(root)]
    for node in (root, root.right, root.left.right):
        out.append(label.format(value=node.value, result=measure(node)))
    return "".join(out)


def demo_node() -> str:
    """Build a seven-node tree by hand and draw it."""
    return render(_seven_node_tree(16))


def demo_insert_left() -> str:
    """Draw a tree before and after inserting two left children."""
    root = _three_node_tree()
    out = [render(root), "\n"]
    insert_left(root.right, 128)
    insert_left(root, 54)
    out.append(render(root))
    return "".join(out)


def demo_insert_right() -> str:
    """Draw a tree before and after inserting two right children."""
    root = _three_node_tree()
    out = [render(root), "\n"]
    insert_right(root.left, 54)
    insert_right(root, 128)
    out.append(render(root))
    return "".join(out)


def demo_delete() -> str:
    """Draw a tree and then delete it."""
    root = _grown_tree()
    text = render(root)
    delete(root)
    return text


def demo_is_leaf() -> str:
    """Check which of three nodes are leaves."""
    root = _grown_tree()
    out = [render(root)]
    for node in (root, root.right, root.right.right):
        out.append(f"Is {node.value} a leaf: {int(is_leaf(node))}\n")
    return "".join(out)


def demo_is_root() -> str:
    """Check which of three nodes are roots."""
    root = _grown_tree()
    out = [render(root)]
    for node in (root, root.right, root.right.right):
        out.append(f"Is {node.value} a root: {int(is_root(node))}\n")
    return "".join(out)


def demo_preorder() -> str:
    """Draw a tree, then list its values in pre-order."""
    return _walk(preorder)


def demo_inorder() -> str:
    """Draw a tree, then list its values in in-order."""
    return _walk(inorder)


def demo_postorder() -> str:
    """Draw a tree, then list its values in post-order."""
    return _walk(postorder)


def demo_height() -> str:
    """Measure the height below three nodes."""
    return _measure("Height from {value}: {result}\n", height)


def demo_depth() -> str:
    """Measure the depth of three nodes."""
    return _measure("Depth of {value}: {result}\n", depth)


def demo_size() -> str:
    """Count the nodes below three nodes."""
    return _measure("Size of {value}: {result}\n", size)


def demo_leaves() -> str:
    """Count the leaves below three nodes."""
    return _measure("Leaves in {value}: {result}\n", leaves)


def demo_nodes() -> str:
    """Count the nodes with children below three nodes."""
    return _measure("Nodes in {value}: {result}\n", inner_nodes)


def demo_balance() -> str:
    """Measure the balance factor of three nodes in a lopsided tree."""
    root = _grown_tree()
    insert_left(root, 45)
    insert_right(root.left, 50)
    insert_left(root.left.left, 10)
    insert_left(root.left.left.left, 8)
    out = [render(root)]
    for node in (root, root.right, root.left.left.right):
        out.append(f"Balance of {node.value}: {balance(node):+d}\n")
    return "".join(out)


def demo_is_full() -> str:
    """Check fullness of the root and both of its subtrees."""
    root = _grown_tree()
    _left(root.left, 10)
    out = [render(root)]
    for node in (root, root.left, root.right):
        out.append(f"Is {node.value} full: {int(is_full(node))}\n")
    return "".join(out)


def demo_is_perfect() -> str:
    """Check perfection while the tree grows below one node."""
    root = _grown_tree()
    _left(root.left, 10)
    _left(root.right, 10)
    out = [render(root), f"Perfect: {int(is_perfect(root))}\n\n"]
    _left(root.right.right, 10)
    out += [render(root), f"Perfect: {int(is_perfect(root))}\n\n"]
    _right(root.right.right, 10)
    out += [render(root), f"Perfect: {int(is_perfect(root))}\n"]
    return "".join(out)


def demo_sibling() -> str:
    """Find the siblings of four nodes, the root among them."""
    root = _family_tree()
    out = [render(root)]
    for node in (root.left, root.right.left, root.left.right, root):
        out.append(f"Sibling of {node.value}: {_describe(sibling(node))}\n")
    return "".join(out)


def demo_uncle() -> str:
    """Find the uncles of three nodes."""
    root = _family_tree()
    out = [render(root)]
    for node in (root.right.left, root.left.right, root.left):
        out.append(f"Uncle of {node.value}: {_describe(uncle(node))}\n")
    return "".join(out)


DEMOS: dict[str, Callable[[], str]] = {
    "node": demo_node,
    "insert_left": demo_insert_left,
    "insert_right": demo_insert_right,
    "delete": demo_delete,
    "is_leaf": demo_is_leaf,
    "is_root": demo_is_root,
    "preorder": demo_preorder,
    "inorder": demo_inorder,
    "postorder": demo_postorder,
    "height": demo_height,
    "depth": demo_depth,
    "size": demo_size,
    "leaves": demo_leaves,
    "nodes": demo_nodes,
    "balance": demo_balance,
    "is_full": demo_is_full,
    "is_perfect": demo_is_perfect,
    "sibling": demo_sibling,
    "uncle": demo_uncle,
    "ancestor": advanced_demos.demo_ancestor,
    "levelorder": advanced_demos.demo_levelorder,
    "is_complete": advanced_demos.demo_is_complete,
    "rotate_left": advanced_demos.demo_rotate_left,
    "rotate_right": advanced_demos.demo_rotate_right,
    "is_bst": advanced_demos.demo_is_bst,
    "bst_insert": advanced_demos.demo_bst_insert,
    "array_to_bst": advanced_demos.demo_array_to_bst,
    "bst_search": advanced_demos.demo_bst_search,
    "bst_remove": advanced_demos.demo_bst_remove,
    "is_avl": advanced_demos.demo_is_avl,
    "avl_insert": advanced_demos.demo_avl_insert,
    "array_to_avl": advanced_demos.demo_array_to_avl,
    "avl_remove": advanced_demos.demo_avl_remove,
    "sorted_array_to_avl": advanced_demos.demo_sorted_array_to_avl,
    "is_heap": advanced_demos.demo_is_heap,
    "heap_insert": advanced_demos.demo_heap_insert,
    "heap_extract": advanced_demos.demo_heap_extract,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the output of the named demos, or of all of them when none is named."""
    parser = argparse.ArgumentParser(
        prog="binarytrees",
        description="Run binary tree demonstrations.",
    )
    parser.add_argument("demos", nargs="*", metavar="DEMO", help="demo names to run")
    parser.add_argument("--list", action="store_true", help="list the demo names and exit")
    args = parser.parse_args(argv)

    if args.list:
        sys.stdout.write("".join(f"{name}\n" for name in DEMOS))
        return 0

    unknown = [name for name in args.demos if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")

    names = args.demos or list(DEMOS)
    sys.stdout.write("\n".join(DEMOS[name]() for name in names))
    return 0


if __name__ == "__main__":
    sys.exit(main())