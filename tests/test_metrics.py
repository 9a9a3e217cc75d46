from binarytrees.node import Node
from binarytrees.metrics import (
    ancestor,
    balance,
    depth,
    height,
    inner_nodes,
    is_complete,
    is_full,
    is_perfect,
    leaves,
    size,
)


def _level_tree(values):
    """Build a complete tree from values given in level order."""
    nodes = [Node(value) for value in values]
    for index, node in enumerate(nodes):
        for child_index, side in ((2 * index + 1, "left"), (2 * index + 2, "right")):
            if child_index < len(nodes):
                setattr(node, side, nodes[child_index])
                nodes[child_index].parent = node
    return nodes[0], nodes


def _left_chain(values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node.left = Node(value, node)
        node = node.left
    return root, node


def _mirror(tree, parent=None):
    if tree is None:
        return None
    copy = Node(tree.value, parent)
    copy.left = _mirror(tree.right, copy)
    copy.right = _mirror(tree.left, copy)
    return copy


def test_height_of_chain_and_empty():
    values = list(range(10))
    root, _ = _left_chain(values)
    assert height(root) == len(values) - 1
    assert height(None) == 0
    assert height(Node(5)) == 0


def test_depth():
    values = list(range(8))
    root, bottom = _left_chain(values)
    assert depth(root) == 0
    assert depth(bottom) == len(values) - 1
    assert depth(bottom) == depth(bottom.parent) + 1
    assert depth(None) == 0


def test_size_counts_every_node():
    values = [98, 12, 402, 6, 56, 256, 512, 1, 2]
    root, nodes = _level_tree(values)
    assert size(root) == len(values)
    assert size(None) == 0


def test_leaves_and_inner_nodes_partition_size():
    values = list(range(11))
    root, nodes = _level_tree(values)
    childless = [n for n in nodes if n.left is None and n.right is None]
    assert leaves(root) == len(childless)
    assert inner_nodes(root) == len(nodes) - len(childless)
    assert leaves(root) + inner_nodes(root) == size(root)
    assert inner_nodes(Node(1)) == 0
    assert leaves(None) == 0


def test_balance():
    root, _ = _level_tree(list(range(7)))
    assert balance(root) == 0
    assert balance(None) == 0
    chain, _ = _left_chain(list(range(5)))
    assert balance(chain) > 0
    assert balance(_mirror(chain)) == -balance(chain)


def test_is_full():
    root, nodes = _level_tree(list(range(7)))
    assert is_full(root) is True
    nodes[3].left = Node(99, nodes[3])
    assert is_full(root) is False
    assert is_full(None) is False
    assert is_full(Node(1)) is True


def test_is_perfect():
    root, nodes = _level_tree(list(range(7)))
    assert is_perfect(root) is True
    nodes[6].left = Node(99, nodes[6])
    assert is_perfect(root) is False
    assert is_perfect(None) is False
    assert is_perfect(Node(1)) is True


def test_is_complete():
    root, nodes = _level_tree(list(range(6)))
    assert is_complete(root) is True
    nodes[2].left = None
    nodes[5].parent = None
    nodes[2].right = Node(99, nodes[2])
    assert is_complete(root) is False
    assert is_complete(None) is False


def test_is_complete_rejects_gap_on_last_level():
    root, nodes = _level_tree(list(range(4)))
    nodes[3].parent = None
    nodes[1].left = None
    nodes[1].right = Node(99, nodes[1])
    assert is_complete(root) is False


def test_ancestor():
    root, nodes = _level_tree(list(range(15)))
    assert ancestor(nodes[1], nodes[2]) is root
    assert ancestor(nodes[7], nodes[10]) is nodes[1]
    assert ancestor(nodes[13], nodes[6]) is nodes[6]
    assert ancestor(nodes[4], nodes[4]) is nodes[4]
    assert ancestor(None, nodes[4]) is None


def test_ancestor_of_separate_trees_is_none():
    first, _ = _level_tree([1, 2, 3])
    second, _ = _level_tree([4, 5, 6])
    assert ancestor(first.left, second.right) is None