# binarytrees

A small library of binary trees made from linked nodes. Every `Node`
holds an integer `value` and links to its `parent`, `left` and `right`
nodes. On top of that node type the package provides:

- **Building and inspecting trees**, in `binarytrees.node`: `Node`,
  `insert_left`, `insert_right`, `delete`, `is_leaf`, `is_root`,
  `sibling`, `uncle`. Inserting under a missing parent raises
  `ValueError`; an existing child is pushed down below the new node.
  `delete` detaches a subtree from its parent and breaks every link in it.
- **Traversals**, in `binarytrees.traversal`: `preorder`, `inorder`,
  `postorder`, `levelorder`. Each is a generator of node values.
- **Measurements and shape checks**, in `binarytrees.metrics`: `height`,
  `depth`, `size`, `leaves`, `inner_nodes`, `balance`, `is_full`,
  `is_perfect`, `is_complete`, and `ancestor` for the lowest common
  ancestor of two nodes.
- **Rotations**, in `binarytrees.rotate`: `rotate_left`, `rotate_right`.
  Each returns the new subtree root, or `None` when there is no child to
  rotate around.
- **Binary search trees**, in `binarytrees.bst`: `is_bst`, `bst_insert`,
  `array_to_bst`, `bst_search`, `bst_remove`. Duplicate values are
  refused.
- **AVL trees**, in `binarytrees.avl`: `is_avl`, `avl_insert`,
  `array_to_avl`, `avl_remove`, `sorted_array_to_avl`.
- **Max binary heaps**, in `binarytrees.heap`: `is_heap`, `heap_insert`,
  `array_to_heap`, `heap_extract`, `heap_to_sorted_array`.
- **Drawing trees as text**, in `binarytrees.printer`: `render` returns
  the drawing as a string (empty for `None`), `print_tree(tree, file)`
  writes it to `file`, standard output by default.

Operations that may change the root return it:

- `bst_insert(root, value)` and `avl_insert(root, value)` return
  `(root, new_node)`, with `new_node` set to `None` when the value is
  already present.
- `heap_insert(root, value)` returns `(root, node)`, where `node` holds
  `value` after it has been sifted up.
- `heap_extract(root)` returns `(value, new_root)` and raises
  `IndexError` on an empty heap.
- `bst_remove` and `avl_remove` return the new root.
- `heap_to_sorted_array` empties the heap and returns its values from
  largest to smallest.

Nothing outside the Python standard library is needed.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Example

```python
from binarytrees.bst import array_to_bst, bst_insert, bst_search, is_bst
from binarytrees.metrics import height, size
from binarytrees.printer import render
from binarytrees.traversal import inorder

tree = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95])

print(render(tree))
print(list(inorder(tree)))   # the values in ascending order
print(size(tree), height(tree))
print(is_bst(tree))

tree, node = bst_insert(tree, 32)
print(node)                  # None: 32 is already in the tree

found = bst_search(tree, 32)
print(render(found))         # the subtree rooted at 32
```

Trees are drawn with every value padded to three digits and dots and
dashes linking each parent to its children:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Demonstrations

The package ships a command that builds a series of small example trees
and prints each one together with what the operations report about it:

```
binarytrees-demo
```

With no arguments every demonstration runs. Name one or more to run only
those, or list the available names:

```
binarytrees-demo --list
binarytrees-demo avl_insert heap_extract
```

The same demonstrations are available from Python as `demo_*` functions
in `binarytrees.demos` and `binarytrees.advanced_demos`; each returns the
text it would print.

## What it does not do

Trees live in memory only. The package has no way to save a tree to a
file or load one back, and the text drawing is for reading, not for
parsing.