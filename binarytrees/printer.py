"""Text rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from binarytrees.metrics import height
from binarytrees.node import Node


def _put(row: list[str], col: int, char: str) -> None:
    if col >= len(row):
        row.extend(" " * (col + 1 - len(row)))
    row[col] = char


def _layout(node: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    box = f"({node.value:03d})"
    width = len(box)
    left = _layout(node.left, offset, level + 1, rows)
    right = _layout(node.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(box):
        _put(rows[level], offset + left + i, char)
    if level and is_left:
        above = rows[level - 1]
        for i in range(width + right):
            _put(above, offset + left + width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    elif level:
        above = rows[level - 1]
        for i in range(left + width):
            _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, each level on its own line."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        stripped = text.rstrip(" ")
        if len(stripped) < 2:
            stripped = text.ljust(2)[:2]
        lines.append(stripped)
    return "\n".join(lines) + "\n"


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))