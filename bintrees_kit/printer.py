"""Text rendering of binary trees as connected boxes of values."""

from __future__ import annotations

from typing import Optional

from .measure import height
from .node import Node


def render(tree: Optional[Node]) -> str:
    """Draw the tree as lines of text, one line per level; empty string for no tree."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]

    def put(depth: int, index: int, text: str) -> None:
        row = rows[depth]
        end = index + len(text)
        if end > len(row):
            row.extend(" " * (end - len(row)))
        row[index:end] = text

    def place(node: Optional[Node], offset: int, depth: int) -> int:
        if node is None:
            return 0
        label = f"({node.value:03d})"
        width = len(label)
        left = place(node.left, offset, depth + 1)
        right = place(node.right, offset + left + width, depth + 1)
        put(depth, offset + left, label)
        if depth:
            anchor = offset + left + width // 2
            parent = node.parent
            if parent is not None and parent.left is node:
                put(depth - 1, anchor, "-" * (width + right))
            else:
                put(depth - 1, offset - width // 2, "-" * (left + width))
            put(depth - 1, anchor, ".")
        return left + width + right

    place(tree, 0, 0)
    return "\n".join("".join(row).rstrip(" ") for row in rows)


def print_tree(tree: Optional[Node]) -> None:
    """Print the rendering of the tree; print nothing for no tree."""
    if tree is None:
        return
    print(render(tree))