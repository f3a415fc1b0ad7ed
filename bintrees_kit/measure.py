"""Size, shape and ancestry measurements of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _levels(tree: Optional[Node]) -> Iterator[list[Node]]:
    level = [tree] if tree is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def _level_count(tree: Optional[Node]) -> int:
    return sum(1 for _ in _levels(tree))


def height(tree: Optional[Node]) -> int:
    """Edges on the longest downward path; 0 for an empty tree or a single node."""
    return max(_level_count(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def nodes(tree: Optional[Node]) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Height of the left subtree minus that of the right, counting nodes; 0 if empty."""
    if tree is None:
        return 0
    return _level_count(tree.left) - _level_count(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """True when every node has either zero or two children; False if empty."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """True when every inner node has two children and all leaves share one level."""
    if tree is None:
        return False
    leaf_level = None
    for level_index, level in enumerate(_levels(tree)):
        for node in level:
            if node.is_leaf():
                if leaf_level is None:
                    leaf_level = level_index
                elif leaf_level != level_index:
                    return False
            elif node.left is None or node.right is None:
                return False
    return True


def is_complete(tree: Optional[Node]) -> bool:
    """True when every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """The deepest node that is an ancestor of (or equal to) both nodes, or None."""
    if first is None or second is None:
        return None
    lineage = set()
    node: Optional[Node] = first
    while node is not None:
        lineage.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in lineage:
            return node
        node = node.parent
    return None