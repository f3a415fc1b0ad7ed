"""AVL tree checks, insertion, removal and construction."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from .bst import Insertion, bst_remove, bst_search
from .measure import balance
from .node import Node
from .rotate import rotate_left, rotate_right


def _checked_height(node: Optional[Node], low: float, high: float) -> Optional[int]:
    if node is None:
        return 0
    if not low < node.value < high:
        return None
    left = _checked_height(node.left, low, node.value)
    if left is None:
        return None
    right = _checked_height(node.right, node.value, high)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_avl(tree: Optional[Node]) -> bool:
    """True for a valid BST whose subtree heights differ by at most one everywhere."""
    if tree is None:
        return False
    return _checked_height(tree, -math.inf, math.inf) is not None


def _insert(node: Optional[Node], parent: Optional[Node], value: int) -> tuple[Node, Node]:
    if node is None:
        created = Node(value, parent)
        return created, created
    if value < node.value:
        node.left, created = _insert(node.left, node, value)
    elif value > node.value:
        node.right, created = _insert(node.right, node, value)
    else:
        raise ValueError(f"{value} is already in the tree")

    factor = balance(node)
    if factor > 1 and value < node.left.value:
        node = rotate_right(node)
    elif factor < -1 and value > node.right.value:
        node = rotate_left(node)
    elif factor > 1 and value > node.left.value:
        node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif factor < -1 and value < node.right.value:
        node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node, created


def avl_insert(root: Optional[Node], value: int) -> Insertion:
    """Insert a value and rebalance; raise ValueError if it is already present."""
    if root is None:
        node = Node(value)
        return Insertion(node, node)
    new_root, node = _insert(root, None, value)
    return Insertion(new_root, node)


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting values in order, skipping repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        root = avl_insert(root, value).root
    return root


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    if node is None or node.is_leaf():
        return node
    _rebalance(node.left)
    _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value if present, rebalance bottom-up with single rotations, return the root."""
    if root is None:
        return None
    if bst_search(root, value) is not None:
        root = bst_remove(root, value)
    return _rebalance(root)


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values, taking the lower middle as each root."""

    def build(parent: Optional[Node], begin: int, last: int) -> Optional[Node]:
        if begin > last:
            return None
        middle = (begin + last) // 2
        node = Node(values[middle], parent)
        node.left = build(node, begin, middle - 1)
        node.right = build(node, middle + 1, last)
        return node

    return build(None, 0, len(values) - 1)