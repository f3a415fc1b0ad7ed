"""Binary search tree checks, insertion, lookup and removal."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Optional

from .node import Node


class Insertion(NamedTuple):
    """Result of an insertion: the tree's root afterwards and the node created."""

    root: Node
    node: Node


def is_bst(tree: Optional[Node]) -> bool:
    """True when every value is strictly between its ancestors' bounds; False if empty."""
    if tree is None:
        return False
    stack: list[tuple[Node, float, float]] = [(tree, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if not low < node.value < high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Insertion:
    """Insert a value; raise ValueError if it is already present."""
    if root is None:
        node = Node(value)
        return Insertion(node, node)
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, current)
                return Insertion(root, current.left)
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, current)
                return Insertion(root, current.right)
            current = current.right
        else:
            raise ValueError(f"{value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a BST by inserting values in order, skipping repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        root = bst_insert(root, value).root
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """The node holding value, or None."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if value < node.value else node.right
    return None


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value and return the new root; raise ValueError if it is absent.

    A node with two children takes the value of its in-order successor,
    which is then removed in its place.
    """
    node = bst_search(root, value)
    if node is None:
        raise ValueError(f"{value} is not in the tree")
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node = successor
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    if parent is not None:
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
    node.parent = node.left = node.right = None
    return root if parent is not None else child