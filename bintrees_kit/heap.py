"""Max binary heap checks, insertion, extraction and sorting on linked nodes."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional

from .bst import Insertion
from .measure import is_complete, size
from .node import Node


class Extraction(NamedTuple):
    """Result of an extraction: the heap's root afterwards and the value taken out."""

    root: Optional[Node]
    value: int


def _node_at(root: Node, position: int) -> Node:
    """The node at a 1-based level-order position of a complete tree."""
    node = root
    for bit in bin(position)[3:]:
        child = node.right if bit == "1" else node.left
        if child is None:
            raise ValueError(f"no node at position {position}")
        node = child
    return node


def _children_at_most_parent(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.value > node.value:
                    return False
                stack.append(child)
    return True


def is_heap(tree: Optional[Node]) -> bool:
    """True for a complete tree where no child holds more than its parent; False if empty."""
    if tree is None:
        return False
    return is_complete(tree) and _children_at_most_parent(tree)


def heap_insert(root: Optional[Node], value: int) -> Insertion:
    """Insert a value at the next free position and sift it up.

    The returned node is the one that holds the value once sifting is done;
    the root node itself never changes unless the heap was empty.
    """
    if root is None:
        node = Node(value)
        return Insertion(node, node)
    position = size(root) + 1
    parent = _node_at(root, position // 2)
    new = Node(value, parent)
    if position % 2:
        parent.right = new
    else:
        parent.left = new

    node = new
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return Insertion(root, node)


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting values in order."""
    root: Optional[Node] = None
    for value in values:
        root = heap_insert(root, value).root
    return root


def _sift_down(node: Node) -> None:
    while True:
        larger = node.left
        if node.right is not None and (larger is None or node.right.value > larger.value):
            larger = node.right
        if larger is None or larger.value <= node.value:
            return
        node.value, larger.value = larger.value, node.value
        node = larger


def heap_extract(root: Optional[Node]) -> Extraction:
    """Remove the root value, refill it from the last node and sift down.

    Raises IndexError when the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    top = root.value
    last = _node_at(root, size(root))
    if last is root:
        return Extraction(None, top)
    root.value = last.value
    last.delete()
    _sift_down(root)
    return Extraction(root, top)


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap, returning its values in descending order."""
    result: list[int] = []
    while heap is not None:
        heap, value = heap_extract(heap)
        result.append(value)
    return result