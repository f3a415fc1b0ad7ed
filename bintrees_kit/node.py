"""Binary tree node with parent links and basic structural queries."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer and links to its parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        # The parent link is recorded but the parent is not told about the child.
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Remove this subtree: detach it from its parent and unlink every node in it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = node.left = node.right = None

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True when the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Number of edges between this node and the root of its tree."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        return parent.sibling()