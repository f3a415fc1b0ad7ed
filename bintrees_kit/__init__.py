"""Linked binary trees with traversals, measurements, rotations, printing, BST, AVL and max-heap operations."""

__version__ = "0.1.0"

__all__ = ["avl", "bst", "heap", "measure", "node", "printer", "rotate", "traversal"]