# bintrees_kit

Linked binary trees made from plain `Node` objects, with functions for
traversing, measuring, rotating and printing them. It also provides binary
search tree, AVL tree and max-heap operations on the same nodes. It has no
dependencies outside the standard library.

## Modules

- `bintrees_kit.node`: the `Node` class. A node holds `value` and links to
  `parent`, `left` and `right`. `Node(value, parent)` records the parent link,
  but it does not attach the node to the parent.
  - `insert_left(value)` and `insert_right(value)` create and return a new
    child. An existing child on that side moves down beneath the new node, on
    the same side.
  - `delete()` detaches the subtree from its parent and unlinks every node in it.
  - `is_leaf()`, `is_root()`, `depth()`, `sibling()` and `uncle()` answer
    questions about the node's place in its tree.
- `bintrees_kit.traversal`: `preorder`, `inorder`, `postorder` and
  `levelorder`. Each is a generator that yields node values. An empty tree
  (`None`) yields nothing.
- `bintrees_kit.measure`: functions that describe a tree's size and shape.
  - `height` counts edges, so a single node has height 0.
  - `size` counts all nodes, `leaves` counts nodes without children, and
    `nodes` counts nodes with at least one child.
  - `balance` is the height of the left subtree minus the height of the
    right subtree.
  - `is_full`, `is_perfect` and `is_complete` return `False` for an empty tree.
  - `lowest_common_ancestor(first, second)` returns the deepest node that both
    nodes descend from, or `None`.
- `bintrees_kit.rotate`: `rotate_left` and `rotate_right` return the new root
  of the subtree and update the parent links. Each raises `ValueError` when
  the node has no child on the side it would rotate around.
- `bintrees_kit.printer`: `render(tree)` returns an ASCII drawing with one
  line per level. It returns an empty string for `None`. `print_tree(tree)`
  prints that drawing.
- `bintrees_kit.bst`: binary search trees.
  - `is_bst` checks the ordering.
  - `bst_insert(root, value)` returns an `Insertion(root, node)`. It raises
    `ValueError` on a duplicate value.
  - `array_to_bst(values)` inserts the values in order and skips repeats.
  - `bst_search` returns the matching node or `None`.
  - `bst_remove(root, value)` returns the new root. It raises `ValueError`
    if the value is absent. A node with two children takes the value of its
    in-order successor.
- `bintrees_kit.avl`: AVL trees.
  - `is_avl` checks both the ordering and the balance.
  - `avl_insert` rebalances and returns an `Insertion`. It raises
    `ValueError` on a duplicate value.
  - `array_to_avl` inserts the values in order and skips repeats.
  - `avl_remove(root, value)` removes the value if it is present, then
    rebalances from the bottom up using single rotations. It returns the new
    root.
  - `sorted_array_to_avl(values)` builds a balanced tree from a sorted
    sequence, using the lower middle element as each root.
- `bintrees_kit.heap`: max binary heaps.
  - `is_heap` checks the heap shape and ordering.
  - `heap_insert` returns an `Insertion` whose `node` is the node that holds
    the value after it has been sifted up.
  - `array_to_heap` inserts the values in order.
  - `heap_extract(root)` returns an `Extraction(root, value)`. It raises
    `IndexError` on an empty heap.
  - `heap_to_sorted_array` empties the heap into a list in descending order.

Functions that can change a tree's root return the new root, so keep the
returned value.

## Installation

```
pip install bintrees_kit
```

## Example

```python
from bintrees_kit.bst import array_to_bst, bst_remove, bst_search
from bintrees_kit.heap import array_to_heap, heap_to_sorted_array
from bintrees_kit.measure import height
from bintrees_kit.printer import print_tree
from bintrees_kit.traversal import inorder

root = array_to_bst([98, 402, 12, 46, 128, 256, 512, 50])
print(list(inorder(root)))        # [12, 46, 50, 98, 128, 256, 402, 512]
print(height(root))
print(bst_search(root, 46) is not None)   # True
root = bst_remove(root, 98)
print_tree(root)

heap = array_to_heap([5, 1, 9, 3])
print(heap_to_sorted_array(heap))  # [9, 5, 3, 1]
```

The printer draws each value as `(nnn)`, zero-padded to three digits. Dashes
and dots join each node to its parent:

```python
from bintrees_kit.node import Node
from bintrees_kit.printer import render

root = Node(98)
root.insert_left(12)
root.insert_right(402)
print(render(root))
```

## What it does not do

This is a library only. It has no command-line tool. It does not save trees
to files or load them from files. The trees hold integer values, not keyed
records.

## Running the tests

```
pip install -e .[test]
pytest
```