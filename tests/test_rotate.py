import pytest

from bintrees_kit.node import Node
from bintrees_kit.rotate import rotate_left, rotate_right
from bintrees_kit.traversal import inorder, preorder


def _links_ok(root):
    if root.parent is not None:
        return False
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.parent is not node:
                    return False
                stack.append(child)
    return True


def _right_chain(*values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.insert_right(value)
    return root


def _left_chain(*values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.insert_left(value)
    return root


def test_rotate_left_on_right_chain():
    root = _right_chain(98, 128, 402)
    new_root = rotate_left(root)
    assert new_root.value == 128
    assert new_root.parent is None
    assert new_root.left is root
    assert new_root.right.value == 402
    assert root.parent is new_root
    assert root.right is None
    assert _links_ok(new_root)


def test_rotate_right_on_left_chain():
    root = _left_chain(98, 64, 32)
    new_root = rotate_right(root)
    assert new_root.value == 64
    assert new_root.parent is None
    assert new_root.right is root
    assert new_root.left.value == 32
    assert root.left is None
    assert _links_ok(new_root)


def test_rotate_left_moves_inner_child():
    root = Node(10)
    pivot = root.insert_right(30)
    inner = pivot.insert_left(20)
    new_root = rotate_left(root)
    assert new_root is pivot
    assert root.right is inner
    assert inner.parent is root
    assert list(inorder(new_root)) == [10, 20, 30]
    assert _links_ok(new_root)


def test_rotate_right_moves_inner_child():
    root = Node(30)
    pivot = root.insert_left(10)
    inner = pivot.insert_right(20)
    new_root = rotate_right(root)
    assert new_root is pivot
    assert root.left is inner
    assert inner.parent is root
    assert list(inorder(new_root)) == [10, 20, 30]


def test_rotation_inside_tree_updates_parent_link():
    root = _right_chain(10, 20, 30, 40)
    middle = root.right
    pivot = rotate_left(middle)
    assert root.right is pivot
    assert pivot.parent is root
    assert pivot.value == 30
    assert pivot.left is middle
    assert _links_ok(root)


def test_rotation_inside_left_subtree_updates_parent_link():
    root = _left_chain(40, 30, 20, 10)
    middle = root.left
    pivot = rotate_right(middle)
    assert root.left is pivot
    assert pivot.value == 20
    assert _links_ok(root)


def test_rotations_are_inverse():
    root = Node(50)
    left = root.insert_left(30)
    left.insert_left(20)
    left.insert_right(40)
    root.insert_right(70)
    before = list(preorder(root))
    restored = rotate_left(rotate_right(root))
    assert restored is root
    assert list(preorder(restored)) == before
    assert _links_ok(restored)


def test_rotation_preserves_inorder():
    root = Node(4)
    root.insert_left(2).insert_left(1)
    root.left.insert_right(3)
    root.insert_right(6)
    before = list(inorder(root))
    assert list(inorder(rotate_right(root))) == before


@pytest.mark.parametrize("rotate", [rotate_left, rotate_right])
def test_rotate_none_raises(rotate):
    with pytest.raises(ValueError):
        rotate(None)


def test_rotate_left_without_right_child_raises():
    root = Node(1)
    root.insert_left(0)
    with pytest.raises(ValueError):
        rotate_left(root)


def test_rotate_right_without_left_child_raises():
    root = Node(1)
    root.insert_right(2)
    with pytest.raises(ValueError):
        rotate_right(root)