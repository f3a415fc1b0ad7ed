from bintrees_kit.measure import height, size
from bintrees_kit.node import Node
from bintrees_kit.printer import print_tree, render


def _sample():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(16)
    right.insert_left(256)
    right.insert_right(512)
    return root


def test_render_worked_example():
    expected = "\n".join(
        [
            " " * 7 + ".-------(098)-------.",
            "  .--(012)--." + " " * 9 + ".--(402)--.",
            "(006)" + " " * 5 + "(016)" + " " * 5 + "(256)" + " " * 5 + "(512)",
        ]
    )
    assert render(_sample()) == expected


def test_render_single_node():
    assert render(Node(98)) == "(098)"


def test_render_negative_value():
    assert render(Node(-5)) == "(-05)"


def test_render_empty_tree():
    assert render(None) == ""


def test_render_line_count_matches_height():
    root = Node(1)
    root.insert_left(2).insert_left(3).insert_right(4)
    lines = render(root).split("\n")
    assert len(lines) == height(root) + 1


def test_render_has_every_label_and_no_trailing_spaces():
    root = _sample()
    text = render(root)
    assert text.count("(") == size(root)
    for value in (98, 12, 402, 6, 16, 256, 512):
        assert f"({value:03d})" in text
    assert all(line == line.rstrip(" ") for line in text.split("\n"))


def test_render_left_child_connector_starts_with_dot():
    root = Node(1)
    root.insert_left(2)
    first_line = render(root).split("\n")[0]
    assert first_line.lstrip(" ").startswith(".")
    assert first_line.endswith("(001)")


def test_print_tree_writes_render(capsys):
    root = _sample()
    print_tree(root)
    assert capsys.readouterr().out == render(root) + "\n"


def test_print_tree_none_prints_nothing(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""