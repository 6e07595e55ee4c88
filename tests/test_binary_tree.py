import pytest

from dsdrills.binary_tree import TreeNode, main, parse_null_preorder, parse_preorder

SAMPLE = "1 2 4 # # 5 # # 3 # #".split()


def test_parse_preorder_levels():
    tree = parse_preorder(SAMPLE)
    assert tree.level_order() == [[1], [2, 3], [4, 5]]


def test_parse_preorder_sets_depths():
    tree = parse_preorder(SAMPLE)
    assert tree.level == 0
    assert tree.left.level == 1
    assert tree.left.right.level == 2
    assert tree.left.right.data == 5


def test_count_counts_every_node():
    tree = parse_preorder(SAMPLE)
    assert tree.count_leaves() == sum(token.isdigit() for token in SAMPLE)


def test_single_node_count():
    assert TreeNode(7).count_leaves() == 1


def test_swap_children_mirrors_levels():
    tree = parse_preorder(SAMPLE)
    before = tree.level_order()
    tree.swap_children()
    assert tree.level_order() == [list(reversed(level)) for level in before]


def test_swap_twice_restores():
    tree = parse_preorder(SAMPLE)
    before = tree.inorder()
    tree.swap_children()
    tree.swap_children()
    assert tree.inorder() == before


def test_inorder_of_swapped_is_reversed():
    tree = parse_preorder(SAMPLE)
    before = tree.inorder()
    tree.swap_children()
    assert tree.inorder() == before[::-1]


def test_max_width_leaves_out_deepest_level():
    tree = parse_preorder(SAMPLE)
    assert tree.max_width() == len(tree.level_order()[1])


def test_max_width_single_node():
    assert TreeNode(3).max_width() == 0


def test_parse_preorder_empty():
    assert parse_preorder([]) is None
    assert parse_preorder(["x"]) is None


def test_null_preorder_inorder():
    tree = parse_null_preorder("2 1 null null 3 null null".split())
    assert tree.inorder() == [1, 2, 3]


def test_null_preorder_missing_tail_is_empty():
    tree = parse_null_preorder(["9"])
    assert tree.inorder() == [9]
    assert tree.left is None and tree.right is None


def test_null_preorder_rejects_bad_token():
    with pytest.raises(ValueError):
        parse_null_preorder(["1", "abc"])


def test_null_preorder_null_root():
    assert parse_null_preorder(["null", "1"]) is None


def test_main_prints_report(tmp_path, capsys):
    source = tmp_path / "tree.txt"
    source.write_text(" ".join(SAMPLE))
    assert main([str(source)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "5"
    assert "2  3  " in lines
    assert "3  2  " in lines
    assert lines[-1] == "2"


def test_main_empty_tree(tmp_path):
    source = tmp_path / "tree.txt"
    source.write_text("#")
    assert main([str(source)]) == 1