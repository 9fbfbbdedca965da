from toolbench.bintree import Tree, add, format_tree


def test_empty_tree_format():
    assert format_tree(None) == "[ ]"


def test_tree_string():
    tree = None
    for v in [10, 1, 12, 6, 2]:
        tree = add(tree, v)
    assert str(tree) == "[ 1 2 6 10 12 ]"
    assert format_tree(tree) == "[ 1 2 6 10 12 ]"


def test_add_returns_same_root():
    root = add(None, 5)
    assert add(root, 3) is root
    assert root.left == Tree(3)


def test_values_with_duplicates():
    tree = None
    for v in [3, 3, 1, 2, 3]:
        tree = add(tree, v)
    assert list(tree.values()) == [1, 2, 3, 3, 3]
    assert tree.right.value == 3