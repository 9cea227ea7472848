from algocollection.tree import TreeNode, inorder, mirror


def _sample():
    return TreeNode(
        5,
        left=TreeNode(3, left=TreeNode(2), right=TreeNode(4)),
        right=TreeNode(6),
    )


def test_inorder_of_sample():
    assert list(inorder(_sample())) == [2, 3, 4, 5, 6]


def test_mirror_inorder_is_reversed():
    tree = _sample()
    assert list(inorder(mirror(tree))) == [6, 5, 4, 3, 2]


def test_mirror_leaves_original_untouched():
    tree = _sample()
    mirror(tree)
    assert tree == _sample()


def test_mirror_twice_restores_tree():
    tree = _sample()
    assert mirror(mirror(tree)) == tree


def test_mirror_swaps_children():
    result = mirror(_sample())
    assert result.left == TreeNode(6)
    assert result.right.val == 3
    assert result.right.left == TreeNode(4)
    assert result.right.right == TreeNode(2)


def test_empty_tree():
    assert mirror(None) is None
    assert list(inorder(None)) == []


def test_single_node():
    assert mirror(TreeNode(1)) == TreeNode(1)
    assert list(inorder(TreeNode(1))) == [1]