import pytest

from problemset.trees import TreeNode, inorder_traversal, level_order, min_depth


SAMPLE = [3, 9, 20, None, None, 15, 7]


def test_inorder_example():
    assert inorder_traversal(TreeNode.from_level_order([1, None, 2, 3])) == [1, 3, 2]


def test_level_order_example():
    assert level_order(TreeNode.from_level_order(SAMPLE)) == [[3], [9, 20], [15, 7]]


def test_min_depth_example():
    assert min_depth(TreeNode.from_level_order(SAMPLE)) == 2


@pytest.mark.parametrize(
    "values",
    [SAMPLE, [1, 2, 3, 4, 5, 6, 7], [1, None, 2, None, 3], [8]],
)
def test_level_order_flattens_to_input_values(values):
    tree = TreeNode.from_level_order(values)
    flat = [v for level in level_order(tree) for v in level]
    assert flat == [v for v in values if v is not None]


@pytest.mark.parametrize("values", [SAMPLE, [1, 2, 3, 4, 5, 6, 7], [5, 3, None, 1]])
def test_inorder_visits_every_value(values):
    tree = TreeNode.from_level_order(values)
    assert sorted(inorder_traversal(tree)) == sorted(v for v in values if v is not None)


def test_min_depth_of_chain_is_its_length():
    values = [2, None, 3, None, 4, None, 5, None, 6]
    chain = [v for v in values if v is not None]
    assert min_depth(TreeNode.from_level_order(values)) == len(chain)


def test_min_depth_not_greater_than_level_count():
    tree = TreeNode.from_level_order([1, 2, 3, 4, None, None, None, 5])
    assert min_depth(tree) <= len(level_order(tree))


@pytest.mark.parametrize("values", [[], [None]])
def test_empty_tree(values):
    tree = TreeNode.from_level_order(values)
    assert tree is None
    assert inorder_traversal(tree) == []
    assert level_order(tree) == []
    assert min_depth(tree) == 0


def test_from_level_order_links_children():
    root = TreeNode.from_level_order([1, 2, None, 4])
    assert root.left.val == 2
    assert root.right is None
    assert root.left.left.val == 4