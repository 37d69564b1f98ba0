import pytest

from algoshelf.bst import (
    bst_lowest_common_ancestor,
    delete_node,
    insert_into_bst,
    is_valid_bst,
    kth_smallest,
    search_bst,
)
from algoshelf.trees import build_tree, inorder

VALUES = [6, 2, 8, 0, 4, 7, 9, 3, 5]


def _bst(values):
    root = None
    for value in values:
        root = insert_into_bst(root, value)
    return root


def test_insert_builds_sorted_tree():
    root = _bst(VALUES)
    assert inorder(root) == sorted(VALUES)
    assert is_valid_bst(root)
    assert root.val == VALUES[0]


def test_insert_equal_value_goes_left():
    root = insert_into_bst(build_tree([5]), 5)
    assert root.left.val == 5
    assert root.right is None


def test_search_bst():
    root = _bst(VALUES)
    for value in VALUES:
        assert search_bst(root, value).val == value
    assert search_bst(root, 100) is None
    assert search_bst(None, 1) is None


def test_kth_smallest_every_rank():
    root = _bst(VALUES)
    ordered = sorted(VALUES)
    for k in range(1, len(VALUES) + 1):
        assert kth_smallest(root, k) == ordered[k - 1]


def test_kth_smallest_empty_tree():
    assert kth_smallest(None, 1) == -1


@pytest.mark.parametrize("k", [0, len(VALUES) + 1])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(IndexError):
        kth_smallest(_bst(VALUES), k)


def test_bst_lowest_common_ancestor():
    root = _bst(VALUES)
    node = {v: search_bst(root, v) for v in VALUES}
    assert bst_lowest_common_ancestor(root, node[2], node[8]) is node[6]
    assert bst_lowest_common_ancestor(root, node[2], node[4]) is node[2]
    assert bst_lowest_common_ancestor(root, node[3], node[5]) is node[4]
    assert bst_lowest_common_ancestor(root, node[7], node[0]) is node[6]


@pytest.mark.parametrize("key", VALUES)
def test_delete_each_key(key):
    root = delete_node(_bst(VALUES), key)
    assert inorder(root) == sorted(v for v in VALUES if v != key)
    assert is_valid_bst(root)
    assert search_bst(root, key) is None


def test_delete_missing_key_leaves_tree():
    root = _bst(VALUES)
    assert delete_node(root, 42) is root
    assert inorder(root) == sorted(VALUES)


def test_delete_from_empty_and_single():
    assert delete_node(None, 1) is None
    assert delete_node(build_tree([1]), 1) is None


def test_is_valid_bst():
    assert is_valid_bst(build_tree([2, 1, 3]))
    assert not is_valid_bst(build_tree([5, 1, 4, None, None, 3, 6]))
    assert not is_valid_bst(build_tree([2, 2]))
    assert is_valid_bst(None)