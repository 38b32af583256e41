import pytest

from colstore.bst import BSTree


@pytest.fixture
def three():
    tree = BSTree()
    for value in (10, 5, 15):
        tree.insert(value)
    return tree


def test_insert_single():
    tree = BSTree()
    tree.insert(10)
    assert tree.find(10) == 10
    assert len(tree) == 1


def test_insert_three(three):
    assert three.find(5) == 5
    assert three.find(15) == 15
    assert three.find(15) != 5
    assert len(three) == 3
    assert three.height() == 1


def test_insert_duplicate_ignored():
    tree = BSTree()
    tree.insert(10)
    tree.insert(10)
    assert len(tree) == 1


def test_remove_from_empty():
    tree = BSTree()
    assert tree.remove(5) is False
    assert len(tree) == 0


def test_remove_leaf(three):
    assert len(three) == 3
    assert three.remove(5) is True
    assert three.find(5) is None
    assert len(three) == 2


def test_remove_root(three):
    assert three.remove(10) is True
    assert len(three) == 2
    assert three.inorder() == [5, 15]


def test_inorder_empty():
    tree = BSTree()
    assert tree.inorder() == []
    assert tree.height() == -1


def test_inorder_five():
    tree = BSTree()
    for value in (10, 5, 15, 3, 7):
        tree.insert(value)
    result = tree.inorder()
    assert len(result) == 5
    assert result == [3, 5, 7, 10, 15]
    assert list(tree) == result


def test_remove_node_with_two_children_keeps_order():
    tree = BSTree()
    for value in (50, 30, 70, 20, 40, 60, 80, 65):
        tree.insert(value)
    assert tree.remove(50) is True
    assert tree.inorder() == [20, 30, 40, 60, 65, 70, 80]
    assert tree.find(50) is None
    assert len(tree) == 7


def test_remove_missing_returns_false(three):
    assert three.remove(99) is False
    assert len(three) == 3


def test_key_function_orders_and_dedupes():
    tree = BSTree(key=lambda pair: pair[0])
    tree.insert((2, "b"))
    tree.insert((1, "a"))
    tree.insert((2, "other"))
    assert len(tree) == 2
    assert tree.inorder() == [(1, "a"), (2, "b")]
    assert tree.find((2, None)) == (2, "b")
    assert tree.remove((1, None)) is True
    assert tree.inorder() == [(2, "b")]


def test_degenerate_tree_height_and_removal():
    tree = BSTree()
    for value in range(2000):
        tree.insert(value)
    assert tree.height() == 1999
    assert tree.inorder() == list(range(2000))
    for value in range(0, 2000, 2):
        assert tree.remove(value) is True
    assert tree.inorder() == list(range(1, 2000, 2))
    assert len(tree) == 1000


def test_insert_remove_round_trip_is_sorted():
    values = [42, 7, 19, 3, 88, 56, 23, 11, 64, 1]
    tree = BSTree()
    for value in values:
        tree.insert(value)
    assert tree.inorder() == sorted(values)
    for value in values[:5]:
        tree.remove(value)
    assert tree.inorder() == sorted(values[5:])
    assert len(tree) == 5