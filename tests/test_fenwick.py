import random

import pytest

from dsworkbench.fenwick import BinaryIndexedTree


def test_new_tree_is_zero():
    tree = BinaryIndexedTree(8)
    assert len(tree) == 8
    assert all(tree.query(i) == 0 for i in range(1, 9))


def test_update_then_get_returns_value():
    tree = BinaryIndexedTree(10)
    rng = random.Random(2)
    for _ in range(50):
        index = rng.randint(1, 10)
        value = rng.randint(-20, 20)
        tree.update(index, value)
        assert tree.get(index) == value


def test_first_position_propagates_to_every_prefix():
    tree = BinaryIndexedTree(9)
    tree.update(1, 3)
    assert [tree.query(i) for i in range(1, 10)] == [3] * 9


def test_query_one_equals_first_node():
    tree = BinaryIndexedTree(6)
    tree.update(1, 4)
    tree.update(3, 7)
    assert tree.query(1) == tree.get(1)


def test_query_is_sum_along_path():
    tree = BinaryIndexedTree(7)
    tree.update(1, 2)
    tree.update(3, 5)
    assert tree.query(3) == tree.get(3) + tree.get(2)


def test_repeated_update_is_idempotent():
    tree = BinaryIndexedTree(8)
    tree.update(4, 6)
    before = [tree.query(i) for i in range(1, 9)]
    tree.update(4, 6)
    assert [tree.query(i) for i in range(1, 9)] == before


@pytest.mark.parametrize("index", [0, -1, 6])
def test_out_of_range_index_raises(index):
    tree = BinaryIndexedTree(5)
    with pytest.raises(IndexError):
        tree.get(index)
    with pytest.raises(IndexError):
        tree.query(index)
    with pytest.raises(IndexError):
        tree.update(index, 1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BinaryIndexedTree(-1)


def test_render_single_node():
    assert BinaryIndexedTree(1).render() == " 0   \n"


def test_render_rows_double():
    tree = BinaryIndexedTree(7)
    for index in range(1, 8):
        tree.update(index, index)
    rows = tree.render().rstrip("\n").split("\n")
    assert [len(row.split()) for row in rows] == [1, 2, 4]
    flattened = [int(token) for row in rows for token in row.split()]
    assert flattened == [tree.get(i) for i in range(1, 8)]


def test_render_empty_tree():
    assert BinaryIndexedTree(0).render() == "\n"