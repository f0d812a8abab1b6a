import random

import pytest

from dsworkbench.b_tree import BTree


def _check_invariants(tree):
    root = tree.root
    if root is None:
        return
    t = tree.degree
    leaf_depths = set()

    def walk(node, depth, low, high):
        assert node.keys == sorted(node.keys)
        if node is root:
            assert 1 <= len(node.keys) <= 2 * t - 1
        else:
            assert t - 1 <= len(node.keys) <= 2 * t - 1
        for key in node.keys:
            assert (low is None or key >= low) and (high is None or key <= high)
        if node.leaf:
            assert node.children == []
            leaf_depths.add(depth)
            return
        assert len(node.children) == len(node.keys) + 1
        bounds = [low, *node.keys, high]
        for i, child in enumerate(node.children):
            walk(child, depth + 1, bounds[i], bounds[i + 1])

    walk(root, 0, None, None)
    assert len(leaf_depths) == 1


def test_degree_below_two_rejected():
    with pytest.raises(ValueError):
        BTree(1)


def test_empty_tree():
    tree = BTree(3)
    assert tree.keys() == []
    assert tree.render() == ""
    assert 5 not in tree


def test_render_before_and_after_root_split():
    tree = BTree(2)
    for key in (1, 2, 3):
        tree.insert(key)
    assert tree.render() == "[1, 2, 3] "
    tree.insert(4)
    assert tree.render() == "[2] [1] [3, 4] "


@pytest.mark.parametrize("degree", [2, 3, 4])
def test_insert_keeps_sorted_keys_and_invariants(degree):
    rng = random.Random(degree)
    values = list(range(150))
    rng.shuffle(values)
    tree = BTree(degree)
    for value in values:
        tree.insert(value)
        _check_invariants(tree)
    assert tree.keys() == list(range(150))
    assert all(v in tree for v in values)
    assert 150 not in tree and -1 not in tree


@pytest.mark.parametrize("degree", [2, 3, 5])
def test_remove_everything_in_random_order(degree):
    rng = random.Random(100 + degree)
    values = list(range(120))
    rng.shuffle(values)
    tree = BTree(degree)
    for value in values:
        tree.insert(value)
    remaining = set(values)
    rng.shuffle(values)
    for value in values:
        tree.remove(value)
        remaining.discard(value)
        _check_invariants(tree)
        assert value not in tree
        assert tree.keys() == sorted(remaining)
    assert tree.root is None


def test_remove_missing_key_raises_and_keeps_contents():
    tree = BTree(2)
    for key in range(0, 40, 2):
        tree.insert(key)
    with pytest.raises(KeyError):
        tree.remove(7)
    _check_invariants(tree)
    assert tree.keys() == list(range(0, 40, 2))


def test_remove_from_empty_tree_raises():
    with pytest.raises(KeyError):
        BTree(3).remove(1)


def test_duplicate_keys_are_kept_and_removed_one_at_a_time():
    tree = BTree(2)
    for _ in range(3):
        tree.insert(5)
    tree.remove(5)
    assert tree.keys() == [5, 5]
    assert 5 in tree