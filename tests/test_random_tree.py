import random

import pytest

from dsexercises import BinaryTree, InvalidArgument, build
from dsexercises.random_tree import DEFAULT_MAX_MAGNITUDE, DEFAULT_SEED


def count(node):
    if node is None:
        return 0
    return 1 + count(node.left) + count(node.right)


def check_sizes(node):
    if node is None:
        return
    assert node.size == 1 + count(node.left) + count(node.right)
    check_sizes(node.left)
    check_sizes(node.right)


def values(node):
    if node is None:
        return []
    return [node.value] + values(node.left) + values(node.right)


def test_single_node():
    tree = build(1)
    assert tree.size == 1
    assert tree.left is None
    assert tree.right is None


def test_seeded_builds_are_equal():
    first = build(5, rng = random.Random(0))
    second = build(5, rng = random.Random(0))
    assert first == second
    assert first is not second
    assert hash(first) == hash(second)


def test_default_rng_is_seeded():
    assert build(30) == build(30)
    assert build(30) == build(30, DEFAULT_MAX_MAGNITUDE, random.Random(DEFAULT_SEED))


@pytest.mark.parametrize('size', [1, 2, 3, 10, 100, 500])
def test_cached_size_matches_count(size):
    tree = build(size, rng = random.Random(size))
    assert tree.size == len(tree) == size
    assert count(tree) == tree.count_nodes() == size
    check_sizes(tree)


def test_different_seeds_differ():
    assert build(20, rng = random.Random(1)) != build(20, rng = random.Random(2))


def test_values_in_range():
    max_magnitude = 10
    tree = build(200, max_magnitude, random.Random(3))
    for v in values(tree):
        assert -max_magnitude <= v < max_magnitude // 2 - max_magnitude


def test_does_not_touch_global_random():
    random.seed(42)
    expected = random.random()
    random.seed(42)
    build(50)
    build(50, rng = random.Random(5))
    assert random.random() == expected


@pytest.mark.parametrize('size', [0, -3, 2.5, True])
def test_invalid_size(size):
    with pytest.raises(InvalidArgument):
        build(size)


@pytest.mark.parametrize('max_magnitude', [1, 0, -8])
def test_invalid_magnitude(max_magnitude):
    with pytest.raises(InvalidArgument):
        build(5, max_magnitude)


def test_with_leaves():
    tree = BinaryTree.with_leaves(2, 1, 3)
    assert tree.size == 3
    assert tree.left.value == 1 and tree.left.size == 1
    assert tree.right.value == 3 and tree.right.size == 1
    assert tree == BinaryTree(2, BinaryTree(1), BinaryTree(3))


def test_structural_equality():
    assert BinaryTree(1) == BinaryTree(1)
    assert BinaryTree(1) != BinaryTree(2)
    assert BinaryTree(1, BinaryTree(0)) != BinaryTree(1, None, BinaryTree(0))
    assert BinaryTree.with_leaves(2, 1, 3) != BinaryTree.with_leaves(2, 3, 1)
    assert BinaryTree(1, BinaryTree(0)) != BinaryTree(1)
    assert BinaryTree(1) != 1


def test_add_updates_path():
    tree = BinaryTree(0)
    rng = random.Random(11)
    for v in range(1, 20):
        tree.add(v, rng)
        check_sizes(tree)
    assert tree.size == 20
    assert sorted(values(tree)) == list(range(20))


def test_repr():
    assert repr(build(7)) == 'BinaryTree(7 nodes)'
