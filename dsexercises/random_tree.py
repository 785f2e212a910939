import random

from dsexercises.errors import InvalidArgument

DEFAULT_SEED = 0
DEFAULT_MAX_MAGNITUDE = 128


class BinaryTree:
    def __init__(self, value, left = None, right = None):
        self.value = value
        self.left = left
        self.right = right
        self.size = 1 + subtree_size(left) + subtree_size(right)

    @classmethod
    def with_leaves(cls, value, left_value, right_value):
        return cls(value, cls(left_value), cls(right_value))

    def add(self, value, rng):
        """Insert value at the end of a random path starting here.

        Each step flips a coin: True goes right, False goes left. Every node on
        the path grows by one, the new leaf goes into the first empty slot.
        """
        node = self
        while True:
            node.size += 1
            if rng.random() < 0.5:
                if node.right is None:
                    node.right = BinaryTree(value)
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = BinaryTree(value)
                    return
                node = node.left

    def count_nodes(self):
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            for child in (node.left, node.right):
                if child is not None:
                    stack.append(child)
        return count

    def __eq__(self, other):
        if not isinstance(other, BinaryTree):
            return NotImplemented
        return self.value == other.value and self.left == other.left and self.right == other.right

    def __hash__(self):
        return hash((self.value, self.left, self.right))

    def __len__(self):
        return self.size

    def __repr__(self):
        return f'BinaryTree({self.size} nodes)'


def subtree_size(node):
    return 0 if node is None else node.size


def random_value(rng, max_magnitude):
    return rng.randrange(max_magnitude // 2) - max_magnitude


def build(size, max_magnitude = DEFAULT_MAX_MAGNITUDE, rng = None):
    """Grow a tree of `size` random integers.

    Values are drawn from [-max_magnitude, max_magnitude // 2 - max_magnitude).
    Without an explicit rng a fresh random.Random(DEFAULT_SEED) is used, so the
    result only depends on (size, max_magnitude).
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidArgument(f'size must be positive: {size}')
    if max_magnitude < 2:
        raise InvalidArgument(f'max_magnitude must be at least 2: {max_magnitude}')

    if rng is None:
        rng = random.Random(DEFAULT_SEED)

    tree = BinaryTree(random_value(rng, max_magnitude))
    for _ in range(size - 1):
        tree.add(random_value(rng, max_magnitude), rng)
    return tree


if __name__ == '__main__':
    for size in range(1, 100):
        tree = build(size, rng = random.Random())
        assert tree.size == tree.count_nodes() == size

    assert build(50) == build(50)
    assert build(50, rng = random.Random(1)) != build(50, rng = random.Random(2))
    print(build(50))
    print('success')
