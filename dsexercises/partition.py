"""
algorithm: partition (in-place, Lomuto style, pivot = first element)
input: (a_start, ..., a_(end-1))
output: index p of the pivot after reordering

piv <- a_start
p <- start
for i <- start + 1 to end - 1
    if a_i < piv
        then p <- p + 1
             swap(a_p, a_i)
swap(a_p, a_start)
return p

Loop invariant: {a_(start+1), ..., a_p} < piv and {a_(p+1), ..., a_(i-1)} >= piv.
Elements equal to the pivot stay on the right side.
"""

from typing import MutableSequence, Protocol, TypeVar

from dsexercises.errors import InvalidArgument


class Comparable(Protocol):
    def __lt__(self, other, /) -> bool: ...


T = TypeVar('T', bound = Comparable)


def swap(values, i, j):
    values[i], values[j] = values[j], values[i]


def check_range(values, start, end):
    if values is None or len(values) == 0:
        raise InvalidArgument('values must be a non-empty sequence')

    if not 0 <= start < end <= len(values):
        raise InvalidArgument(f'invalid range [{start}, {end}) for a sequence of length {len(values)}')


def partition(values: MutableSequence[T], start: int = 0, end: int = None) -> int:
    if values is not None and end is None:
        end = len(values)
    check_range(values, start, end)

    piv = values[start]
    p = start
    for i in range(start + 1, end):
        if values[i] < piv:
            p += 1
            swap(values, p, i)

    swap(values, p, start)
    return p


if __name__ == '__main__':
    import random

    for n in range(1, 100):
        values = [random.randint(0, 20) for _ in range(n)]
        start = random.randint(0, n - 1)
        end = random.randint(start + 1, n)
        copy = values.copy()
        piv = values[start]

        p = partition(values, start, end)

        assert values[p] == piv
        assert all(v < piv for v in values[start:p])
        assert all(v >= piv for v in values[p + 1:end])
        assert sorted(values[start:end]) == sorted(copy[start:end])
        assert values[:start] == copy[:start] and values[end:] == copy[end:]

    print('success')
