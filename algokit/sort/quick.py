"""Quick sort."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence

from .base import Compare, resolve_range
from .partition import partition


def quick_sort(
    seq: MutableSequence,
    begin: int = 0,
    end: int | None = None,
    compare: Compare = operator.le,
) -> None:
    """
    Sort ``seq[begin:end]`` in place with quick sort.

    The middle element of each range is the pivot. The smaller side is sorted
    recursively and the larger one iteratively, which bounds the recursion
    depth by ``log2(n)``.

    Args:
        seq: Sequence to sort
        begin: First index of the range
        end: One past the last index, ``None`` for ``len(seq)``
        compare: Ordering predicate, ``operator.le`` for ascending order
    """
    bounds = resolve_range(seq, begin, end)
    if bounds is None:
        return
    begin, end = bounds

    while end - begin > 1:
        pivot = partition(seq, begin + (end - begin) // 2, begin, end, compare)
        if pivot - begin < end - pivot - 1:
            quick_sort(seq, begin, pivot, compare)
            begin = pivot + 1
        else:
            quick_sort(seq, pivot + 1, end, compare)
            end = pivot
