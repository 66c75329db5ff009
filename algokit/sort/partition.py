"""Partition step used by quick sort."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence

from .base import Compare, resolve_range, swap


def partition(
    seq: MutableSequence,
    pivot: int,
    begin: int = 0,
    end: int | None = None,
    compare: Compare = operator.le,
) -> int:
    """
    Partition ``seq[begin:end]`` around the element at ``pivot``.

    After the call every element before the returned index satisfies
    ``compare(element, pivot_value)`` and no element after it does. An
    already partitioned range keeps its order.

    Args:
        seq: Sequence to reorder in place
        pivot: Index of the pivot element, inside ``[begin, end)``
        begin: First index of the range
        end: One past the last index, ``None`` for ``len(seq)``
        compare: Predicate sending an element to the left of the pivot

    Returns:
        New index of the pivot element, ``pivot`` unchanged if the range or
        pivot is invalid
    """
    bounds = resolve_range(seq, begin, end)
    if bounds is None or not bounds[0] <= pivot < bounds[1]:
        return pivot
    begin, end = bounds

    last = end - 1
    pivot_value = seq[pivot]
    swap(seq, pivot, last)

    store = begin
    for i in range(begin, last):
        if compare(seq[i], pivot_value):
            swap(seq, i, store)
            store += 1

    swap(seq, store, last)
    return store
