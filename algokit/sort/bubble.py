"""Bubble sort."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence

from .base import Compare, resolve_range, swap


def bubble_sort(
    seq: MutableSequence,
    begin: int = 0,
    end: int | None = None,
    compare: Compare = operator.lt,
) -> None:
    """
    Sort ``seq[begin:end]`` in place by repeatedly swapping adjacent pairs.

    A pair is swapped when ``compare(right, left)`` holds. Stops early after
    a pass without swaps.

    Args:
        seq: Sequence to sort
        begin: First index of the range
        end: One past the last index, ``None`` for ``len(seq)``
        compare: Strict ordering predicate, ``operator.lt`` for ascending order
    """
    bounds = resolve_range(seq, begin, end)
    if bounds is None:
        return
    begin, end = bounds

    for last in range(end - 1, begin, -1):
        swapped = False
        for i in range(begin, last):
            if compare(seq[i + 1], seq[i]):
                swap(seq, i, i + 1)
                swapped = True
        if not swapped:
            break
