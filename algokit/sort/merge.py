"""
Merge operations and merge sort.

Two merge strategies combine adjacent sorted runs ``[begin, middle)`` and
``[middle, end)``:

- merge_in_place: no extra memory, O(n^2) element moves in the worst case
- merge_with_buffer: copies the left run aside, O(n) moves

Both are stable: on ties the element of the left run comes first.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence

from .base import Compare, resolve_range


def _valid_runs(seq: MutableSequence, begin: int, middle: int, end: int) -> bool:
    return resolve_range(seq, begin, end) is not None and begin <= middle <= end


def merge_in_place(
    seq: MutableSequence,
    begin: int,
    middle: int,
    end: int,
    compare: Compare = operator.le,
) -> None:
    """
    Merge two adjacent sorted runs without a buffer.

    Args:
        seq: Sequence holding both runs
        begin: Start of the left run
        middle: Start of the right run
        end: One past the end of the right run
        compare: Ordering predicate, ``operator.le`` for ascending order
    """
    if not _valid_runs(seq, begin, middle, end):
        return

    i, j = begin, middle
    while i < j < end:
        if compare(seq[i], seq[j]):
            i += 1
            continue
        # Rotate seq[j] down to position i
        value = seq[j]
        for k in range(j, i, -1):
            seq[k] = seq[k - 1]
        seq[i] = value
        i += 1
        j += 1


def merge_with_buffer(
    seq: MutableSequence,
    begin: int,
    middle: int,
    end: int,
    compare: Compare = operator.le,
) -> None:
    """
    Merge two adjacent sorted runs using a copy of the left run.

    Args:
        seq: Sequence holding both runs
        begin: Start of the left run
        middle: Start of the right run
        end: One past the end of the right run
        compare: Ordering predicate, ``operator.le`` for ascending order
    """
    if not _valid_runs(seq, begin, middle, end):
        return

    left = [seq[k] for k in range(begin, middle)]
    i, j, k = 0, middle, begin
    while i < len(left) and j < end:
        if compare(left[i], seq[j]):
            seq[k] = left[i]
            i += 1
        else:
            seq[k] = seq[j]
            j += 1
        k += 1

    # Remaining right-run elements are already in place
    while i < len(left):
        seq[k] = left[i]
        i += 1
        k += 1


def merge_sort(
    seq: MutableSequence,
    begin: int = 0,
    end: int | None = None,
    compare: Compare = operator.le,
    merge: Callable[..., None] = merge_with_buffer,
) -> None:
    """
    Sort ``seq[begin:end]`` in place with top-down merge sort.

    Args:
        seq: Sequence to sort
        begin: First index of the range
        end: One past the last index, ``None`` for ``len(seq)``
        compare: Ordering predicate, ``operator.le`` for ascending order
        merge: Merge strategy, ``merge_with_buffer`` or ``merge_in_place``
    """
    bounds = resolve_range(seq, begin, end)
    if bounds is None:
        return
    begin, end = bounds
    if end - begin < 2:
        return

    middle = begin + (end - begin) // 2
    merge_sort(seq, begin, middle, compare, merge)
    merge_sort(seq, middle, end, compare, merge)
    merge(seq, begin, middle, end, compare)
