"""Range handling shared by the sorting routines."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

Compare = Callable[[Any, Any], bool]


def resolve_range(seq: MutableSequence, begin: int = 0, end: int | None = None) -> tuple[int, int] | None:
    """
    Normalize a half-open range over ``seq``.

    Args:
        seq: Sequence the range refers to
        begin: First index of the range
        end: One past the last index, ``None`` for ``len(seq)``

    Returns:
        ``(begin, end)`` if the range is non-empty and inside ``seq``, None otherwise
    """
    if end is None:
        end = len(seq)
    if begin < 0 or end > len(seq) or begin >= end:
        return None
    return begin, end


def swap(seq: MutableSequence, i: int, j: int) -> None:
    if i != j:
        seq[i], seq[j] = seq[j], seq[i]
