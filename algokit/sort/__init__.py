"""
Comparison-based sorting primitives over mutable random-access sequences.

Every routine works in place on a half-open range ``[begin, end)`` of a
list, a 1-D numpy array or any sequence supporting item assignment, and
orders elements with a binary ``compare`` predicate (``operator.le`` for
ascending order, ``operator.ge`` for descending). Invalid ranges are no-ops.
"""

from .base import resolve_range
from .bubble import bubble_sort
from .merge import merge_in_place, merge_sort, merge_with_buffer
from .partition import partition
from .quick import quick_sort

__all__ = [
    "bubble_sort",
    "merge_in_place",
    "merge_sort",
    "merge_with_buffer",
    "partition",
    "quick_sort",
    "resolve_range",
]
