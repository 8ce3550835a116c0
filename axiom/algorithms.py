"""Comparison helpers and in-place sequence algorithms."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, Optional, TypeVar

T = TypeVar("T")


def less(a: Any, b: Any) -> bool:
    """Return True if ``a`` orders before ``b``."""
    return a < b


def equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` equals ``b``."""
    return a == b


def not_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` differs from ``b``."""
    return not equal(a, b)


def greater(a: Any, b: Any) -> bool:
    """Return True if ``a`` orders after ``b``."""
    return not less(a, b) and not equal(a, b)


def greater_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` does not order before ``b``."""
    return not less(a, b)


def less_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` orders before or equals ``b``."""
    return less(a, b) or equal(a, b)


def bubble_sort(items: MutableSequence[T]) -> None:
    """Sort ``items`` in place with bubble sort."""
    n = len(items)
    for done in range(n):
        swapped = False
        for j in range(n - done - 1):
            if items[j + 1] < items[j]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def shell_sort(items: MutableSequence[T]) -> None:
    """Sort ``items`` in place with shell sort, halving the gap each pass."""
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2


def quick_sort(
    items: MutableSequence[T], left: int = 0, right: Optional[int] = None
) -> None:
    """Sort ``items[left:right + 1]`` in place.

    Recursion always goes into the smaller partition, the larger one is
    handled by the loop, which keeps the stack depth logarithmic.
    """
    if right is None:
        right = len(items) - 1
    if items and (left < 0 or right >= len(items)):
        raise IndexError("sort range out of bounds")
    while left < right:
        pivot = items[right]
        store = left
        for k in range(left, right):
            if items[k] < pivot:
                items[store], items[k] = items[k], items[store]
                store += 1
        items[store], items[right] = items[right], items[store]

        if store - left <= right - store:
            quick_sort(items, left, store - 1)
            left = store + 1
        else:
            quick_sort(items, store + 1, right)
            right = store - 1


def reverse(items: MutableSequence[T]) -> None:
    """Reverse ``items`` in place."""
    items[:] = items[::-1]


def binary_search(items: Sequence[T], value: T) -> Optional[int]:
    """Return the index of ``value`` in the sorted ``items``, or None."""
    low, high = 0, len(items)
    while low < high:
        mid = (low + high) // 2
        candidate = items[mid]
        if candidate == value:
            return mid
        if candidate < value:
            low = mid + 1
        else:
            high = mid
    return None


def fill(items: MutableSequence[T], value: T) -> None:
    """Set every element of ``items`` to ``value``."""
    items[:] = [value] * len(items)