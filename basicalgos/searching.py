"""Searching a sequence and finding the best fixed-size window."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of target in the ascending sequence items, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of target, or None."""
    return next((index for index, item in enumerate(items) if item == target), None)


def max_window_sum(items: Sequence[int], k: int) -> int:
    """Return the largest sum of any k consecutive items.

    Raises ValueError when k is not between 1 and the number of items.
    """
    if not 1 <= k <= len(items):
        raise ValueError(f"window size must be between 1 and {len(items)}, got {k}")
    current = sum(items[:k])
    best = current
    for leaving, entering in zip(items, items[k:]):
        current += entering - leaving
        best = max(best, current)
    return best