"""Classic comparison sorts, each returning a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) by distributing them into buckets.

    There are as many buckets as values. A value outside [0, 1) has no
    bucket and raises ValueError.
    """
    items = list(values)
    size = len(items)
    buckets: list[list[float]] = [[] for _ in range(size)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(size * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    a = next(left_iter, None)
    b = next(right_iter, None)
    taken_a = taken_b = 0
    while taken_a < len(left) and taken_b < len(right):
        if a < b:
            merged.append(a)
            taken_a += 1
            a = next(left_iter, None)
        else:
            merged.append(b)
            taken_b += 1
            b = next(right_iter, None)
    merged.extend(left[taken_a:])
    merged.extend(right[taken_b:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging the results."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element as pivot."""
    items = list(values)
    if len(items) <= 1:
        return items
    pivot, *rest = items
    lower = [value for value in rest if value <= pivot]
    upper = [value for value in rest if value > pivot]
    return quick_sort(lower) + [pivot] + quick_sort(upper)


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly moving the smallest remaining value to the front."""
    items = list(values)
    for position in range(len(items) - 1):
        smallest = min(range(position, len(items)), key=items.__getitem__)
        items[position], items[smallest] = items[smallest], items[position]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping adjacent out-of-order pairs, pass after pass."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        for d in range(unsorted_end):
            if items[d] > items[d + 1]:
                items[d], items[d + 1] = items[d + 1], items[d]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def exchange_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by comparing each position with every later one and swapping when larger."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items