"""Summary measures over collections of values."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def standard_deviation(data: Iterable[float]) -> float:
    """Return the population standard deviation of data.

    Raises ValueError when data is empty.
    """
    values = list(data)
    if not values:
        raise ValueError("standard deviation needs at least one value")
    mean = sum(values) / len(values)
    return math.sqrt(sum((value - mean) ** 2 for value in values) / len(values))


def frequencies(values: Iterable[T]) -> dict[T, int]:
    """Return how often each value occurs, in order of first appearance."""
    return dict(Counter(values))