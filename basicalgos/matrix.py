"""Matrix multiplication over nested sequences."""

from __future__ import annotations

from collections.abc import Sequence


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the matrix product of a and b.

    Raises ValueError when rows are ragged or the inner dimensions differ.
    """
    left = [list(row) for row in a]
    right = [list(row) for row in b]
    inner = len(right)
    for row in left:
        if len(row) != inner:
            raise ValueError(
                f"rows of the first matrix must have {inner} entries, got {len(row)}"
            )
    if right and any(len(row) != len(right[0]) for row in right):
        raise ValueError("rows of the second matrix differ in length")
    columns = list(zip(*right))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in left]