"""Text patterns of stars and digits, each returned as a list of lines."""

from __future__ import annotations

from collections.abc import Callable, Iterator


def _row(width: int, filled: Callable[[int], bool]) -> str:
    return "".join("*" if filled(j) else " " for j in range(1, width + 1))


def _alternating_row(width: int, filled: Callable[[int], bool], ready: bool) -> tuple[str, bool]:
    """Fill eligible columns, leaving a gap after each star; return the row and final state."""
    cells = []
    for j in range(1, width + 1):
        if filled(j) and ready:
            cells.append("*")
            ready = False
        else:
            cells.append(" ")
            ready = True
    return "".join(cells), ready


def _arrow_lengths(rows: int) -> Iterator[int]:
    """Yield the arrow length of each row: growing to the middle, then shrinking."""
    k = 0
    for i in range(1, rows + 1):
        if rows % 2 == 0:
            if i <= rows // 2:
                k += 1
            if i > rows // 2 + 1:
                k -= 1
        elif i <= (rows + 1) // 2:
            k += 1
        else:
            k -= 1
        yield k


def pyramid(rows: int) -> list[str]:
    """Left-aligned half pyramid: row i holds i stars, each followed by a space."""
    return ["* " * i for i in range(1, rows + 1)]


def centered_triangle(n: int) -> list[str]:
    """Solid triangle with its apex at the top, n rows tall."""
    width = 2 * n - 1
    return [_row(width, lambda j, i=i: n + 1 - i <= j <= n - 1 + i) for i in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Solid triangle with its apex at the bottom, n rows tall."""
    width = 2 * n - 1
    return [_row(width, lambda j, i=i: i <= j <= 2 * n - i) for i in range(1, n + 1)]


def arrow_right(rows: int) -> list[str]:
    """Left-aligned arrow pointing right."""
    width = (rows + 1) // 2
    return [_row(width, lambda j, k=k: j <= k) for k in _arrow_lengths(rows)]


def arrow_left(n: int) -> list[str]:
    """Right-aligned arrow pointing left."""
    width = n // 2 + 1
    return [_row(width, lambda j, k=k: j >= width + 1 - k) for k in _arrow_lengths(n)]


def spaced_triangle(n: int) -> list[str]:
    """Triangle with its apex at the top, stars separated by spaces."""
    width = 2 * n - 1
    return [
        _alternating_row(width, lambda j, i=i: n + 1 - i <= j <= n - 1 + i, True)[0]
        for i in range(1, n + 1)
    ]


def spaced_inverted_triangle(n: int) -> list[str]:
    """Triangle with its apex at the bottom, stars separated by spaces."""
    width = 2 * n - 1
    return [
        _alternating_row(width, lambda j, i=i: i <= j <= 2 * n - i, True)[0]
        for i in range(1, n + 1)
    ]


def spaced_arrow_right(rows: int) -> list[str]:
    """Right-pointing arrow with spaced stars; even rows start with a gap.

    Odd rows continue from the state the previous row ended in.
    """
    width = rows * 2 - 1
    lines = []
    ready = True
    for i, k in enumerate(_arrow_lengths(rows), start=1):
        if i % 2 == 0:
            ready = False
        line, ready = _alternating_row(width, lambda j, k=k: j <= k, ready)
        lines.append(line)
    return lines


def spaced_arrow_left(n: int) -> list[str]:
    """Left-pointing arrow with spaced stars."""
    width = n // 2 + 1
    return [
        _alternating_row(width, lambda j, k=k: j >= width + 1 - k, True)[0]
        for k in _arrow_lengths(n)
    ]


def palindromic_pyramid() -> list[str]:
    """Five-row pyramid of digits that read the same in both directions."""
    lines = []
    for i in range(1, 6):
        x = i
        cells = []
        for j in range(1, 10):
            if 6 - i <= j <= 4 + i:
                cells.append(str(x))
                x += -1 if j < 5 else 1
            else:
                cells.append(" ")
        lines.append("".join(cells))
    return lines


def zigzag(n: int) -> list[str]:
    """Three-row zigzag of stars, n columns wide, each column two characters."""
    return [
        "".join(
            " *" if (i + j) % 4 == 0 or (i == 2 and j % 4 == 0) else "  "
            for j in range(1, n + 1)
        )
        for i in range(1, 4)
    ]


def pascal_triangle(n: int) -> list[str]:
    """First n rows of Pascal's triangle, each row's values written side by side."""
    lines = []
    for i in range(n):
        value = 1
        digits = []
        for j in range(i + 1):
            value = 1 if j == 0 else value * (i - j + 1) // j
            digits.append(str(value))
        lines.append("".join(digits))
    return lines