"""Small integer and number routines."""

from __future__ import annotations

import math


def is_armstrong(n: int) -> bool:
    """Return True when the sum of the cubes of the digits of n equals n.

    Negative numbers are never Armstrong numbers.
    """
    if n < 0:
        return False
    return sum(int(digit) ** 3 for digit in str(n)) == n


def divide(dividend: int, divisor: int) -> tuple[int, int]:
    """Return (quotient, remainder) with the quotient truncated toward zero.

    The remainder takes the sign of the dividend. Raises ZeroDivisionError
    when divisor is zero.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def swap(first: float, second: float) -> tuple[float, float]:
    """Return the two values in exchanged order."""
    return second, first


def add(first: int, second: int) -> int:
    """Return the sum of two numbers."""
    return first + second


def reverse_number(n: int) -> int:
    """Return n with its decimal digits reversed, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def power(base: int, exponent: int) -> int:
    """Return base raised to a non-negative integer exponent."""
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def is_prime(n: int) -> bool:
    """Return True when n is a prime number.

    Raises ValueError for negative n.
    """
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))