"""Factorial helpers."""

from __future__ import annotations


def factorial(value: int) -> int:
    """Return ``value!``; values of zero or below give 1."""
    result = 1
    while value > 0:
        result *= value
        value -= 1
    return result


def factorial_recursive(value: int) -> int:
    """Return ``value!`` by recursion; negative values are rejected."""
    if value < 0:
        raise ValueError(f"factorial is undefined for negative values: {value}")
    if value == 0:
        return 1
    return value * factorial_recursive(value - 1)