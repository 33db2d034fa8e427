"""Byte-summing check used for fuzzing runs."""

from __future__ import annotations

_SCALE = 1000


def sum_values(data: bytes) -> int:
    """Return the sum of every byte in ``data`` scaled by 1000."""
    return sum(byte * _SCALE for byte in data)


def test_one_input(data: bytes) -> int:
    """Print the scaled sum and length of ``data``; always returns 0."""
    print(f"Value sum: {sum_values(data)}, len{len(data)}")
    return 0