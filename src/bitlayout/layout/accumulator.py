"""Summation of resolved field widths."""

from typing import Iterable


def total_width(widths: Iterable[int]) -> int:
    """
    Sum field widths into a record's total bit-width.

    Args:
        widths: Resolved bit-widths in declaration order

    Returns:
        Total number of bits (0 for a record with no fields)
    """
    total = 0
    for index, width in enumerate(widths):
        if width < 0:
            raise ValueError(f"Field width at position {index} is negative: {width}")
        total += width
    return total
