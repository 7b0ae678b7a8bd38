# File: utils/math_utils.py
"""Math and calculation utilities for Cultivator.

Pure Python math functions with ZERO Home Assistant dependencies.

Functions:
    - calculate_percentage: Rounded completion percentage
    - clamp_non_negative: Floor a counter or balance at zero
"""

from __future__ import annotations


def calculate_percentage(completed: int, total: int) -> int:
    """Return completed/total as a whole percentage, rounded half up.

    A zero or negative total yields 0. The result is capped at 100.

    Examples:
        calculate_percentage(1, 3) → 33
        calculate_percentage(2, 3) → 67
        calculate_percentage(5, 5) → 100
    """
    if total <= 0:
        return 0
    percentage = int(completed * 100 / total + 0.5)
    return max(0, min(100, percentage))


def clamp_non_negative(value: int) -> int:
    """Return value floored at zero."""
    return max(0, value)
