# File: utils/__init__.py
"""Pure Python utilities for Cultivator.

This module contains pure Python functions with ZERO Home Assistant dependencies.
All functions here can be unit tested without Home Assistant mocking.

Submodules:
    - dt_utils: Date/time parsing, calendar-day comparison, elapsed-day math
    - math_utils: Percentage and clamping helpers
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
