"""Internal utilities for solarhijri.

This module contains private implementation details:
    - Astronomical constants and calendar tables
    - Leap-cycle arithmetic
    - Forward and reverse conversion arithmetic
    - Component validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from solarhijri._internal.validation import (
    validate_components,
    validate_day,
    validate_month,
    validate_range,
)

__all__: list[str] = [
    "validate_components",
    "validate_day",
    "validate_month",
    "validate_range",
]
