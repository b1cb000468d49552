"""Display formatting for statistics.

Undefined statistics (None or NaN) always render as ``N/A`` so they can
never be mistaken for a computed zero.
"""

from __future__ import annotations

import math

UNDEFINED = "N/A"


def is_undefined(value: float | None) -> bool:
    """Whether ``value`` carries no meaningful result."""
    return value is None or (isinstance(value, float) and math.isnan(value))


def format_number(value: float | None, digits: int = 3) -> str:
    """Format a statistic for display.

    Args:
        value: Statistic to format; None or NaN when undefined.
        digits: Decimal places for fixed notation.

    Returns:
        ``N/A`` for undefined values, scientific notation for non-zero
        magnitudes below 0.001, fixed notation otherwise.
    """
    if is_undefined(value):
        return UNDEFINED
    value = float(value)
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    if value != 0 and abs(value) < 0.001:
        return f"{value:.{max(digits - 1, 0)}e}"
    return f"{value:.{digits}f}"


def format_percentage(value: float | None, digits: int = 1) -> str:
    """Format a percentage (already scaled to 0-100) with a ``%`` sign."""
    if is_undefined(value):
        return UNDEFINED
    return f"{float(value):.{digits}f}%"
