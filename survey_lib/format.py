# -*- coding: utf-8 -*-
"""Number rendering shared by point descriptions and text exports.

Floats are rendered with their shortest round-trip representation, except
integral values which drop the fractional part (``5.0`` -> ``"5"``).
"""

from __future__ import annotations

import math

# Past this magnitude ``repr`` switches to exponent notation and ``int()``
# would print every digit, so integral values keep the ``repr`` form.
_MAX_INTEGRAL_RENDERING = 1e15


def format_number(value: float) -> str:
    """Format a number for descriptions and CSV output.

    Args:
        value: Numeric value

    Returns:
        String representation, e.g. ``"10.5"``, ``"5"``, ``"-0.25"``

    Examples:
        >>> format_number(5.0)
        '5'

        >>> format_number(20.25)
        '20.25'
    """
    value = float(value)
    if (
        math.isfinite(value)
        and value.is_integer()
        and abs(value) < _MAX_INTEGRAL_RENDERING
    ):
        return str(int(value))
    return repr(value)
