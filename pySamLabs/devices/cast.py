# pySamLabs/devices/cast.py

import math


def to_number(value) -> float:
    """
    Converts a block argument to a float the way the host runtime does:
    numeric strings are parsed, anything else (including NaN) becomes 0.
    """
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def to_int(value) -> int:
    """Truncates a block argument toward zero; infinities become 0."""
    number = to_number(value)
    if math.isinf(number):
        return 0
    return int(number)


def clamp(value, low, high):
    return max(low, min(high, value))
