"""Angle conversion, range wrapping and clamping helpers."""

import math

PI = math.pi
TWO_PI = 2 * PI
HALF_PI = PI * 0.5


def rad_to_deg(rad):
    """Convert an angle from radians to degrees."""
    return rad * (180 / PI)


def deg_to_rad(deg):
    """Convert an angle from degrees to radians."""
    return deg * (PI / 180)


def _truncated_remainder(dividend, divisor):
    """Integer remainder whose sign follows the dividend."""
    result = abs(dividend) % abs(divisor)
    return -result if dividend < 0 else result


def wrap(value, low, high):
    """Wrap ``value`` into ``[low, high)``, cycling around the range.

    Integers are wrapped with integer arithmetic; anything else uses
    floating-point remainder.
    """
    span = high - low
    if span == 0:
        raise ValueError("cannot wrap into an empty range")
    if all(isinstance(n, int) for n in (value, low, high)):
        result = _truncated_remainder(value - low, span)
    else:
        result = math.fmod(value - low, span)
    if result < 0:
        result += span
    return low + result


def clamp(value, low, high):
    """Limit ``value`` to the closed range ``[low, high]``."""
    if value < low:
        return low
    if high < value:
        return high
    return value