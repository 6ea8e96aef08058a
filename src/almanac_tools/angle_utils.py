"""Angle normalization, degree trigonometry and sexagesimal conversion."""

from __future__ import annotations

import math
import re

from almanac_tools.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_DEGREE,
    DEG,
    DEGREES_PER_CIRCLE,
    HOURS_PER_CIRCLE,
    RAD,
)


def _limit(value: float, period: float) -> float:
    if value >= period:
        whole = int(value)
        return whole % int(period) + (value - whole)
    if value < 0.0:
        wrapped = period - _limit(-value, period)
        # -360 wraps to 360 - 0; keep the half-open range
        return 0.0 if wrapped >= period else wrapped
    return value


def limit_angle(angle: float) -> float:
    """Reduce an angle in degrees to [0, 360).

    Whole turns are removed from the integer part so that the fractional
    degrees are carried through untouched; negative values wrap upward.

    Parameters:
        angle: Angle in degrees, any magnitude.

    Returns:
        Equivalent angle in [0, 360).
    """
    return _limit(angle, DEGREES_PER_CIRCLE)


def limit_hour(hours: float) -> float:
    """Reduce a time or hour angle in hours to [0, 24).

    Parameters:
        hours: Value in hours, any magnitude.

    Returns:
        Equivalent value in [0, 24).
    """
    return _limit(hours, HOURS_PER_CIRCLE)


def dsin(x: float) -> float:
    return math.sin(x * RAD)


def dcos(x: float) -> float:
    return math.cos(x * RAD)


def dtan(x: float) -> float:
    return math.tan(x * RAD)


def dasin(x: float) -> float:
    return math.asin(x) * DEG


def dacos(x: float) -> float:
    return math.acos(x) * DEG


def datan(x: float) -> float:
    return math.atan(x) * DEG


def datan2(y: float, x: float) -> float:
    return math.atan2(y, x) * DEG


def hms_to_hours(h: float, m: float = 0.0, s: float = 0.0) -> float:
    """Convert hours (or degrees), minutes and seconds to a decimal value.

    A negative sign on any field makes the whole result negative, so
    ``hms_to_hours(-6, 43, 11.61)`` and ``hms_to_hours(0, -17, 25.94)``
    both give negative values.

    Parameters:
        h: Hours or degrees.
        m: Minutes (of time or arc).
        s: Seconds (of time or arc).

    Returns:
        Decimal hours or degrees.
    """
    sign = -1.0 if (h < 0 or m < 0 or s < 0) else 1.0
    value = abs(h) + abs(m) / ARCMIN_PER_DEGREE + abs(s) / ARCSEC_PER_DEGREE
    return sign * value


def hours_to_hms(hours: float) -> tuple[int, int, float]:
    """Split decimal hours (or degrees) into (h, m, s).

    The sign is carried on the first non-zero field.

    Parameters:
        hours: Decimal hours or degrees.

    Returns:
        Tuple (h, m, s) with integer h and m.
    """
    negative = hours < 0
    value = abs(hours)
    h = int(value)
    m = int((value - h) * ARCMIN_PER_DEGREE)
    s = (value - h - m / ARCMIN_PER_DEGREE) * ARCSEC_PER_DEGREE
    # Guard against 59.99999 -> 60 seconds from float error
    if s >= 60.0 - 1e-9:
        s = 0.0
        m += 1
        if m == 60:
            m = 0
            h += 1
    if negative:
        if h != 0:
            h = -h
        elif m != 0:
            m = -m
        else:
            s = -s
    return (h, m, s)


def parse_angle(string: str) -> float | None:
    """Parse an angle written as hours/degrees, minutes and seconds.

    Accepts three numbers (deg/h, m, s), two (deg/h, m), or one (deg/h),
    separated by whitespace or colons. Minutes and seconds must be
    non-negative. A leading minus makes the result negative.

    Parameters:
        string: Text such as "7 45 18.946", "-6:43:11.61" or "23.5".

    Returns:
        Decimal value in the units of the first field, or None on parse failure.
    """
    s = string.strip()
    if len(s) == 0:
        return None
    parts = [p for p in re.split(r'[\s:]+', s) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    while len(values) < 3:
        values.append(0.0)
    angle = hms_to_hours(abs(values[0]), values[1], values[2])
    if s.startswith('-'):
        angle = -angle
    return angle
