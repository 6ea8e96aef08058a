"""Geocentric position of the Moon.

Series from Meeus, Astronomical Formulae for Calculators, chapter 30,
with T in Julian centuries from 1900 January 0.5. The precise series
(about 50 longitude, 45 latitude and 30 parallax terms, plus additive
periodic corrections to the fundamental arguments) is good to about 10"
in longitude; the low-precision series keeps only the three or four
largest terms of each and is good to about a degree.

Each periodic term is stored as (coefficient, multipliers of D, M, M', F,
power of the eccentricity factor E).
"""

from __future__ import annotations

import enum
from typing import NamedTuple

import numpy as np

from almanac_tools.angle_utils import dcos, dsin, limit_angle
from almanac_tools.config import get_moon_precision_name
from almanac_tools.constants import DAYS_PER_JULIAN_CENTURY, EARTH_RADIUS_KM, HALF_CIRCLE_DEGREES
from almanac_tools.planets.base import BodyState, centuries_1900

_MEAN_MOTION = 481267.8831  # degrees of mean longitude per century
SIDEREAL_MONTH_DAYS = 27.321661


class MoonPrecision(str, enum.Enum):
    """Named lunar series."""

    PRECISE = 'precise'
    LOW = 'low'


class _Arguments(NamedTuple):
    """Fundamental lunar arguments in degrees."""

    Lm: float  # mean longitude of the Moon
    M: float  # mean anomaly of the Sun
    Mm: float  # mean anomaly of the Moon
    D: float  # mean elongation
    F: float  # argument of latitude
    Ohm: float  # longitude of the ascending node
    e: float  # eccentricity factor for terms in M


_LONGITUDE_TERMS = (
    (6.288750, 0, 0, 1, 0, 0),
    (1.274018, 2, 0, -1, 0, 0),
    (0.658309, 2, 0, 0, 0, 0),
    (0.213616, 0, 0, 2, 0, 0),
    (-0.185596, 0, 1, 0, 0, 1),
    (-0.114336, 0, 0, 0, 2, 0),
    (0.058793, 2, 0, -2, 0, 0),
    (0.057212, 2, -1, -1, 0, 1),
    (0.053320, 2, 0, 1, 0, 0),
    (0.045874, 2, -1, 0, 0, 1),
    (0.041024, 0, -1, 1, 0, 1),
    (-0.034718, 1, 0, 0, 0, 0),
    (-0.030465, 0, 1, 1, 0, 1),
    (0.015326, 2, 0, 0, -2, 0),
    (-0.012528, 0, 0, 1, 2, 0),
    (-0.010980, 0, 0, -1, 2, 0),
    (0.010674, 4, 0, -1, 0, 0),
    (0.010034, 0, 0, 3, 0, 0),
    (0.008548, 4, 0, -2, 0, 0),
    (-0.007910, 2, 1, -1, 0, 1),
    (-0.006783, 2, 1, 0, 0, 1),
    (0.005162, -1, 0, 1, 0, 0),
    (0.005000, 1, 1, 0, 0, 1),
    (0.004049, 2, -1, 1, 0, 1),
    (0.003996, 2, 0, 2, 0, 0),
    (0.003862, 4, 0, 0, 0, 0),
    (0.003665, 2, 0, -3, 0, 0),
    (0.002695, 0, -1, 2, 0, 1),
    (0.002602, -2, 0, 1, -2, 0),
    (0.002396, 2, -1, -2, 0, 1),
    (-0.002349, 1, 0, 1, 0, 0),
    (0.002249, 2, -2, 0, 0, 2),
    (-0.002125, 0, 1, 2, 0, 1),
    (-0.002079, 0, 2, 0, 0, 2),
    (0.002059, 2, -2, -1, 0, 2),
    (-0.001773, 2, 0, 1, -2, 0),
    (-0.001595, 2, 0, 0, 2, 0),
    (0.001220, 4, -1, -1, 0, 1),
    (-0.001110, 0, 0, 2, 2, 0),
    (0.000892, -3, 0, 1, 0, 0),
    (-0.000811, 2, 1, 1, 0, 1),
    (0.000761, 4, -1, -2, 0, 1),
    (0.000717, 0, -2, 1, 0, 2),
    (0.000704, -2, -2, 1, 0, 2),
    (0.000693, 2, 1, -2, 0, 1),
    (0.000598, 2, -1, 0, -2, 1),
    (0.000550, 4, 0, 1, 0, 0),
    (0.000538, 0, 0, 4, 0, 0),
    (0.000521, 4, -1, 0, 0, 1),
    (0.000486, -1, 0, 2, 0, 0),
)

_LATITUDE_TERMS = (
    (5.128189, 0, 0, 0, 1, 0),
    (0.280606, 0, 0, 1, 1, 0),
    (0.277693, 0, 0, 1, -1, 0),
    (0.173238, 2, 0, 0, -1, 0),
    (0.055413, 2, 0, -1, 1, 0),
    (0.046272, 2, 0, -1, -1, 0),
    (0.032573, 2, 0, 0, 1, 0),
    (0.017198, 0, 0, 2, 1, 0),
    (0.009267, 2, 0, 1, -1, 0),
    (0.008823, 0, 0, 2, -1, 0),
    (0.008247, 2, -1, 0, -1, 1),
    (0.004323, 2, 0, -2, -1, 0),
    (0.004200, 2, 0, 1, 1, 0),
    (0.003372, -2, -1, 0, 1, 1),
    (0.002472, 2, -1, -1, 1, 1),
    (0.002222, 2, -1, 0, 1, 1),
    (0.002072, 2, -1, -1, -1, 1),
    (0.001877, 0, -1, 1, 1, 1),
    (0.001828, 4, 0, -1, -1, 0),
    (-0.001803, 0, 1, 0, 1, 1),
    (-0.001750, 0, 0, 0, 3, 0),
    (0.001570, 0, -1, 1, -1, 1),
    (-0.001487, 1, 0, 0, 1, 0),
    (-0.001481, 0, 1, 1, 1, 1),
    (0.001417, 0, -1, -1, 1, 1),
    (0.001350, 0, -1, 0, 1, 1),
    (0.001330, -1, 0, 0, 1, 0),
    (0.001106, 0, 3, 0, 1, 0),
    (0.001020, 4, 0, 0, -1, 0),
    (0.000833, 4, 0, -1, 1, 0),
    (0.000781, 0, 0, 1, -3, 0),
    (0.000670, 4, 0, -2, 1, 0),
    (0.000606, 2, 0, 0, -3, 0),
    (0.000597, 2, 0, 2, -1, 0),
    (0.000492, 2, -1, 1, -1, 1),
    (0.000450, -2, 0, 2, -1, 0),
    (0.000439, 0, 0, 3, -1, 0),
    (0.000423, 2, 0, 2, 1, 0),
    (0.000422, 2, 0, -3, -1, 0),
    (-0.000367, 2, 1, -1, 1, 1),
    (-0.000353, 2, 1, 0, 1, 1),
    (0.000331, 4, 0, 0, 1, 0),
    (0.000317, 2, -1, 1, 1, 1),
    (0.000306, 2, -2, 0, -1, 2),
    (-0.000283, 0, 0, 1, 3, 0),
)

_PARALLAX_CONSTANT = 0.950724

_PARALLAX_TERMS = (
    (0.051818, 0, 0, 1, 0, 0),
    (0.009531, 2, 0, -1, 0, 0),
    (0.007843, 2, 0, 0, 0, 0),
    (0.002824, 0, 0, 2, 0, 0),
    (0.000857, 2, 0, 1, 0, 0),
    (0.000533, 2, -1, 0, 0, 1),
    (0.000401, 2, -1, -1, 0, 1),
    (0.000320, 0, -1, 1, 0, 1),
    (-0.000271, 1, 0, 0, 0, 0),
    (-0.000264, 0, 1, 1, 0, 1),
    (-0.000198, 0, 0, -1, 2, 0),
    (0.000173, 0, 0, 3, 0, 0),
    (0.000167, 4, 0, -1, 0, 0),
    (-0.000111, 0, 1, 0, 0, 1),
    (0.000103, 4, 0, -2, 0, 0),
    (-0.000084, -2, 0, 2, 0, 0),
    (-0.000083, 2, 1, 0, 0, 1),
    (0.000079, 2, 0, 2, 0, 0),
    (0.000072, 4, 0, 0, 0, 0),
    (0.000064, 2, -1, 1, 0, 0),
    (-0.000063, 2, 1, -1, 0, 0),
    (0.000041, 1, 1, 0, 0, 0),
    (0.000035, 0, -1, 2, 0, 0),
    (-0.000033, -2, 0, 3, 0, 0),
    (-0.000030, 1, 0, 1, 0, 0),
    (-0.000029, -2, 0, 0, 2, 0),
    (-0.000029, 0, 1, 2, 0, 0),
    (0.000026, 2, -2, 0, 0, 0),
    (-0.000023, -2, 0, 1, 2, 0),
    (0.000019, 4, -1, -1, 0, 0),
)

_LOW_LONGITUDE_TERMS = _LONGITUDE_TERMS[:3]
_LOW_LATITUDE_TERMS = _LATITUDE_TERMS[:3]
_LOW_PARALLAX_TERMS = _PARALLAX_TERMS[:3]

# Latitude scale factor 1 - w1 - w2 with the node cosines taken as 1
_LOW_LATITUDE_FACTOR = 1.0 - 0.0004664 - 0.0000754


def _series(terms: tuple[tuple[float, int, int, int, int, int], ...], args: _Arguments, fn: np.ufunc) -> float:
    """Sum coefficient * E**power * fn(D, M, M', F combination) over terms."""
    table = np.array(terms, dtype=float)
    angles = np.radians(np.array([args.D, args.M, args.Mm, args.F]))
    phase = table[:, 1:5] @ angles
    factor = args.e ** table[:, 5]
    return float(np.sum(table[:, 0] * factor * fn(phase)))


def _arguments(jd: float, *, additive: bool) -> _Arguments:
    t = centuries_1900(jd)
    t2 = t * t
    t3 = t2 * t
    lm = 270.434164 + _MEAN_MOTION * t - 0.001133 * t2 + 0.0000019 * t3
    mm = 296.104608 + 477198.8491 * t + 0.009192 * t2 + 0.0000144 * t3
    d = 350.737486 + 445267.1142 * t - 0.001436 * t2 + 0.0000019 * t3
    f = 11.250889 + 483202.0251 * t - 0.003211 * t2 - 0.0000003 * t3
    ohm = limit_angle(259.183275 - 1934.1420 * t + 0.002078 * t2 + 0.0000022 * t3)
    m = 358.475833 + 35999.0498 * t - 0.000150 * t2 - 0.0000033 * t3

    if additive:
        s = dsin(51.2 + 20.2 * t)
        lm += 0.000233 * s
        m -= 0.001778 * s
        mm += 0.000817 * s
        d += 0.002011 * s

        # great Venus term
        s = dsin(346.560 + 132.870 * t - 0.0091731 * t2)
        lm += 0.003964 * s
        mm += 0.003964 * s
        d += 0.003964 * s
        f += 0.003964 * s

        s = dsin(ohm)
        lm += 0.001964 * s
        mm += 0.002541 * s
        d += 0.001964 * s
        f -= 0.024691 * s
        f -= 0.004328 * dsin(ohm + 275.05 - 2.3 * t)

    e = 1.0 - 0.002495 * t - 0.00000752 * t2
    return _Arguments(
        Lm=limit_angle(lm),
        M=limit_angle(m),
        Mm=limit_angle(mm),
        D=limit_angle(d),
        F=limit_angle(f),
        Ohm=ohm,
        e=e,
    )


def _signed_latitude(lat: float) -> float:
    lat = limit_angle(lat)
    if lat > HALF_CIRCLE_DEGREES:
        lat -= 2 * HALF_CIRCLE_DEGREES
    return lat


def _moon_state(jd: float, args: _Arguments, lon: float, lat: float, parallax: float) -> BodyState:
    return BodyState(
        date=jd,
        L=args.Lm,
        dL=_MEAN_MOTION / DAYS_PER_JULIAN_CENTURY,
        om=args.Ohm,
        ad=parallax,
        M=args.Mm,
        lon=limit_angle(lon),
        lat=_signed_latitude(lat),
        R=EARTH_RADIUS_KM / dsin(parallax),
        year=SIDEREAL_MONTH_DAYS,
    )


def moon_precise(jd: float) -> BodyState:
    """Geocentric Moon from the full series.

    Parameters:
        jd: Julian date.

    Returns:
        BodyState with ecliptic lon in [0, 360), lat in (-180, 180]
        (degrees), R in kilometres and ``ad`` set to the equatorial
        horizontal parallax in degrees. L, M and om are the Moon's mean
        longitude, mean anomaly and node.
    """
    t = centuries_1900(jd)
    args = _arguments(jd, additive=True)
    lon = args.Lm + _series(_LONGITUDE_TERMS, args, np.sin)
    w1 = 0.0004664 * dcos(args.Ohm)
    w2 = 0.0000754 * dcos(args.Ohm + 275.05 - 2.3 * t)
    lat = _series(_LATITUDE_TERMS, args, np.sin) * (1.0 - w1 - w2)
    parallax = _PARALLAX_CONSTANT + _series(_PARALLAX_TERMS, args, np.cos)
    return _moon_state(jd, args, lon, lat, parallax)


def moon_low_precision(jd: float) -> BodyState:
    """Geocentric Moon from the largest terms only (about 1 degree).

    Same fields and units as ``moon_precise``.
    """
    args = _arguments(jd, additive=False)
    lon = args.Lm + _series(_LOW_LONGITUDE_TERMS, args, np.sin)
    lat = _series(_LOW_LATITUDE_TERMS, args, np.sin) * _LOW_LATITUDE_FACTOR
    parallax = _PARALLAX_CONSTANT + _series(_LOW_PARALLAX_TERMS, args, np.cos)
    return _moon_state(jd, args, lon, lat, parallax)


def default_moon_precision() -> MoonPrecision:
    """Return the configured default lunar series."""
    return MoonPrecision(get_moon_precision_name())


def moon(jd: float, precision: MoonPrecision | str | None = None) -> BodyState:
    """Geocentric Moon using the requested (or configured) series.

    Parameters:
        jd: Julian date.
        precision: MoonPrecision or its name; None for the configured
            default (precise unless ALMANAC_MOON_PRECISION says otherwise).

    Returns:
        BodyState as from ``moon_precise``.
    """
    if precision is None:
        precision = default_moon_precision()
    if MoonPrecision(precision) is MoonPrecision.LOW:
        return moon_low_precision(jd)
    return moon_precise(jd)
