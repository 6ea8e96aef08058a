"""Obliquity of the ecliptic, nutation and precession.

Precession is the slow rotation of the Earth's axis, about 50" of
longitude per year; one full turn of the equinoxes takes about 26,000
years. Nutation is the superimposed wobble, mostly the 18.6-year lunar
node term with an amplitude of about 9.2" in obliquity.

Three nutation series are available as ``NutationModel`` values:

- ``IAU1980``: the 63-term series of Meeus, Astronomical Algorithms,
  table 22.A (centuries from J2000). Default.
- ``LOW_PRECISION``: four terms in the Moon's node and the mean
  longitudes of Sun and Moon, good to about 0.5" (centuries from J2000).
- ``CLASSIC``: the series of the 1900-epoch formulary, kept because older
  reference values depend on its digits.

Obliquity uses centuries from J2000; precession uses tropical centuries
from 1900.0.
"""

from __future__ import annotations

import enum
import math
from typing import NamedTuple

import numpy as np

from almanac_tools.angle_utils import limit_angle, limit_hour
from almanac_tools.config import get_nutation_model_name
from almanac_tools.constants import (
    ARCSEC_PER_DEGREE,
    DAYS_PER_JULIAN_CENTURY,
    DAYS_PER_TROPICAL_CENTURY,
    DEG,
    DEGREES_PER_HOUR_RA,
    EARTH_TILT_J2000,
    JD1900,
    JD1900_TROPICAL,
    JD2000,
    RAD,
)


class NutationModel(str, enum.Enum):
    """Named nutation series."""

    IAU1980 = 'iau1980'
    LOW_PRECISION = 'low'
    CLASSIC = 'classic'


class NutationResult(NamedTuple):
    """Nutation in longitude and in obliquity, arcseconds."""

    dpsi: float
    deps: float


# Meeus table 22.A. Multipliers of D, M, M', F, Omega; then the
# longitude coefficients (sin) and obliquity coefficients (cos) as
# constant + rate*T, in units of 0.0001".
_IAU1980_TERMS: tuple[tuple[int, int, int, int, int, float, float, float, float], ...] = (
    (0, 0, 0, 0, 1, -171996.0, -174.2, 92025.0, 8.9),
    (-2, 0, 0, 2, 2, -13187.0, -1.6, 5736.0, -3.1),
    (0, 0, 0, 2, 2, -2274.0, -0.2, 977.0, -0.5),
    (0, 0, 0, 0, 2, 2062.0, 0.2, -895.0, 0.5),
    (0, 1, 0, 0, 0, 1426.0, -3.4, 54.0, -0.1),
    (0, 0, 1, 0, 0, 712.0, 0.1, -7.0, 0.0),
    (-2, 1, 0, 2, 2, -517.0, 1.2, 224.0, -0.6),
    (0, 0, 0, 2, 1, -386.0, -0.4, 200.0, 0.0),
    (0, 0, 1, 2, 2, -301.0, 0.0, 129.0, -0.1),
    (-2, -1, 0, 2, 2, 217.0, -0.5, -95.0, 0.3),
    (-2, 0, 1, 0, 0, -158.0, 0.0, 0.0, 0.0),
    (-2, 0, 0, 2, 1, 129.0, 0.1, -70.0, 0.0),
    (0, 0, -1, 2, 2, 123.0, 0.0, -53.0, 0.0),
    (2, 0, 0, 0, 0, 63.0, 0.0, 0.0, 0.0),
    (0, 0, 1, 0, 1, 63.0, 0.1, -33.0, 0.0),
    (2, 0, -1, 2, 2, -59.0, 0.0, 26.0, 0.0),
    (0, 0, -1, 0, 1, -58.0, -0.1, 32.0, 0.0),
    (0, 0, 1, 2, 1, -51.0, 0.0, 27.0, 0.0),
    (-2, 0, 2, 0, 0, 48.0, 0.0, 0.0, 0.0),
    (0, 0, -2, 2, 1, 46.0, 0.0, -24.0, 0.0),
    (2, 0, 0, 2, 2, -38.0, 0.0, 16.0, 0.0),
    (0, 0, 2, 2, 2, -31.0, 0.0, 13.0, 0.0),
    (0, 0, 2, 0, 0, 29.0, 0.0, 0.0, 0.0),
    (-2, 0, 1, 2, 2, 29.0, 0.0, -12.0, 0.0),
    (0, 0, 0, 2, 0, 26.0, 0.0, 0.0, 0.0),
    (-2, 0, 0, 2, 0, -22.0, 0.0, 0.0, 0.0),
    (0, 0, -1, 2, 1, 21.0, 0.0, -10.0, 0.0),
    (0, 2, 0, 0, 0, 17.0, -0.1, 0.0, 0.0),
    (2, 0, -1, 0, 1, 16.0, 0.0, -8.0, 0.0),
    (-2, 2, 0, 2, 2, -16.0, 0.1, 7.0, 0.0),
    (0, 1, 0, 0, 1, -15.0, 0.0, 9.0, 0.0),
    (-2, 0, 1, 0, 1, -13.0, 0.0, 7.0, 0.0),
    (0, -1, 0, 0, 1, -12.0, 0.0, 6.0, 0.0),
    (0, 0, 2, -2, 0, 11.0, 0.0, 0.0, 0.0),
    (2, 0, -1, 2, 1, -10.0, 0.0, 5.0, 0.0),
    (2, 0, 1, 2, 2, -8.0, 0.0, 3.0, 0.0),
    (0, 1, 0, 2, 2, 7.0, 0.0, -3.0, 0.0),
    (-2, 1, 1, 0, 0, -7.0, 0.0, 0.0, 0.0),
    (0, -1, 0, 2, 2, -7.0, 0.0, 3.0, 0.0),
    (2, 0, 0, 2, 1, -7.0, 0.0, 3.0, 0.0),
    (2, 0, 1, 0, 0, 6.0, 0.0, 0.0, 0.0),
    (-2, 0, 2, 2, 2, 6.0, 0.0, -3.0, 0.0),
    (-2, 0, 1, 2, 1, 6.0, 0.0, -3.0, 0.0),
    (2, 0, -2, 0, 1, -6.0, 0.0, 3.0, 0.0),
    (2, 0, 0, 0, 1, -6.0, 0.0, 3.0, 0.0),
    (0, -1, 1, 0, 0, 5.0, 0.0, 0.0, 0.0),
    (-2, -1, 0, 2, 1, -5.0, 0.0, 3.0, 0.0),
    (-2, 0, 0, 0, 1, -5.0, 0.0, 3.0, 0.0),
    (0, 0, 2, 2, 1, -5.0, 0.0, 3.0, 0.0),
    (-2, 0, 2, 0, 1, 4.0, 0.0, 0.0, 0.0),
    (-2, 1, 0, 2, 1, 4.0, 0.0, 0.0, 0.0),
    (0, 0, 1, -2, 0, 4.0, 0.0, 0.0, 0.0),
    (-1, 0, 1, 0, 0, -4.0, 0.0, 0.0, 0.0),
    (-2, 1, 0, 0, 0, -4.0, 0.0, 0.0, 0.0),
    (1, 0, 0, 0, 0, -4.0, 0.0, 0.0, 0.0),
    (0, 0, 1, 2, 0, 3.0, 0.0, 0.0, 0.0),
    (0, 0, -2, 2, 2, -3.0, 0.0, 0.0, 0.0),
    (-1, -1, 1, 0, 0, -3.0, 0.0, 0.0, 0.0),
    (0, 1, 1, 0, 0, -3.0, 0.0, 0.0, 0.0),
    (0, -1, 1, 2, 2, -3.0, 0.0, 0.0, 0.0),
    (2, -1, -1, 2, 2, -3.0, 0.0, 0.0, 0.0),
    (0, 0, 3, 2, 2, -3.0, 0.0, 0.0, 0.0),
    (2, -1, 0, 2, 2, -3.0, 0.0, 0.0, 0.0),
)

_IAU1980_TABLE = np.array(_IAU1980_TERMS, dtype=float)


def default_nutation_model() -> NutationModel:
    """Return the configured default nutation series."""
    return NutationModel(get_nutation_model_name())


def obliquity(jd: float) -> float:
    """Mean obliquity of the ecliptic, degrees (Meeus 22.2).

    Accurate to about 1" over 2000 years either side of J2000; does not
    include nutation.

    Parameters:
        jd: Julian date.

    Returns:
        Obliquity in degrees.
    """
    t = (jd - JD2000) / DAYS_PER_JULIAN_CENTURY
    return (
        EARTH_TILT_J2000
        - (46.8150 / ARCSEC_PER_DEGREE) * t
        - (0.00059 / ARCSEC_PER_DEGREE) * t * t
        + (0.001813 / ARCSEC_PER_DEGREE) * t * t * t
    )


def true_obliquity(jd: float, model: NutationModel | None = None) -> float:
    """Mean obliquity plus nutation in obliquity, degrees."""
    return obliquity(jd) + nutation(jd, model).deps / ARCSEC_PER_DEGREE


def fundamental_arguments(jd: float) -> tuple[float, float, float, float, float]:
    """Delaunay arguments D, M, M', F, Omega in degrees (centuries from J2000).

    Parameters:
        jd: Julian date.

    Returns:
        (D, M, M', F, Omega): mean elongation of the Moon from the Sun, mean
        anomaly of the Sun, mean anomaly of the Moon, Moon's argument of
        latitude and longitude of the Moon's ascending node.
    """
    t = (jd - JD2000) / DAYS_PER_JULIAN_CENTURY
    t2 = t * t
    t3 = t2 * t
    d = 297.85036 + 445267.111480 * t - 0.0019142 * t2 + t3 / 189474.0
    m = 357.52772 + 35999.050340 * t - 0.0001603 * t2 - t3 / 300000.0
    mm = 134.96298 + 477198.867398 * t + 0.0086972 * t2 + t3 / 56250.0
    f = 93.27191 + 483202.017538 * t - 0.0036825 * t2 + t3 / 327270.0
    om = 125.04452 - 1934.136261 * t + 0.0020708 * t2 + t3 / 450000.0
    return (limit_angle(d), limit_angle(m), limit_angle(mm), limit_angle(f), limit_angle(om))


def _nutation_iau1980(jd: float) -> NutationResult:
    t = (jd - JD2000) / DAYS_PER_JULIAN_CENTURY
    args = np.radians(np.array(fundamental_arguments(jd)))
    phase = _IAU1980_TABLE[:, :5] @ args
    dpsi = np.sum((_IAU1980_TABLE[:, 5] + _IAU1980_TABLE[:, 6] * t) * np.sin(phase))
    deps = np.sum((_IAU1980_TABLE[:, 7] + _IAU1980_TABLE[:, 8] * t) * np.cos(phase))
    return NutationResult(float(dpsi) * 0.0001, float(deps) * 0.0001)


def _nutation_low_precision(jd: float) -> NutationResult:
    t = (jd - JD2000) / DAYS_PER_JULIAN_CENTURY
    sun_lon = (280.4665 + 36000.7698 * t) * RAD
    moon_lon = (218.3165 + 481267.8813 * t) * RAD
    om = fundamental_arguments(jd)[4] * RAD
    dpsi = (
        -17.20 * math.sin(om)
        - 1.32 * math.sin(2 * sun_lon)
        - 0.23 * math.sin(2 * moon_lon)
        + 0.21 * math.sin(2 * om)
    )
    deps = (
        9.20 * math.cos(om)
        + 0.57 * math.cos(2 * sun_lon)
        + 0.10 * math.cos(2 * moon_lon)
        - 0.09 * math.cos(2 * om)
    )
    return NutationResult(dpsi, deps)


def _nutation_classic(jd: float) -> NutationResult:
    t = (jd - JD1900) / DAYS_PER_JULIAN_CENTURY
    t2 = t * t

    # Mean longitudes and anomalies of Sun and Moon, lunar node (degrees)
    sun_l = (279.6967 + 36000.7689 * t + 0.000303 * t2) * RAD
    moon_l = (270.4342 + 481267.8831 * t - 0.001133 * t2) * RAD
    sun_m = (358.4758 + 35999.0498 * t - 0.000150 * t2) * RAD
    moon_m = (296.1046 + 477198.8491 * t + 0.009192 * t2) * RAD
    om = (259.1833 - 1934.1420 * t + 0.002078 * t2) * RAD

    dpsi = (
        -(17.2327 + 0.01737 * t) * math.sin(om)
        - (1.2729 + 0.00013 * t) * math.sin(2 * sun_l)
        + 0.2088 * math.sin(2 * om)
        - 0.2037 * math.sin(2 * moon_l)
        + (0.1261 - 0.00031 * t) * math.sin(sun_m)
        + 0.0675 * math.sin(moon_m)
        - (0.0497 - 0.00012 * t) * math.sin(2 * sun_l + sun_m)
        - 0.0342 * math.sin(2 * moon_l - om)
        - 0.0261 * math.sin(2 * moon_l + moon_m)
        + 0.0214 * math.sin(2 * sun_l - sun_m)
        - 0.0149 * math.sin(2 * sun_l - 2 * moon_l + moon_m)
        + 0.0124 * math.sin(2 * sun_l - om)
        + 0.0114 * math.sin(2 * moon_l - moon_m)
    )
    deps = (
        (9.2100 + 0.00091 * t) * math.cos(om)
        + (0.5522 - 0.00029 * t) * math.cos(2 * sun_l)
        - 0.0904 * math.cos(2 * om)
        + 0.0884 * math.cos(2 * moon_l)
        + 0.0216 * math.cos(2 * sun_l + sun_m)
        + 0.0183 * math.cos(2 * moon_l - om)
        + 0.0113 * math.cos(2 * moon_l + moon_m)
        - 0.0093 * math.cos(2 * sun_l - sun_m)
        - 0.0066 * math.cos(2 * sun_l - om)
    )
    return NutationResult(dpsi, deps)


_NUTATION_SERIES = {
    NutationModel.IAU1980: _nutation_iau1980,
    NutationModel.LOW_PRECISION: _nutation_low_precision,
    NutationModel.CLASSIC: _nutation_classic,
}


def nutation(jd: float, model: NutationModel | str | None = None) -> NutationResult:
    """Nutation in longitude and obliquity for a Julian date.

    Parameters:
        jd: Julian date.
        model: Series to evaluate (NutationModel or its name); None for the
            configured default (IAU1980 unless ALMANAC_NUTATION_MODEL says
            otherwise).

    Returns:
        NutationResult(dpsi, deps) in arcseconds.
    """
    if model is None:
        model = default_nutation_model()
    return _NUTATION_SERIES[NutationModel(model)](jd)


def precession_rate(decl: float, ra: float, jd: float) -> tuple[float, float]:
    """Annual precession in declination and right ascension.

    Uses the luni-solar constants m (3.07234 s/yr) and n (20.0468"/yr)
    with their secular change (centuries from 1900).

    Parameters:
        decl: Declination, degrees.
        ra: Right ascension, hours.
        jd: Julian date.

    Returns:
        (ddecl, dra): change per year in degrees and hours.
    """
    t = (jd - JD1900) / DAYS_PER_JULIAN_CENTURY
    m = 3.07234 + 0.00186 * t  # seconds of RA per year
    n = 20.0468 - 0.0085 * t  # seconds of arc per year

    decl_r = decl * RAD
    ra_r = ra * DEGREES_PER_HOUR_RA * RAD
    n_r = n / ARCSEC_PER_DEGREE * RAD
    m_r = m / ARCSEC_PER_DEGREE * DEGREES_PER_HOUR_RA * RAD

    dra = m_r + n_r * math.sin(ra_r) * math.tan(decl_r)
    ddecl = n_r * math.cos(ra_r)
    return (ddecl * DEG, dra * DEG / DEGREES_PER_HOUR_RA)


def _rot_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def _rot_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, -s], [0.0, 1.0, 0.0], [s, 0.0, c]])


def precession_angles(jd0: float, jd1: float) -> tuple[float, float, float]:
    """Precession angles zeta, z, theta (radians) from epoch jd0 to jd1.

    Parameters:
        jd0: Julian date of the starting equinox.
        jd1: Julian date of the target equinox.

    Returns:
        (zeta, z, theta) in radians.
    """
    t0 = (jd0 - JD1900_TROPICAL) / DAYS_PER_TROPICAL_CENTURY
    t = (jd1 - jd0) / DAYS_PER_TROPICAL_CENTURY
    t2 = t * t
    t3 = t2 * t

    # Seconds of arc
    zeta = (2304.250 + 1.396 * t0) * t + 0.302 * t2 + 0.018 * t3
    z = zeta + 0.791 * t2 + 0.001 * t3
    theta = (2004.682 - 0.83 * t0) * t - 0.426 * t2 - 0.042 * t3
    scale = RAD / ARCSEC_PER_DEGREE
    return (zeta * scale, z * scale, theta * scale)


def precession_matrix(jd0: float, jd1: float) -> np.ndarray:
    """Rotation matrix taking equatorial unit vectors from equinox jd0 to jd1."""
    zeta, z, theta = precession_angles(jd0, jd1)
    return _rot_z(z) @ _rot_y(theta) @ _rot_z(zeta)


def precession(decl0: float, ra0: float, jd0: float, jd1: float) -> tuple[float, float]:
    """Precess equatorial coordinates from one equinox to another.

    Parameters:
        decl0: Declination at equinox jd0, degrees.
        ra0: Right ascension at equinox jd0, hours.
        jd0: Julian date of the starting equinox.
        jd1: Julian date of the target equinox.

    Returns:
        (decl1, ra1): declination in degrees, right ascension in hours [0, 24).
        The input is returned unchanged when jd0 == jd1.
    """
    if jd0 == jd1:
        return (decl0, ra0)
    d = decl0 * RAD
    a = ra0 * DEGREES_PER_HOUR_RA * RAD
    vec = np.array([math.cos(d) * math.cos(a), math.cos(d) * math.sin(a), math.sin(d)])
    x, y, z = precession_matrix(jd0, jd1) @ vec
    decl1 = math.asin(max(-1.0, min(1.0, z))) * DEG
    ra1 = limit_hour(math.atan2(y, x) * DEG / DEGREES_PER_HOUR_RA)
    return (decl1, ra1)
