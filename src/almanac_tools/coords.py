"""Coordinate conversions between equatorial, ecliptic, horizontal and rectangular frames.

Conventions: declination and latitudes in degrees (+north), right
ascension in hours, ecliptic longitude in degrees. Rectangular axes are
X toward the vernal equinox, Y toward 90 degrees longitude, Z north.
Observer longitudes passed to ``equatorial_to_horizontal`` are positive
WEST of Greenwich; azimuth is measured from north through east.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from almanac_tools.angle_utils import limit_angle, limit_hour
from almanac_tools.constants import DEG, DEGREES_PER_HOUR_RA, HALF_CIRCLE_DEGREES, RAD
from almanac_tools.earth_orientation import obliquity
from almanac_tools.time_utils import julian_time_to_sidereal


class Polar(NamedTuple):
    """Spherical position: latitude and longitude in degrees, distance."""

    lat: float
    lon: float
    r: float


def _clamp_unit(x: float) -> float:
    return max(-1.0, min(1.0, x))


def equatorial_to_ecliptic(decl: float, ra: float, jd: float) -> tuple[float, float]:
    """Convert equatorial coordinates to ecliptic coordinates of date.

    Parameters:
        decl: Declination, degrees.
        ra: Right ascension, hours.
        jd: Julian date (selects the mean obliquity).

    Returns:
        (lat, lon) in degrees, lon in [0, 360).
    """
    e = obliquity(jd) * RAD
    d = decl * RAD
    a = ra * DEGREES_PER_HOUR_RA * RAD
    lon = math.atan2(math.sin(a) * math.cos(e) + math.tan(d) * math.sin(e), math.cos(a))
    lat = math.asin(_clamp_unit(math.sin(d) * math.cos(e) - math.cos(d) * math.sin(e) * math.sin(a)))
    return (lat * DEG, limit_angle(lon * DEG))


def ecliptic_to_equatorial(lat: float, lon: float, jd: float) -> tuple[float, float]:
    """Convert ecliptic coordinates of date to equatorial coordinates.

    This is a rotation by the obliquity about the X axis, the inverse of
    ``equatorial_to_ecliptic``.

    Parameters:
        lat: Ecliptic latitude, degrees.
        lon: Ecliptic longitude, degrees.
        jd: Julian date (selects the mean obliquity).

    Returns:
        (decl, ra): declination in degrees, right ascension in hours [0, 24).
    """
    e = obliquity(jd) * RAD
    b = lat * RAD
    lam = lon * RAD
    ra = math.atan2(math.sin(lam) * math.cos(e) - math.tan(b) * math.sin(e), math.cos(lam))
    decl = math.asin(_clamp_unit(math.sin(b) * math.cos(e) + math.cos(b) * math.sin(e) * math.sin(lam)))
    return (decl * DEG, limit_hour(ra * DEG / DEGREES_PER_HOUR_RA))


def hour_angle_to_horizontal(ha: float, decl: float, obs_lat: float) -> tuple[float, float]:
    """Azimuth and altitude from local hour angle, declination and latitude.

    Parameters:
        ha: Local hour angle, degrees (positive west).
        decl: Declination, degrees.
        obs_lat: Observer latitude, degrees.

    Returns:
        (azimuth, altitude) in degrees; azimuth from north through east.
    """
    h = ha * RAD
    d = decl * RAD
    phi = obs_lat * RAD
    # Meeus 13.5 gives azimuth from the south, westward
    az_south = math.atan2(math.sin(h), math.cos(h) * math.sin(phi) - math.tan(d) * math.cos(phi))
    alt = math.asin(_clamp_unit(math.sin(phi) * math.sin(d) + math.cos(phi) * math.cos(d) * math.cos(h)))
    return (limit_angle(az_south * DEG + HALF_CIRCLE_DEGREES), alt * DEG)


def equatorial_to_horizontal(
    decl: float,
    ra: float,
    obs_lat: float,
    obs_lon: float,
    jd: float,
    ut_hours: float,
) -> tuple[float, float]:
    """Convert equatorial coordinates to an observer's azimuth and altitude.

    Parameters:
        decl: Declination, degrees.
        ra: Right ascension, hours.
        obs_lat: Observer latitude, degrees north.
        obs_lon: Observer longitude, degrees WEST of Greenwich.
        jd: Julian date of the day (0h UT).
        ut_hours: UT clock time in hours.

    Returns:
        (azimuth, altitude) in degrees; azimuth 0 = north, 90 = east.
    """
    st = julian_time_to_sidereal(jd, ut_hours) * DEGREES_PER_HOUR_RA
    ha = st - obs_lon - ra * DEGREES_PER_HOUR_RA
    return hour_angle_to_horizontal(ha, decl, obs_lat)


def polar_to_rectangular(lat: float, lon: float, r: float) -> tuple[float, float, float]:
    """Convert spherical (lat, lon in degrees, r) to rectangular (x, y, z)."""
    b = lat * RAD
    lam = lon * RAD
    return (r * math.cos(b) * math.cos(lam), r * math.cos(b) * math.sin(lam), r * math.sin(b))


def rectangular_to_polar(x: float, y: float, z: float) -> Polar:
    """Convert rectangular (x, y, z) to spherical coordinates.

    Parameters:
        x, y, z: Rectangular coordinates.

    Returns:
        Polar(lat, lon, r); lon in (-180, 180]. At the origin lat = lon = 0.
    """
    r = math.sqrt(x * x + y * y + z * z)
    if r > 0.0:
        return Polar(math.asin(_clamp_unit(z / r)) * DEG, math.atan2(y, x) * DEG, r)
    return Polar(0.0, 0.0, 0.0)


def delta_polar(origin: tuple[float, float, float], target: tuple[float, float, float]) -> Polar:
    """Position of target as seen from origin, both given as (lat, lon, r).

    Turns the heliocentric coordinates of Earth and of a planet into the
    planet's geocentric position.

    Parameters:
        origin: (lat, lon, r) of the observing body.
        target: (lat, lon, r) of the observed body.

    Returns:
        Polar(lat, lon, r) of target relative to origin, lon in [0, 360).
    """
    diff = np.subtract(polar_to_rectangular(*target), polar_to_rectangular(*origin))
    lat, lon, r = rectangular_to_polar(float(diff[0]), float(diff[1]), float(diff[2]))
    if r == 0.0:
        return Polar(lat, lon, r)
    return Polar(lat, limit_angle(lon), r)
