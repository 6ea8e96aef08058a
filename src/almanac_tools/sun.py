"""Position of the Sun, and sunrise/noon/sunset helpers.

Two series are provided. ``sun_ecliptic`` is the classic equation-of-centre
series with T in Julian centuries from 1900; it also supplies the Earth's
heliocentric position. ``sun_equatorial`` uses the J2000 low-precision
series and the true obliquity of date, good to about 0.01 degree. Both give
the geometric (mean) position; aberration is not applied.
"""

from __future__ import annotations

import math

from almanac_tools.angle_utils import dacos, dasin, datan2, dcos, dsin, limit_angle
from almanac_tools.constants import DAYS_PER_JULIAN_CENTURY, DEGREES_PER_CIRCLE, DEGREES_PER_HOUR_RA, JD2000
from almanac_tools.coords import Polar, equatorial_to_horizontal
from almanac_tools.earth_orientation import NutationModel, true_obliquity
from almanac_tools.planets.base import BodyState, centuries_1900
from almanac_tools.time_utils import julian_to_hour

# Mean solar transit offset from J2000, days
_TRANSIT_OFFSET = 0.0009

# Altitude of the upper limb at setting, with standard refraction
_SUNSET_ALTITUDE = -0.83


def _classic_terms(jd: float) -> tuple[float, float, float, float]:
    """Mean longitude, mean anomaly, eccentricity and equation of centre (1900 series)."""
    t = centuries_1900(jd)
    t2 = t * t
    mean_lon = 279.69668 + 36000.76892 * t + 0.0003025 * t2
    mean_anom = 358.47583 + 35999.04975 * t - 0.000150 * t2 - 0.0000033 * t2 * t
    e = 0.01675104 - 0.0000418 * t - 0.000000126 * t2
    c = (
        (1.919460 - 0.004789 * t - 0.000014 * t2) * dsin(mean_anom)
        + (0.020094 - 0.000100 * t) * dsin(2 * mean_anom)
        + 0.000293 * dsin(3 * mean_anom)
    )
    return (mean_lon, mean_anom, e, c)


def sun_ecliptic(jd: float) -> Polar:
    """Geocentric ecliptic position of the Sun (mean ecliptic of date).

    Latitude is zero by construction. Negate the latitude and add 180
    degrees to the longitude for the Earth's heliocentric position.

    Parameters:
        jd: Julian date.

    Returns:
        Polar(lat, lon, r): degrees, degrees in [0, 360), AU.
    """
    mean_lon, mean_anom, e, c = _classic_terms(jd)
    v = mean_anom + c
    r = 1.000002 * (1.0 - e * e) / (1.0 + e * dcos(v))
    return Polar(0.0, limit_angle(mean_lon + c), r)


def sun_equatorial(jd: float, model: NutationModel | None = None) -> tuple[float, float, float]:
    """Declination, right ascension and distance of the Sun.

    Parameters:
        jd: Julian date.
        model: Nutation series for the true obliquity; None for the default.

    Returns:
        (decl, ra, r): declination in degrees, right ascension in hours
        [0, 24), distance in AU.
    """
    t = (jd - JD2000) / DAYS_PER_JULIAN_CENTURY
    t2 = t * t
    l0 = limit_angle(280.46646 + 36000.76983 * t + 0.0003032 * t2)
    m = limit_angle(357.52911 + 35999.05029 * t - 0.0001537 * t2)
    e = 0.016708634 - 0.000042037 * t - 0.0000001267 * t2
    c = (
        (1.914602 - 0.004817 * t - 0.000014 * t2) * dsin(m)
        + (0.019993 - 0.000101 * t) * dsin(2 * m)
        + 0.000289 * dsin(3 * m)
    )
    lon = l0 + c
    v = m + c
    r = 1.000001018 * (1.0 - e * e) / (1.0 + e * dcos(v))
    obl = true_obliquity(jd, model)
    ra = limit_angle(datan2(dcos(obl) * dsin(lon), dcos(lon))) / DEGREES_PER_HOUR_RA
    decl = dasin(dsin(obl) * dsin(lon))
    return (decl, ra, r)


def sun_state(jd: float) -> BodyState:
    """Geocentric Sun as a BodyState (classic 1900 series).

    The orbital fields describe the Earth's orbit as seen from the Earth:
    L, M and e are the Sun's mean longitude, mean anomaly and the orbit's
    eccentricity; v is the true anomaly; lon/lat/R the geocentric position.
    """
    mean_lon, mean_anom, e, c = _classic_terms(jd)
    pos = sun_ecliptic(jd)
    return BodyState(
        date=jd,
        L=limit_angle(mean_lon),
        dL=36000.76892 / DAYS_PER_JULIAN_CENTURY,
        e=e,
        a=1.0,
        ad=1919.26,
        mag=-26.74,
        M=limit_angle(mean_anom),
        v=limit_angle(mean_anom + c),
        lon=pos.lon,
        lat=pos.lat,
        R=pos.r,
        year=365.2424,
    )


def sun_position(jd: float, lat: float, lon: float) -> tuple[float, float]:
    """Azimuth and elevation of the Sun for an observer.

    Parameters:
        jd: Julian date (UT).
        lat: Observer latitude, degrees north.
        lon: Observer longitude, degrees WEST of Greenwich.

    Returns:
        (azimuth, elevation) in degrees; azimuth from north through east.
    """
    decl, ra, _r = sun_equatorial(jd)
    return equatorial_to_horizontal(decl, ra, lat, lon, jd, julian_to_hour(jd))


def _julian_cycle(jd: float, lon: float) -> float:
    """Number of mean solar days since J2000 for the observer's meridian."""
    return float(round(jd - JD2000 - _TRANSIT_OFFSET - lon / DEGREES_PER_CIRCLE))


def sun_noon(jd: float, lon: float) -> float:
    """Julian date of mean local noon nearest to jd.

    Parameters:
        jd: Julian date.
        lon: Observer longitude, degrees WEST of Greenwich.

    Returns:
        Julian date of mean solar transit (equation of time not applied).
    """
    return JD2000 + _TRANSIT_OFFSET + lon / DEGREES_PER_CIRCLE + _julian_cycle(jd, lon)


def sun_set(jd: float, lat: float, lon: float) -> float | None:
    """Julian date of sunset (upper limb, standard refraction) nearest to jd.

    Accurate to about a minute. Uses a fixed obliquity of 23.45 degrees.

    Parameters:
        jd: Julian date.
        lat: Observer latitude, degrees north.
        lon: Observer longitude, degrees WEST of Greenwich.

    Returns:
        Julian date of sunset, or None when the Sun does not cross the
        horizon that day (polar day or night).
    """
    n = _julian_cycle(jd, lon)
    noon = sun_noon(jd, lon)
    m = limit_angle(357.5291 + 0.98560028 * (noon - JD2000))
    c = 1.9148 * dsin(m) + 0.0200 * dsin(2 * m) + 0.0003 * dsin(3 * m)
    ecl_lon = limit_angle(m + 102.9372 + c + 180.0)
    decl = dasin(dsin(ecl_lon) * dsin(23.45))
    cos_w0 = (dsin(_SUNSET_ALTITUDE) - dsin(lat) * dsin(decl)) / (dcos(lat) * dcos(decl))
    if not -1.0 <= cos_w0 <= 1.0 or math.isnan(cos_w0):
        return None
    w0 = dacos(cos_w0)
    return (
        JD2000
        + _TRANSIT_OFFSET
        + (w0 + lon) / DEGREES_PER_CIRCLE
        + n
        + 0.0053 * dsin(m)
        - 0.0069 * dsin(2 * ecl_lon)
    )


def sun_gha(jd: float) -> float:
    """Greenwich hour angle of the mean Sun, degrees west, [0, 360)."""
    return limit_angle((jd - (JD2000 + _TRANSIT_OFFSET)) * DEGREES_PER_CIRCLE)
