"""Celestial navigation: hour angles, sight reduction and sextant corrections.

Follows the conventions of the Nautical Almanac. Hour angles are in
degrees measured westward; longitudes here are positive EAST (west
longitudes are negative), so LHA = GHA + longitude.
"""

from __future__ import annotations

import math

from almanac_tools.angle_utils import dcos, dtan, limit_angle
from almanac_tools.constants import DEG, DEGREES_PER_CIRCLE, DEGREES_PER_HOUR_RA, HALF_CIRCLE_DEGREES, RAD
from almanac_tools.time_utils import greenwich_sidereal

# Dip of the horizon, degrees per sqrt(metre)
_DIP_FACTOR = 0.0293

_KELVIN_OFFSET = 273.0


def ra_to_sha(ra: float) -> float:
    """Sidereal hour angle (degrees) from right ascension (hours)."""
    return limit_angle(-DEGREES_PER_HOUR_RA * ra)


def sha_to_gha(sha: float, jd: float) -> float:
    """Greenwich hour angle of a star from its sidereal hour angle at jd."""
    return limit_angle(sha + DEGREES_PER_HOUR_RA * greenwich_sidereal(jd))


def gha_to_lha(gha: float, lon: float) -> float:
    """Local hour angle from Greenwich hour angle and longitude (east positive).

    The result is not normalized; ``altitude_azimuth`` accepts any value.
    """
    return gha + lon


def interpolate(a: float, b: float, hours: float) -> float:
    """Interpolate between two consecutive hourly almanac values.

    Parameters:
        a: Tabulated value at the start of the hour.
        b: Tabulated value at the start of the next hour.
        hours: Time in hours; only the fractional part is used.

    Returns:
        a + (b - a) * frac(hours).
    """
    frac = hours - int(hours)
    return a + (b - a) * frac


def altitude_azimuth(lha: float, decl: float, lat: float) -> tuple[float, float]:
    """Computed altitude Hc and azimuth Zn from LHA, declination and latitude.

    Parameters:
        lha: Local hour angle, degrees.
        decl: Declination, degrees.
        lat: Observer latitude, degrees north.

    Returns:
        (altitude, azimuth) in degrees; azimuth true, from north through east.
    """
    lha = limit_angle(lha)
    d = decl * RAD
    phi = lat * RAD
    s = math.sin(d)
    c = math.cos(d) * math.cos(lha * RAD)
    hc = math.asin(max(-1.0, min(1.0, s * math.sin(phi) + c * math.cos(phi))))
    cos_hc = math.cos(hc)
    if cos_hc == 0.0:
        a = 0.0
    else:
        x = (s * math.cos(phi) - c * math.sin(phi)) / cos_hc
        a = math.acos(max(-1.0, min(1.0, x))) * DEG
    # Body east of the meridian when LHA > 180
    z = a if lha > HALF_CIRCLE_DEGREES else DEGREES_PER_CIRCLE - a
    return (hc * DEG, limit_angle(z))


def sextant_to_observed_altitude(
    hs: float,
    index_error: float = 0.0,
    height_m: float = 0.0,
    temperature_c: float = 0.0,
    pressure_mb: float = 0.0,
    horizontal_parallax: float = 0.0,
) -> float:
    """Correct a sextant reading to observed altitude Ho.

    Applies index error, dip of the horizon, refraction (Bennett's formula,
    scaled for non-standard air when the pressure is known) and parallax in
    altitude. Semi-diameter is not applied; add or subtract it for limb
    sights.

    Parameters:
        hs: Sextant altitude, degrees.
        index_error: Index correction, degrees (added).
        height_m: Height of eye above sea level, metres.
        temperature_c: Air temperature, Celsius.
        pressure_mb: Air pressure, millibars; 0 for standard conditions.
        horizontal_parallax: Horizontal parallax, degrees (0 for stars).

    Returns:
        Observed altitude, degrees.
    """
    dip = _DIP_FACTOR * math.sqrt(height_m)
    h = hs + index_error - dip
    refraction = 0.0167 / dtan(h + 7.31 / (h + 4.4))
    if pressure_mb > 0.0:
        refraction *= 0.28 * pressure_mb / (temperature_c + _KELVIN_OFFSET)
    parallax = horizontal_parallax * dcos(h)
    return h - refraction + parallax
