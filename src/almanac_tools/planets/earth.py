"""Earth: heliocentric position derived from the geocentric Sun."""

from __future__ import annotations

from dataclasses import replace

from almanac_tools import sun
from almanac_tools.angle_utils import limit_angle
from almanac_tools.planets.base import BodyState

EARTH_YEAR_DAYS = 365.2424


def earth_state(jd: float) -> BodyState:
    """Heliocentric Earth: the Sun's position reflected through the origin.

    The orbital fields (L, e, M, v) come from the Sun's 1900 series; the
    inclination, node and perihelion angles are zero on the ecliptic of date.

    Parameters:
        jd: Julian date.

    Returns:
        BodyState with heliocentric lat, lon (degrees) and R (AU).
    """
    s = sun.sun_state(jd)
    return replace(
        s,
        ad=0.0,
        mag=0.0,
        lat=-s.lat,
        lon=limit_angle(s.lon + 180.0),
        year=EARTH_YEAR_DAYS,
    )
