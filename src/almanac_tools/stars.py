"""Star records and region selection with proper motion.

Catalog readers produce ``Star`` records with J2000 positions; this module
filters them to a magnitude limit and a rectangular RA/Dec box after
moving each star by its proper motion to the requested date.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from almanac_tools.angle_utils import limit_angle
from almanac_tools.constants import ARCSEC_PER_DEGREE, DEGREES_PER_CIRCLE, DEGREES_PER_HOUR_RA, JD2000

logger = logging.getLogger(__name__)

# Year length used to turn days since J2000 into years of proper motion
_PROPER_MOTION_YEAR = 365.24


@dataclass(frozen=True)
class Star:
    """A catalog star: J2000 RA/Dec in degrees and annual proper motion.

    ``pm_ra`` is in seconds of time per year, ``pm_dec`` in arc seconds
    per year.
    """

    ra: float
    dec: float
    mag: float
    spectral_type: str = ''
    pm_ra: float = 0.0
    pm_dec: float = 0.0
    name: str = ''


def apply_proper_motion(star: Star, jd: float) -> Star:
    """Return the star moved by its proper motion from J2000 to jd (ra in [0, 360))."""
    years = (jd - JD2000) / _PROPER_MOTION_YEAR
    ra = star.ra + star.pm_ra * years * DEGREES_PER_HOUR_RA / ARCSEC_PER_DEGREE
    dec = star.dec + star.pm_dec * years / ARCSEC_PER_DEGREE
    return replace(star, ra=limit_angle(ra), dec=dec)


def select_stars(
    stars: Iterable[Star],
    max_mag: float,
    ra0: float,
    ra1: float,
    dec0: float,
    dec1: float,
    jd: float = JD2000,
) -> list[Star]:
    """Select stars brighter than a limit inside an RA/Dec box.

    The box may straddle 0h: when ra1 < ra0 it runs from ra0 through 360
    to ra1.

    Parameters:
        stars: Candidate stars (J2000 positions).
        max_mag: Faintest magnitude kept (inclusive).
        ra0: Box start in right ascension, degrees.
        ra1: Box end in right ascension, degrees.
        dec0: Minimum declination, degrees.
        dec1: Maximum declination, degrees.
        jd: Date to which proper motion is applied.

    Returns:
        Matching stars with positions of date, in input order.
    """
    wrap = ra1 < ra0
    if wrap:
        ra1 += DEGREES_PER_CIRCLE
    selected: list[Star] = []
    for star in stars:
        moved = apply_proper_motion(star, jd)
        ra = moved.ra
        if wrap and ra < ra0:
            ra += DEGREES_PER_CIRCLE
        if moved.mag <= max_mag and dec0 <= moved.dec <= dec1 and ra0 <= ra <= ra1:
            selected.append(moved)
    if selected:
        logger.debug(
            '%d stars of magnitude %.1f to %.1f',
            len(selected),
            min(s.mag for s in selected),
            max_mag,
        )
    return selected
