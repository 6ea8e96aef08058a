"""Orbital element tables and the two-body heliocentric model.

Each angular element is a cubic polynomial in T, Julian centuries from
1900 January 0.5 (JD 2415020.0). Elements are referred to the mean
ecliptic and equinox of date. The mean anomaly is kept as its own
polynomial because it needs more digits than L - pi would give.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from almanac_tools.angle_utils import dasin, datan2, limit_angle
from almanac_tools.constants import DAYS_PER_JULIAN_CENTURY, DEG, DEGREES_PER_CIRCLE, JD1900, RAD
from almanac_tools.kepler import eccentric_anomaly, true_anomaly

Cubic = tuple[float, float, float, float]


def centuries_1900(jd: float) -> float:
    """Julian centuries from JD 2415020.0."""
    return (jd - JD1900) / DAYS_PER_JULIAN_CENTURY


def _poly(coeffs: tuple[float, ...], t: float) -> float:
    total = 0.0
    for c in reversed(coeffs):
        total = total * t + c
    return total


@dataclass(frozen=True)
class OrbitalElements:
    """Polynomial coefficients for one planet (degrees, AU)."""

    name: str
    L: Cubic  # mean longitude
    pi: Cubic  # longitude of perihelion
    w: Cubic  # argument of perihelion
    e: Cubic  # eccentricity
    i: Cubic  # inclination
    om: Cubic  # longitude of ascending node
    M: tuple[float, float, float]  # mean anomaly
    a: float  # semi-major axis, AU
    ad: float  # angular diameter at 1 AU, arc seconds
    mag: float  # magnitude at 1 AU


@dataclass(frozen=True)
class BodyState:
    """Snapshot of a body's orbit and position at one Julian date.

    All angles in degrees. For planets lat/lon/R are heliocentric ecliptic
    coordinates (R in AU). For the Sun they are geocentric; for the Moon
    they are geocentric with R in kilometres and ``ad`` holding the
    horizontal parallax.
    """

    date: float
    L: float = 0.0  # mean longitude
    dL: float = 0.0  # daily motion in longitude
    e: float = 0.0  # eccentricity
    i: float = 0.0  # inclination
    om: float = 0.0  # longitude of ascending node
    w: float = 0.0  # argument of perihelion
    pi: float = 0.0  # longitude of perihelion
    a: float = 0.0  # semi-major axis
    ad: float = 0.0  # angular diameter at 1 AU, arc seconds
    mag: float = 0.0  # magnitude at 1 AU
    M: float = 0.0  # mean anomaly
    v: float = 0.0  # true anomaly
    lon: float = 0.0
    lat: float = 0.0
    R: float = 0.0
    year: float = 0.0  # orbital period, days

    def polar(self) -> tuple[float, float, float]:
        """Return (lat, lon, R)."""
        return (self.lat, self.lon, self.R)


def evaluate_elements(el: OrbitalElements, jd: float) -> BodyState:
    """Evaluate the element polynomials at jd.

    Angular elements are normalized to [0, 360). Position fields (v, lon,
    lat, R) are left at zero; see ``heliocentric``.

    Parameters:
        el: Element table.
        jd: Julian date.

    Returns:
        BodyState holding the mean elements of date.
    """
    t = centuries_1900(jd)
    return BodyState(
        date=jd,
        L=limit_angle(_poly(el.L, t)),
        dL=el.L[1] / DAYS_PER_JULIAN_CENTURY,
        e=_poly(el.e, t),
        i=limit_angle(_poly(el.i, t)),
        om=limit_angle(_poly(el.om, t)),
        w=limit_angle(_poly(el.w, t)),
        pi=limit_angle(_poly(el.pi, t)),
        a=el.a,
        ad=el.ad,
        mag=el.mag,
        M=mean_anomaly(el, jd),
        year=period(el),
    )


def mean_anomaly(el: OrbitalElements, jd: float) -> float:
    """Mean anomaly in degrees, [0, 360)."""
    return limit_angle(_poly(el.M, centuries_1900(jd)))


def period(el: OrbitalElements) -> float:
    """Orbital period in days from the rate of mean longitude."""
    return DEGREES_PER_CIRCLE * DAYS_PER_JULIAN_CENTURY / el.L[1]


def heliocentric(state: BodyState) -> BodyState:
    """Solve the orbit for heliocentric ecliptic latitude, longitude and radius.

    Kepler's equation gives E from M and e; the true anomaly follows from
    the half-angle formula, the radius from a(1 - e cos E). The argument
    of latitude u = (L - M - om) + v is projected onto the ecliptic with
    the inclination.

    Parameters:
        state: BodyState with the mean elements filled in.

    Returns:
        Copy of state with v, lon, lat and R set.
    """
    e = state.e
    inc = state.i * RAD
    big_e = eccentric_anomaly(state.M * RAD, e)
    v = true_anomaly(big_e, e)
    r = state.a * (1.0 - e * math.cos(big_e))
    u = (state.L - state.M - state.om) * RAD + v
    lon = datan2(math.cos(inc) * math.sin(u), math.cos(u)) + state.om
    lat = dasin(math.sin(u) * math.sin(inc))
    return replace(state, v=limit_angle(v * DEG), lon=limit_angle(lon), lat=lat, R=r)


def base_model(el: OrbitalElements, jd: float) -> BodyState:
    """Heliocentric state from the element table alone (no perturbations)."""
    return heliocentric(evaluate_elements(el, jd))
