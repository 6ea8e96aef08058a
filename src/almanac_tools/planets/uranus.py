"""Uranus orbital elements and perturbations by Jupiter, Saturn and Neptune.

The unperturbed mean anomaly is too poor to be useful for Uranus, so the
mean anomaly, eccentricity and semi-major axis are corrected before the
orbit is solved, and the resulting longitude, latitude and radius are
corrected again afterwards. Arguments P, Q, S and G are the mean
longitudes of Jupiter, Saturn, Uranus and Neptune.
"""

from __future__ import annotations

import math
from dataclasses import replace

from almanac_tools.angle_utils import limit_angle
from almanac_tools.constants import RAD
from almanac_tools.planets.base import BodyState, OrbitalElements, centuries_1900, evaluate_elements, heliocentric

URANUS_ELEMENTS = OrbitalElements(
    name='Uranus',
    L=(244.197470, 429.863546, 0.0003160, -0.00000060),
    pi=(171.548692, 1.4844328, 0.0002372, -0.00000061),
    w=(98.071581, 0.9857650, -0.0010745, -0.00000061),
    e=(0.0463444, -0.00002658, 0.000000077, 0.0),
    i=(0.772464, 0.0006253, 0.0000395, 0.0),
    om=(73.477111, 0.4986678, 0.0013117, 0.0),
    M=(72.64878, 428.37911, 0.000079),
    a=19.21814,
    ad=65.8,
    mag=-7.19,
)


def uranus_state(jd: float) -> BodyState:
    """Heliocentric Uranus, with perturbations.

    Parameters:
        jd: Julian date.

    Returns:
        BodyState with perturbed elements and heliocentric lat, lon, R.
    """
    t = centuries_1900(jd)
    u = t / 5.0 + 0.1
    p = (237.47555 + 3034.9061 * t) * RAD
    q = (265.91650 + 1222.1139 * t) * RAD
    s = (243.51721 + 428.4677 * t) * RAD
    w = 2.0 * p - 6.0 * q + 3.0 * s
    g = (83.76922 + 218.4901 * t) * RAD
    h = 2.0 * g - s
    tau = s - p
    mu = s - q
    theta = g - s

    a_term = (
        (0.864319 - 0.001583 * u) * math.sin(h)
        + (0.082222 - 0.006833 * u) * math.cos(h)
        + 0.036017 * math.sin(2 * h)
        - 0.003019 * math.cos(2 * h)
        + 0.008122 * math.sin(w)
    )
    b_term = (
        0.120303 * math.sin(h)
        + (0.019472 - 0.000947 * u) * math.cos(h)
        + 0.006197 * math.sin(2 * h)
    )
    de = ((-3349.0 + 163.0 * u) * math.sin(h) + 20981.0 * math.cos(h) + 1311.0 * math.cos(2 * h)) * 1e-7

    mean = evaluate_elements(URANUS_ELEMENTS, jd)
    mean = replace(
        mean,
        M=limit_angle(mean.M + a_term - b_term / mean.e),
        e=mean.e + de,
        a=mean.a - 0.003825 * math.cos(h),
    )
    state = heliocentric(mean)

    dlon = (
        (0.012122 - 0.000988 * u) * math.sin(s + mu)
        + (-0.038581 + 0.002031 * u - 0.001910 * u * u) * math.cos(s + mu)
        + (0.034964 - 0.001038 * u + 0.000868 * u * u) * math.cos(2 * s + mu)
        + 0.005594 * math.sin(s + 3 * theta)
        - 0.014808 * math.sin(tau)
        - 0.005794 * math.sin(mu)
        + 0.002347 * math.cos(mu)
        + 0.009872 * math.sin(theta)
        + 0.008803 * math.sin(2 * theta)
        - 0.004308 * math.sin(3 * theta)
    )
    dlat = (
        (0.000458 * math.sin(mu) - 0.000642 * math.cos(mu) - 0.000517 * math.cos(4 * theta)) * math.sin(s)
        - (0.000347 * math.sin(mu) + 0.000853 * math.cos(mu) + 0.000517 * math.sin(4 * mu)) * math.cos(s)
        + 0.000403 * (math.cos(2 * theta) * math.sin(2 * s) + math.sin(2 * theta) * math.cos(2 * s))
    )
    dr = (
        -25948.0
        + (5795.0 * math.cos(s) - 1165.0 * math.sin(s) + 1388.0 * math.cos(2 * s)) * math.sin(mu)
        + 4985.0 * math.cos(tau)
        + (1351.0 * math.cos(s) + 5702.0 * math.sin(s) + 1388.0 * math.sin(2 * s)) * math.cos(mu)
        - 1230.0 * math.cos(s)
        + 904.0 * math.cos(2 * theta)
        + 3354.0 * math.cos(mu)
        + 894.0 * (math.cos(theta) - math.cos(3 * theta))
    ) * 1e-6

    return replace(
        state,
        lon=limit_angle(state.lon + dlon),
        lat=state.lat + dlat,
        R=state.R + dr,
    )
