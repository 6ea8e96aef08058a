"""Pluto orbital elements.

Only the mean longitude moves; the other elements are fixed osculating
values and no perturbations are applied, so positions are rough (of the
order of a degree over a few decades from 1900).
"""

from __future__ import annotations

from almanac_tools.planets.base import OrbitalElements

# Mean daily motion 0.3980332167 degrees per 100 days
_PLUTO_L0 = 95.3113544
_PLUTO_L1 = 0.3980332167 * 365.25  # per Julian century
_PLUTO_PI = 224.017
_PLUTO_OM = 110.191

PLUTO_ELEMENTS = OrbitalElements(
    name='Pluto',
    L=(_PLUTO_L0, _PLUTO_L1, 0.0, 0.0),
    pi=(_PLUTO_PI, 0.0, 0.0, 0.0),
    w=(_PLUTO_PI - _PLUTO_OM, 0.0, 0.0, 0.0),
    e=(0.25515, 0.0, 0.0, 0.0),
    i=(17.1329, 0.0, 0.0, 0.0),
    om=(_PLUTO_OM, 0.0, 0.0, 0.0),
    # M = L - pi
    M=(_PLUTO_L0 - _PLUTO_PI, _PLUTO_L1, 0.0),
    a=39.8151,
    ad=8.2,
    mag=1.0,
)
