"""Venus orbital elements (mean ecliptic and equinox of date, T from 1900)."""

from __future__ import annotations

from almanac_tools.planets.base import OrbitalElements

VENUS_ELEMENTS = OrbitalElements(
    name='Venus',
    L=(342.767053, 58519.21191, 0.0003097, 0.0),
    pi=(130.163833, 1.4080361, -0.0009764, 0.0),
    w=(54.384186, 0.5081861, -0.0013864, 0.0),
    e=(0.00682069, -0.00004774, 0.000000091, 0.0),
    i=(3.393631, 0.0010058, -0.0000010, 0.0),
    om=(75.779647, 0.8998500, 0.0004100, 0.0),
    M=(212.60322, 58517.80387, 0.001286),
    a=0.7233316,
    ad=16.92,
    mag=-4.4,
)
