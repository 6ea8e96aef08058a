"""Mercury orbital elements (mean ecliptic and equinox of date, T from 1900)."""

from __future__ import annotations

from almanac_tools.planets.base import OrbitalElements

MERCURY_ELEMENTS = OrbitalElements(
    name='Mercury',
    L=(178.179078, 149474.07078, 0.0003011, 0.0),
    pi=(75.899697, 1.5554889, 0.0002947, 0.0),
    w=(28.753753, 0.3702806, 0.0001208, 0.0),
    e=(0.20561421, 0.00002046, -0.000000030, 0.0),
    i=(7.002881, 0.0018608, -0.0000183, 0.0),
    om=(47.145944, 1.1852083, 0.0001739, 0.0),
    M=(102.27938, 149472.51529, 0.000007),
    a=0.3870986,
    ad=6.74,
    mag=-0.42,
)
