"""Jupiter orbital elements (mean ecliptic and equinox of date, T from 1900).

The great inequality with Saturn is not applied; positions are good to a
few tenths of a degree.
"""

from __future__ import annotations

from almanac_tools.planets.base import OrbitalElements

JUPITER_ELEMENTS = OrbitalElements(
    name='Jupiter',
    L=(238.049257, 3036.301986, 0.0003347, -0.00000165),
    pi=(12.720972, 1.6099617, 0.00105627, -0.00000343),
    w=(273.277558, 0.5994317, 0.00070405, 0.00000508),
    e=(0.04833475, 0.000164180, -0.0000004676, -0.0000000017),
    i=(1.308736, -0.0056961, 0.0000039, 0.0),
    om=(99.443414, 1.0105300, 0.00035222, -0.00000851),
    M=(225.32833, 3034.69202, 0.000722),
    a=5.202561,
    ad=196.74,
    mag=-9.4,
)
