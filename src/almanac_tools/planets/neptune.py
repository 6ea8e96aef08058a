"""Neptune orbital elements (mean ecliptic and equinox of date, T from 1900)."""

from __future__ import annotations

from almanac_tools.planets.base import OrbitalElements

NEPTUNE_ELEMENTS = OrbitalElements(
    name='Neptune',
    L=(84.457994, 219.885914, 0.0003205, -0.00000060),
    pi=(46.727364, 1.4245744, 0.00039082, -0.000000605),
    w=(276.045975, 0.3256394, 0.00014095, 0.000004113),
    e=(0.00899704, 0.000006330, 0.000000002, 0.0),
    i=(1.779242, -0.0095436, -0.0000091, 0.0),
    om=(130.681389, 1.0989350, 0.00024987, -0.000004718),
    M=(37.73063, 218.46134, 0.000070),
    a=30.10957,
    ad=62.2,
    mag=-6.87,
)
