"""Saturn orbital elements (mean ecliptic and equinox of date, T from 1900)."""

from __future__ import annotations

from almanac_tools.planets.base import OrbitalElements

SATURN_ELEMENTS = OrbitalElements(
    name='Saturn',
    L=(266.564337, 1223.509884, 0.0003245, -0.0000058),
    pi=(91.098214, 1.9584158, 0.00082636, 0.00000461),
    w=(338.307800, 1.0852207, 0.00097854, 0.00000992),
    e=(0.05589232, -0.00034550, -0.000000728, 0.00000000074),
    i=(2.492519, -0.0039189, -0.00001549, 0.00000004),
    om=(112.790414, 0.8731951, -0.00015218, -0.00000531),
    M=(175.46622, 1221.55147, 0.000502),
    a=9.554747,
    ad=165.6,
    mag=-8.88,
)
