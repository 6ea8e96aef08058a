"""Mars orbital elements (mean ecliptic and equinox of date, T from 1900)."""

from __future__ import annotations

from almanac_tools.planets.base import OrbitalElements

MARS_ELEMENTS = OrbitalElements(
    name='Mars',
    L=(293.737334, 19141.69551, 0.0003107, 0.0),
    pi=(334.218203, 1.8407584, 0.0001299, -0.00000119),
    w=(285.431761, 1.0697667, 0.0001313, 0.00000414),
    e=(0.09331290, 0.000092064, -0.000000077, 0.0),
    i=(1.850333, -0.0006750, 0.0000126, 0.0),
    om=(48.786442, 0.7709917, -0.0000014, -0.00000533),
    M=(319.51913, 19139.85475, 0.000181),
    a=1.5236883,
    ad=9.36,
    mag=-1.52,
)
