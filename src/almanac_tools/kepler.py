"""Kepler's equation solver.

Kepler's equation relates the mean anomaly M to the eccentric anomaly E
of an elliptical orbit with eccentricity e::

    E = M + e * sin(E)

It is solved by Newton-Raphson iteration starting from E = M. Orbits
with e close to 1 converge slowly; after the iteration cap the last
estimate is returned and flagged as not converged rather than raising.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from almanac_tools.constants import KEPLER_ACCURACY, KEPLER_MAX_ITERATIONS

logger = logging.getLogger(__name__)


class KeplerSolution(NamedTuple):
    """Eccentric anomaly (radians) and solver diagnostics."""

    E: float
    iterations: int
    converged: bool


def solve_kepler(
    mean_anomaly: float,
    eccentricity: float,
    *,
    accuracy: float = KEPLER_ACCURACY,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> KeplerSolution:
    """Solve Kepler's equation for the eccentric anomaly.

    Parameters:
        mean_anomaly: Mean anomaly M, radians.
        eccentricity: Orbital eccentricity, 0 <= e < 1.
        accuracy: Stop when the Newton step is no larger than this (radians).
        max_iterations: Iteration cap.

    Returns:
        KeplerSolution(E, iterations, converged) with E in radians.
    """
    m = mean_anomaly
    e = eccentricity
    big_e = m
    for i in range(1, max_iterations + 1):
        delta = (m + e * math.sin(big_e) - big_e) / (1.0 - e * math.cos(big_e))
        big_e += delta
        if abs(delta) <= accuracy:
            return KeplerSolution(big_e, i, True)
    logger.debug(
        'Kepler iteration did not converge: M=%r e=%r after %d steps (last step %g)',
        mean_anomaly,
        eccentricity,
        max_iterations,
        delta,
    )
    return KeplerSolution(big_e, max_iterations, False)


def eccentric_anomaly(mean_anomaly: float, eccentricity: float) -> float:
    """Eccentric anomaly in radians (best available estimate)."""
    return solve_kepler(mean_anomaly, eccentricity).E


def true_anomaly(eccentric: float, eccentricity: float) -> float:
    """True anomaly (radians) from the eccentric anomaly via the half-angle formula."""
    e = eccentricity
    return 2.0 * math.atan(math.sqrt((1.0 + e) / (1.0 - e)) * math.tan(eccentric / 2.0))
