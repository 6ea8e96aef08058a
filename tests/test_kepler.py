"""Tests for the Kepler equation solver."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from almanac_tools.kepler import KeplerSolution, eccentric_anomaly, solve_kepler, true_anomaly


def test_solve_kepler_small_eccentricity() -> None:
    """M = 5 deg, e = 0.1 gives E = 5.554589 deg."""

    sol = solve_kepler(math.radians(5.0), 0.1)
    assert isinstance(sol, KeplerSolution)
    assert sol.converged
    assert math.degrees(sol.E) == pytest.approx(5.554589, abs=1e-6)


def test_solve_kepler_high_eccentricity() -> None:
    """M = 2 deg, e = 0.99 converges to E = 32.361007 deg."""

    sol = solve_kepler(math.radians(2.0), 0.99)
    assert sol.converged
    assert sol.iterations > 1
    assert math.degrees(sol.E) == pytest.approx(32.361007, abs=1e-5)


def test_solve_kepler_circular_orbit() -> None:
    """For e = 0, E equals M after a single step."""

    sol = solve_kepler(1.234, 0.0)
    assert sol == (pytest.approx(1.234), 1, True)


def test_solve_kepler_iteration_cap() -> None:
    """Hitting the cap returns the last estimate flagged as not converged."""

    sol = solve_kepler(math.radians(2.0), 0.99, max_iterations=1)
    assert not sol.converged
    assert sol.iterations == 1
    assert math.isfinite(sol.E)


def test_eccentric_anomaly_matches_solver() -> None:
    """eccentric_anomaly returns the solver's E."""

    assert eccentric_anomaly(0.5, 0.2) == solve_kepler(0.5, 0.2).E


def test_true_anomaly() -> None:
    """At E = 90 deg and e = 0.5 the true anomaly is 120 deg."""

    assert true_anomaly(math.pi / 2.0, 0.5) == pytest.approx(2.0 * math.pi / 3.0)
    assert true_anomaly(0.0, 0.3) == 0.0
    assert true_anomaly(1.0, 0.0) == pytest.approx(1.0)


@given(
    st.floats(min_value=0.0, max_value=2.0 * math.pi, exclude_max=True),
    st.floats(min_value=0.0, max_value=0.9),
)
def test_solve_kepler_satisfies_equation(m: float, e: float) -> None:
    """The solution satisfies E - e sin E = M."""

    sol = solve_kepler(m, e)
    assert sol.converged
    assert abs(sol.E - e * math.sin(sol.E) - m) < 1e-7


@given(
    st.floats(min_value=0.0, max_value=2.0 * math.pi, exclude_max=True),
    st.floats(min_value=0.0, max_value=1.0, exclude_max=True),
)
def test_converged_solution_satisfies_equation(m: float, e: float) -> None:
    """Whenever the solver reports convergence, Kepler's equation holds to 1e-5."""

    sol = solve_kepler(m, e)
    assert math.isfinite(sol.E)
    if sol.converged:
        assert abs(m - (sol.E - e * math.sin(sol.E))) < 1e-5


def test_solve_kepler_near_parabolic_not_converged() -> None:
    """At e = 0.99 and M = 3.8 deg Newton from E = M cycles and is flagged."""

    sol = solve_kepler(math.radians(3.8), 0.99)
    assert not sol.converged
    assert sol.iterations == 40
