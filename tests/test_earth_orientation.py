"""Tests for obliquity, nutation and precession."""

from __future__ import annotations

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from almanac_tools import earth_orientation as eo
from almanac_tools.constants import JD2000
from conftest import circular_difference

# 1987 April 10, 0h
JD_1987_04_10 = 2446895.5


def test_obliquity_at_j2000() -> None:
    """Mean obliquity at J2000 is 23.4392911 degrees."""

    assert eo.obliquity(JD2000) == pytest.approx(23.4392911, abs=1e-9)


def test_obliquity_1987() -> None:
    """Mean obliquity on 1987-04-10 is 23 26' 27.407"."""

    assert eo.obliquity(JD_1987_04_10) == pytest.approx(23.0 + 26.0 / 60.0 + 27.407 / 3600.0, abs=1e-6)


def test_nutation_iau1980_reference() -> None:
    """Full series gives dpsi = -3.788" and deps = +9.443" on 1987-04-10."""

    result = eo.nutation(JD_1987_04_10, eo.NutationModel.IAU1980)
    assert result.dpsi == pytest.approx(-3.788, abs=5e-4)
    assert result.deps == pytest.approx(9.443, abs=5e-4)


@pytest.mark.parametrize(
    ('model', 'tol_psi', 'tol_eps'),
    [(eo.NutationModel.LOW_PRECISION, 0.6, 0.3), (eo.NutationModel.CLASSIC, 0.6, 0.3)],
)
def test_reduced_nutation_models_close_to_full_series(
    model: eo.NutationModel, tol_psi: float, tol_eps: float
) -> None:
    """Short series agree with the full series to a fraction of an arc second."""

    for jd in (JD_1987_04_10, JD2000, 2415020.5, 2469807.5):
        full = eo.nutation(jd, eo.NutationModel.IAU1980)
        short = eo.nutation(jd, model)
        assert short.dpsi == pytest.approx(full.dpsi, abs=tol_psi)
        assert short.deps == pytest.approx(full.deps, abs=tol_eps)


def test_nutation_accepts_model_name_and_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Model names are accepted; None uses ALMANAC_NUTATION_MODEL."""

    low = eo.nutation(JD2000, eo.NutationModel.LOW_PRECISION)
    assert eo.nutation(JD2000, 'low') == low
    monkeypatch.setenv('ALMANAC_NUTATION_MODEL', 'low')
    assert eo.nutation(JD2000) == low
    monkeypatch.delenv('ALMANAC_NUTATION_MODEL')
    assert eo.nutation(JD2000) == eo.nutation(JD2000, eo.NutationModel.IAU1980)


def test_true_obliquity_adds_nutation() -> None:
    """True obliquity is mean obliquity plus deps."""

    deps = eo.nutation(JD_1987_04_10, 'iau1980').deps
    expected = eo.obliquity(JD_1987_04_10) + deps / 3600.0
    assert eo.true_obliquity(JD_1987_04_10, eo.NutationModel.IAU1980) == pytest.approx(expected)


def test_fundamental_arguments_in_range() -> None:
    """Delaunay arguments are normalized to [0, 360)."""

    for value in eo.fundamental_arguments(JD_1987_04_10):
        assert 0.0 <= value < 360.0


def test_precession_rate_reference() -> None:
    """Annual precession for a star at 10h05m42.7s, +12d12'45" in 1978."""

    ra = 10.0 + 5.0 / 60.0 + 42.7 / 3600.0
    decl = 12.0 + 12.0 / 60.0 + 45.0 / 3600.0
    ddecl, dra = eo.precession_rate(decl, ra, 2443509.5)
    assert dra * 3600.0 == pytest.approx(3.2121, abs=2e-3)
    assert ddecl * 3600.0 == pytest.approx(-17.600, abs=1e-2)


def test_precession_identity_for_equal_epochs() -> None:
    """No rotation when the two equinoxes coincide."""

    assert eo.precession(41.0, 2.5, JD2000, JD2000) == (41.0, 2.5)


def test_precession_matrix_is_rotation() -> None:
    """Precession matrix is orthonormal with determinant 1."""

    p = eo.precession_matrix(JD2000, 2462088.69)
    assert np.allclose(p @ p.T, np.eye(3))
    assert np.linalg.det(p) == pytest.approx(1.0)


def test_precession_reference_star() -> None:
    """Theta Persei from J2000 to 2028 Nov 13.19."""

    decl, ra = eo.precession(49.227750, 41.054063 / 15.0, JD2000, 2462088.69)
    assert ra * 15.0 == pytest.approx(41.547214, abs=1e-3)
    assert decl == pytest.approx(49.348483, abs=1e-3)


@given(
    st.floats(min_value=-89.0, max_value=89.0),
    st.floats(min_value=0.0, max_value=23.999),
    st.floats(min_value=2415020.0, max_value=2488070.0),
)
def test_precession_round_trip(decl: float, ra: float, jd1: float) -> None:
    """Precessing forward and back returns the starting position."""

    d1, r1 = eo.precession(decl, ra, JD2000, jd1)
    d0, r0 = eo.precession(d1, r1, jd1, JD2000)
    assert d0 == pytest.approx(decl, abs=5e-5)
    assert circular_difference(r0, ra, 24.0) * 15.0 * np.cos(np.radians(decl)) < 5e-5
