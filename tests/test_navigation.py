"""Tests for hour angles, sight reduction and sextant corrections."""

from __future__ import annotations

import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from almanac_tools import navigation
from almanac_tools.coords import hour_angle_to_horizontal
from conftest import circular_difference


def test_ra_to_sha() -> None:
    """SHA is 360 deg minus RA expressed in degrees."""

    assert navigation.ra_to_sha(0.0) == 0.0
    assert navigation.ra_to_sha(6.0) == pytest.approx(270.0)
    assert navigation.ra_to_sha(23.0) == pytest.approx(15.0)


def test_sha_to_gha() -> None:
    """GHA of the first point of Aries equals the Greenwich sidereal angle."""

    assert navigation.sha_to_gha(0.0, 2446895.5) == pytest.approx(197.69319, abs=1e-4)
    assert navigation.sha_to_gha(270.0, 2446895.5) == pytest.approx(107.69319, abs=1e-4)


def test_gha_to_lha() -> None:
    """East longitudes add to GHA, west longitudes subtract."""

    assert navigation.gha_to_lha(53.0, -16.0) == 37.0
    assert navigation.gha_to_lha(350.0, 20.0) == 370.0


def test_interpolate() -> None:
    """Only the fraction of the hour is used."""

    assert navigation.interpolate(10.0, 20.0, 5.25) == pytest.approx(12.5)
    assert navigation.interpolate(10.0, 20.0, 3.0) == 10.0


def test_altitude_azimuth() -> None:
    """LHA 37, Dec -15, lat 32 N gives Hc 31.13 deg and Zn 222.8 deg."""

    hc, zn = navigation.altitude_azimuth(37.0, -15.0, 32.0)
    assert hc == pytest.approx(31.1345, abs=0.02)
    assert zn == pytest.approx(222.776, abs=0.05)


def test_altitude_azimuth_east_of_meridian() -> None:
    """With LHA over 180 the body is in the eastern sky; LHA may be unnormalized."""

    hc, zn = navigation.altitude_azimuth(323.0, -15.0, 32.0)
    assert hc == pytest.approx(31.1345, abs=0.02)
    assert zn == pytest.approx(360.0 - 222.776, abs=0.05)
    assert navigation.altitude_azimuth(323.0 + 720.0, -15.0, 32.0) == pytest.approx((hc, zn))


@given(
    st.floats(min_value=0.0, max_value=359.9),
    st.floats(min_value=-80.0, max_value=80.0),
    st.floats(min_value=-80.0, max_value=80.0),
)
def test_altitude_azimuth_matches_horizontal(lha: float, decl: float, lat: float) -> None:
    """Sight reduction agrees with the general horizontal transform."""

    hc, zn = navigation.altitude_azimuth(lha, decl, lat)
    az, alt = hour_angle_to_horizontal(lha, decl, lat)
    assert hc == pytest.approx(alt, abs=1e-7)
    assume(abs(alt) < 85.0 and 1e-6 < lha < 359.9 and abs(lha - 180.0) > 1e-6)
    assert circular_difference(zn, az) < 1e-5


def test_sextant_horizon_sight() -> None:
    """A reading of zero is lowered by about 34.5 arcminutes of refraction."""

    assert navigation.sextant_to_observed_altitude(0.0) == pytest.approx(-0.5758, abs=2e-3)


def test_sextant_index_error_and_dip() -> None:
    """Index error adds to Hs; dip of 0.0293 sqrt(h) is subtracted."""

    base = navigation.sextant_to_observed_altitude(30.0)
    assert navigation.sextant_to_observed_altitude(29.9, index_error=0.1) == pytest.approx(base)
    dip = 0.0293 * math.sqrt(4.0)
    assert dip == pytest.approx(0.0586)
    assert navigation.sextant_to_observed_altitude(30.0 + dip, height_m=4.0) == pytest.approx(base)


def test_sextant_pressure_and_temperature() -> None:
    """Refraction scales with pressure over absolute temperature."""

    refraction = 30.0 - navigation.sextant_to_observed_altitude(30.0)
    ho = navigation.sextant_to_observed_altitude(30.0, temperature_c=10.0, pressure_mb=1010.0)
    assert ho == pytest.approx(30.0 - refraction * 0.28 * 1010.0 / 283.0)


def test_sextant_parallax() -> None:
    """Parallax in altitude is HP times the cosine of the altitude."""

    base = navigation.sextant_to_observed_altitude(30.0)
    ho = navigation.sextant_to_observed_altitude(30.0, horizontal_parallax=0.95)
    assert ho - base == pytest.approx(0.95 * math.cos(math.radians(30.0)))
