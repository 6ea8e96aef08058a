"""Tests for the planetary element tables and the body registry."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from almanac_tools import planets
from almanac_tools.constants import JD2000
from almanac_tools.coords import delta_polar
from almanac_tools.planets import Body, body_state, geocentric_ecliptic, get_orbital_elements, parse_body
from almanac_tools.planets.base import evaluate_elements, period
from almanac_tools.planets.mercury import MERCURY_ELEMENTS
from almanac_tools.sun import sun_ecliptic
from conftest import circular_difference

_VENUS_JD = 2448976.5  # 1992 December 20


def test_parse_body_names() -> None:
    """Names are matched case-insensitively; members pass through."""

    assert parse_body('Mars') is Body.MARS
    assert parse_body(' PLUTO ') is Body.PLUTO
    assert parse_body(Body.MOON) is Body.MOON


def test_parse_body_unknown() -> None:
    """Unknown names raise ValueError listing the choices."""

    with pytest.raises(ValueError, match='Unknown body'):
        parse_body('vulcan')


def test_venus_heliocentric() -> None:
    """Venus on 1992-12-20 is at L 26.114, B -2.621, R 0.7246 AU."""

    state = body_state('venus', _VENUS_JD)
    assert state.lon == pytest.approx(26.11428, abs=0.1)
    assert state.lat == pytest.approx(-2.62070, abs=0.1)
    assert state.R == pytest.approx(0.724603, abs=1e-3)


def test_venus_geocentric() -> None:
    """Geocentric Venus agrees with the difference of reference positions."""

    expected = delta_polar((0.00014, 88.35704, 0.983824), (-2.62070, 26.11428, 0.724603))
    pos = geocentric_ecliptic(Body.VENUS, _VENUS_JD)
    assert circular_difference(pos.lon, expected.lon) < 0.1
    assert pos.lat == pytest.approx(expected.lat, abs=0.1)
    assert pos.r == pytest.approx(expected.r, abs=2e-3)


@pytest.mark.parametrize(
    ('body', 'lon', 'lon_tol', 'r', 'r_tol'),
    [
        (Body.JUPITER, 36.29, 1.0, 4.965, 0.05),
        (Body.SATURN, 45.72, 1.5, 9.184, 0.1),
        (Body.URANUS, 316.42, 1.0, 19.92, 0.15),
        (Body.NEPTUNE, 303.93, 1.5, 30.12, 0.3),
    ],
)
def test_outer_planets_at_j2000(body: Body, lon: float, lon_tol: float, r: float, r_tol: float) -> None:
    """Heliocentric longitude and radius of the outer planets at J2000."""

    state = body_state(body, JD2000)
    assert circular_difference(state.lon, lon) < lon_tol
    assert state.R == pytest.approx(r, abs=r_tol)


_UNPERTURBED = [Body.MERCURY, Body.VENUS, Body.MARS, Body.JUPITER, Body.SATURN, Body.NEPTUNE, Body.PLUTO]


@given(
    st.sampled_from(_UNPERTURBED),
    st.floats(min_value=2415020.0, max_value=2488070.0),
)
def test_orbit_bounds(body: Body, jd: float) -> None:
    """Radius stays between perihelion and aphelion; latitude within the inclination."""

    state = body_state(body, jd)
    assert state.a * (1.0 - state.e) - 1e-9 <= state.R <= state.a * (1.0 + state.e) + 1e-9
    assert abs(state.lat) <= state.i + 1e-9
    assert 0.0 <= state.lon < 360.0


def test_orbital_elements_of_date() -> None:
    """Element evaluation fills elements and leaves the position at zero."""

    el = get_orbital_elements('mercury', JD2000)
    assert el == evaluate_elements(MERCURY_ELEMENTS, JD2000)
    assert 0.0 <= el.L < 360.0
    assert el.a == pytest.approx(0.3870986)
    assert el.R == 0.0
    assert el.year == pytest.approx(period(MERCURY_ELEMENTS))
    assert el.year == pytest.approx(87.97, abs=0.01)


def test_orbital_elements_of_model_bodies() -> None:
    """Sun, Moon and Earth return their full model state."""

    sun = get_orbital_elements(Body.SUN, JD2000)
    assert sun.R > 0.98
    assert get_orbital_elements('earth', JD2000).year == pytest.approx(365.2424)
    assert get_orbital_elements('moon', JD2000).R > 350000.0


def test_earth_opposite_sun() -> None:
    """The Earth's heliocentric longitude is the Sun's geocentric one plus 180."""

    earth = body_state(Body.EARTH, JD2000)
    sun = sun_ecliptic(JD2000)
    assert circular_difference(earth.lon, sun.lon + 180.0) < 1e-9
    assert earth.R == pytest.approx(sun.r)
    assert earth.lat == 0.0


def test_geocentric_sun_and_moon_pass_through() -> None:
    """Sun and Moon are already geocentric."""

    pos = geocentric_ecliptic('sun', JD2000)
    sun = sun_ecliptic(JD2000)
    assert pos.lon == pytest.approx(sun.lon)
    assert pos.r == pytest.approx(sun.r)
    moon = body_state('moon', JD2000)
    assert geocentric_ecliptic('moon', JD2000) == (moon.lat, moon.lon, moon.R)


def test_geocentric_earth_rejected() -> None:
    """Asking for the Earth's geocentric position is an error."""

    with pytest.raises(ValueError, match='Earth'):
        geocentric_ecliptic('earth', JD2000)


def test_geocentric_equatorial_range() -> None:
    """Equatorial output has RA in hours and the distance carried through."""

    decl, ra, r = planets.geocentric_equatorial('mars', JD2000)
    assert 0.0 <= ra < 24.0
    assert -30.0 < decl < 30.0
    assert r == pytest.approx(geocentric_ecliptic('mars', JD2000).r)


def test_every_body_has_a_model() -> None:
    """All bodies except the Earth have a geocentric position."""

    for body in Body:
        if body is Body.EARTH:
            continue
        pos = geocentric_ecliptic(body, JD2000)
        assert pos.r > 0.0
