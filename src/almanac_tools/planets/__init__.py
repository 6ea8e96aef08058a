"""Body registry: orbital elements and positions by body name.

Planet positions are heliocentric ecliptic coordinates of date (AU); the
Sun and Moon are geocentric. ``geocentric_ecliptic`` and
``geocentric_equatorial`` give every body as seen from the Earth.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from functools import partial

from almanac_tools import moon, sun
from almanac_tools.coords import Polar, delta_polar, ecliptic_to_equatorial
from almanac_tools.planets.base import BodyState, OrbitalElements, base_model, evaluate_elements
from almanac_tools.planets.earth import earth_state
from almanac_tools.planets.jupiter import JUPITER_ELEMENTS
from almanac_tools.planets.mars import MARS_ELEMENTS
from almanac_tools.planets.mercury import MERCURY_ELEMENTS
from almanac_tools.planets.neptune import NEPTUNE_ELEMENTS
from almanac_tools.planets.pluto import PLUTO_ELEMENTS
from almanac_tools.planets.saturn import SATURN_ELEMENTS
from almanac_tools.planets.uranus import URANUS_ELEMENTS, uranus_state
from almanac_tools.planets.venus import VENUS_ELEMENTS


class Body(str, enum.Enum):
    """Solar-system bodies with a position model."""

    SUN = 'sun'
    MOON = 'moon'
    MERCURY = 'mercury'
    VENUS = 'venus'
    EARTH = 'earth'
    MARS = 'mars'
    JUPITER = 'jupiter'
    SATURN = 'saturn'
    URANUS = 'uranus'
    NEPTUNE = 'neptune'
    PLUTO = 'pluto'


_ELEMENTS: dict[Body, OrbitalElements] = {
    Body.MERCURY: MERCURY_ELEMENTS,
    Body.VENUS: VENUS_ELEMENTS,
    Body.MARS: MARS_ELEMENTS,
    Body.JUPITER: JUPITER_ELEMENTS,
    Body.SATURN: SATURN_ELEMENTS,
    Body.URANUS: URANUS_ELEMENTS,
    Body.NEPTUNE: NEPTUNE_ELEMENTS,
    Body.PLUTO: PLUTO_ELEMENTS,
}

_MODELS: dict[Body, Callable[[float], BodyState]] = {
    Body.SUN: lambda jd: sun.sun_state(jd),
    Body.MOON: lambda jd: moon.moon(jd),
    Body.EARTH: earth_state,
    Body.URANUS: uranus_state,
}
for _body, _el in _ELEMENTS.items():
    _MODELS.setdefault(_body, partial(base_model, _el))

_GEOCENTRIC = (Body.SUN, Body.MOON)


def parse_body(body: Body | str) -> Body:
    """Resolve a Body or a case-insensitive body name.

    Parameters:
        body: Body member or name such as 'Mars'.

    Returns:
        The matching Body.

    Raises:
        ValueError: If the name is not a known body.
    """
    if isinstance(body, Body):
        return body
    try:
        return Body(str(body).strip().lower())
    except ValueError:
        raise ValueError(
            f'Unknown body {body!r}; expected one of {", ".join(b.value for b in Body)}'
        ) from None


def get_orbital_elements(body: Body | str, jd: float) -> BodyState:
    """Mean orbital elements of date for a body.

    For the planets with element tables only the element fields are set;
    position fields are zero. The Sun, Moon and Earth have no separate
    element step, so their full state is returned.

    Parameters:
        body: Body or name.
        jd: Julian date.

    Returns:
        BodyState with L, e, i, om, w, pi, a, M, ad, mag and year filled in.
    """
    b = parse_body(body)
    el = _ELEMENTS.get(b)
    if el is None:
        return _MODELS[b](jd)
    return evaluate_elements(el, jd)


def body_state(body: Body | str, jd: float) -> BodyState:
    """Position and elements of a body at jd.

    Planets and Earth are heliocentric; Sun and Moon geocentric (Moon R
    in kilometres).
    """
    b = parse_body(body)
    return _MODELS[b](jd)


def geocentric_ecliptic(body: Body | str, jd: float) -> Polar:
    """Ecliptic latitude, longitude and distance of a body as seen from the Earth.

    Parameters:
        body: Body or name; Earth itself is rejected.
        jd: Julian date.

    Returns:
        Polar(lat, lon, r) in degrees and AU (kilometres for the Moon).

    Raises:
        ValueError: For the Earth, or an unknown name.
    """
    b = parse_body(body)
    if b is Body.EARTH:
        raise ValueError('The Earth has no geocentric position')
    state = body_state(b, jd)
    if b in _GEOCENTRIC:
        return Polar(state.lat, state.lon, state.R)
    return delta_polar(earth_state(jd).polar(), state.polar())


def geocentric_equatorial(body: Body | str, jd: float) -> tuple[float, float, float]:
    """Declination, right ascension and distance of a body as seen from the Earth.

    Returns:
        (decl, ra, r): degrees, hours in [0, 24), AU (kilometres for the Moon).
    """
    pos = geocentric_ecliptic(body, jd)
    decl, ra = ecliptic_to_equatorial(pos.lat, pos.lon, jd)
    return (decl, ra, pos.r)


__all__ = [
    'Body',
    'BodyState',
    'OrbitalElements',
    'body_state',
    'geocentric_ecliptic',
    'geocentric_equatorial',
    'get_orbital_elements',
    'parse_body',
]
