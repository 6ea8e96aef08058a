"""Positions of the Sun, Moon and planets, with the time and coordinate
conversions needed to use them.

- Time: civil date <-> Julian date, sidereal time (``time_utils``)
- Earth orientation: obliquity, nutation, precession (``earth_orientation``)
- Frames: equatorial, ecliptic, horizontal, rectangular (``coords``)
- Bodies: ``sun``, ``moon`` and ``planets`` (element tables per planet)
- Celestial navigation and star selection (``navigation``, ``stars``)

Angles are in degrees except right ascension and sidereal time, which
are in hours. Dates are Julian dates (UT).
"""

__all__: list[str] = []
