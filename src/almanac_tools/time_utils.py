"""Civil calendar, Julian date and sidereal time conversions.

Julian dates count days from noon of -4712 January 1 (proleptic Julian
calendar); the day boundary is at noon. Calendar dates on or after
1582-10-15 are Gregorian, earlier ones Julian. Dates in the ten-day gap
of October 1582, and the 1752 British reform, are not special-cased: the
result is numerically defined but has no historical meaning.

Sidereal time polynomials use centuries from J2000.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass

import julian

from almanac_tools.angle_utils import dcos, dsin, hms_to_hours, limit_angle, limit_hour
from almanac_tools.config import get_leapsecs_path
from almanac_tools.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEGREES_PER_HOUR_RA,
    GREGORIAN_REFORM_YMD,
    HOURS_PER_DAY,
    JD2000,
    JD_GREGORIAN_REFORM,
    JD_UNIX,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SIDEREAL_RATE,
)
from almanac_tools.earth_orientation import NutationModel, nutation, obliquity

logger = logging.getLogger(__name__)

# J2000 midnight: rms-julian counts UTC days from 2000-01-01 00:00
_JD_JULIAN_DAY_ZERO = JD2000 - 0.5

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


@dataclass(frozen=True)
class CivilDateTime:
    """Calendar date and UT time of day."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    def date(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return (self.year, self.month, self.day)


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel used by rms-julian if not already loaded."""
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info('Leap seconds from %s not used (%s); using rms-julian bundled LSK.', path, e)
    julian.load_lsk()
    _leapsecs_loaded = True


def civil_to_julian(
    year: int,
    month: int,
    day: float,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Convert a calendar date and UT time to a Julian date.

    January and February are treated as months 13 and 14 of the previous
    year so that the leap day falls at the end of the shifted year. Dates
    on or after 1582-10-15 receive the Gregorian century correction.

    Parameters:
        year: Astronomical year (1 BC = 0, 2 BC = -1).
        month: Month 1-12.
        day: Day of month; may carry a fraction of a day.
        hour, minute, second: UT time added to the date.

    Returns:
        Julian date.
    """
    y = year
    m = month
    if m <= 2:
        y -= 1
        m += 12
    if year * 10000 + month * 100 + day >= GREGORIAN_REFORM_YMD:
        a = y // 100
        b = 2 - a + a // 4
    else:
        b = 0
    jd = math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5
    if hour or minute or second:
        jd += hms_to_hours(hour, minute, second) / HOURS_PER_DAY
    return jd


def julian_to_civil(jd: float) -> CivilDateTime:
    """Convert a Julian date to calendar date and UT time.

    Parameters:
        jd: Julian date (non-negative).

    Returns:
        CivilDateTime; Gregorian when the day number exceeds 2299160,
        Julian calendar otherwise.
    """
    z = int(jd + 0.5)
    f = jd + 0.5 - z
    if z > JD_GREGORIAN_REFORM:
        alpha = int((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4
    else:
        a = z
    b = a + 1524
    c = int((b - 122.1) / 365.25)
    d = int(365.25 * c)
    e = int((b - d) / 30.6001)
    day = b - d - int(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    seconds = f * SECONDS_PER_DAY
    # Round away microsecond noise from the day fraction
    seconds = min(round(seconds, 6), SECONDS_PER_DAY - 1e-6)
    hour = int(seconds // SECONDS_PER_HOUR)
    seconds -= hour * SECONDS_PER_HOUR
    minute = int(seconds // 60.0)
    seconds -= minute * 60.0
    return CivilDateTime(year, month, day, hour, minute, seconds)


def julian_to_hour(jd: float) -> float:
    """Return the UT hour of day (0-24) for a Julian date."""
    midnight = math.floor(jd - 0.5) + 0.5
    return (jd - midnight) * HOURS_PER_DAY


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the day number within the year (1 January = 1)."""
    k = 1 if is_leap_year(year) else 2
    return (275 * month) // 9 - k * ((month + 9) // 12) + day - 30


def date_from_day_of_year(year: int, yday: int) -> tuple[int, int]:
    """Return (month, day) for a day number within the given year.

    Parameters:
        year: Gregorian year (selects the leap-year table).
        yday: Day of year, 1 to 365 or 366.

    Returns:
        (month, day).
    """
    a = 1523 if is_leap_year(year) else 1889
    b = int((yday + a - 122.1) / 365.25)
    c = yday + a - math.floor(365.25 * b)
    e = int(c / 30.6001)
    month = e - 1 if e <= 13 else e - 13
    day = int(c - math.floor(30.6001 * e))
    return (month, day)


def unix_to_julian(t: float) -> float:
    """Convert Unix time (seconds since 1970-01-01 UTC) to a Julian date."""
    return JD_UNIX + t / SECONDS_PER_DAY


def julian_to_unix(jd: float) -> float:
    """Convert a Julian date to Unix time in seconds."""
    return (jd - JD_UNIX) * SECONDS_PER_DAY


def now() -> float:
    """Return the current Julian date from the system clock."""
    return unix_to_julian(time.time())


def julian_from_string(string: str) -> float | None:
    """Parse a UTC date/time string to a Julian date (via rms-julian).

    Parameters:
        string: Date/time in any format rms-julian accepts (e.g.
            '1987-04-10 19:21:00'). A trailing 'Z' is ignored.

    Returns:
        Julian date, or None on parse failure.
    """
    _ensure_leapsecs()
    candidates = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        candidates.append(stripped[:-1])
    for candidate in candidates:
        try:
            result = julian.day_sec_from_string(candidate)
        except (ValueError, TypeError, LookupError, OSError):
            continue
        day, sec = int(result[0]), float(result[1])
        return _JD_JULIAN_DAY_ZERO + day + sec / SECONDS_PER_DAY
    logger.debug('Unparseable date/time string %r', string)
    return None


def julian_to_sidereal(jd: float) -> float:
    """Greenwich mean sidereal time at 0h UT of the date containing jd.

    Parameters:
        jd: Julian date; only its calendar day (midnight to midnight UT) is used.

    Returns:
        Sidereal time in hours, [0, 24).
    """
    midnight = math.floor(jd - 0.5) + 0.5
    t = (midnight - JD2000) / DAYS_PER_JULIAN_CENTURY
    st = 100.46061837 + 36000.770053608 * t + 0.000387933 * t * t - t * t * t / 38710000.0
    return limit_hour(limit_angle(st) / DEGREES_PER_HOUR_RA)


def julian_time_to_sidereal(jd: float, hours: float) -> float:
    """Greenwich mean sidereal time for a date and a UT clock time.

    Parameters:
        jd: Julian date of the day (its time of day is ignored).
        hours: UT hours since midnight.

    Returns:
        Sidereal time in hours, [0, 24).
    """
    return limit_hour(julian_to_sidereal(jd) + hours * SIDEREAL_RATE)


def greenwich_sidereal(jd: float) -> float:
    """Greenwich mean sidereal time at the instant jd, in hours."""
    return julian_time_to_sidereal(jd, julian_to_hour(jd))


def mean_to_apparent_sidereal(jd: float, model: NutationModel | None = None) -> float:
    """Correction (hours) turning mean sidereal time into apparent.

    ``mean + mean_to_apparent_sidereal(jd) = apparent``; the equation of the
    equinoxes is dpsi * cos(mean obliquity) / 15 / 3600.

    Parameters:
        jd: Julian date.
        model: NutationModel to use; None for the configured default.

    Returns:
        Correction in hours (of order 1e-4).
    """
    dpsi, _deps = nutation(jd, model)
    return dpsi * dcos(obliquity(jd)) / DEGREES_PER_HOUR_RA / SECONDS_PER_HOUR


def apparent_sidereal(jd: float, model: NutationModel | None = None) -> float:
    """Greenwich apparent sidereal time at the instant jd, in hours."""
    return limit_hour(greenwich_sidereal(jd) + mean_to_apparent_sidereal(jd, model))


def gmst_to_gast(gmst: float, jd: float) -> float:
    """Convert mean to apparent sidereal time with a short nutation formula.

    Uses only the lunar-node and solar terms of the equation of the
    equinoxes (degrees, days from J2000); cheaper than
    ``mean_to_apparent_sidereal`` and good to about 0.1 s.

    Parameters:
        gmst: Greenwich mean sidereal time, hours.
        jd: Julian date.

    Returns:
        Greenwich apparent sidereal time, hours.
    """
    d = jd - JD2000
    omega = 125.04 - 0.052954 * d
    sun_lon = 280.47 + 0.98565 * d
    epsilon = 23.4393 - 0.0000004 * d
    psi = -0.000319 * dsin(omega) - 0.000024 * dsin(2.0 * sun_lon)
    return gmst + psi * dcos(epsilon)
