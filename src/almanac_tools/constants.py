"""Fixed constants: reference epochs, angle and time units, solver limits.

Epochs follow the 1900/2000 split of the formulae they belong to; see the
individual modules for which epoch each formula family uses.
"""

import math

# Reference epochs (Julian dates)
JD1900 = 2415020.0  # 1900 January 0.5 (Jan 0 noon); epoch of the classic element tables
JD2000 = 2451545.0  # 2000 January 1.5 (J2000.0)
JD_UNIX = 2440587.5  # 1970 January 1.0, Unix epoch
JD_GREGORIAN_REFORM = 2299160  # last truncated day number before 1582-10-15

# Calendar reform: first Gregorian date, as yyyymmdd
GREGORIAN_REFORM_YMD = 15821015

# Time: seconds per unit and century lengths
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
HOURS_PER_DAY = 24.0
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_TROPICAL_CENTURY = 36524.2199
JD1900_TROPICAL = 2415020.313  # 1900.0 as a tropical-year epoch (precession)

# Ratio of sidereal to solar day length (Meeus 12.4 rate)
SIDEREAL_RATE = 1.00273790935

# Angle: degrees per circle and sexagesimal (DMS/arcmin/arcsec)
DEGREES_PER_CIRCLE = 360.0
HOURS_PER_CIRCLE = 24.0
HALF_CIRCLE_DEGREES = 180.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360 deg / 24 h

RAD = math.pi / 180.0
DEG = 180.0 / math.pi

# Mean obliquity of the ecliptic at J2000 (degrees)
EARTH_TILT_J2000 = 23.4392911

# Equatorial radius of the Earth (km), used for lunar parallax
EARTH_RADIUS_KM = 6378.14

# Kepler solver limits
KEPLER_ACCURACY = 0.000001 * RAD  # radians
KEPLER_MAX_ITERATIONS = 40
