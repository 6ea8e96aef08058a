"""Configuration: default precision modes and leap-second path from environment."""

import logging
import os

logger = logging.getLogger(__name__)

# Env var overrides with sensible defaults.
DEFAULT_NUTATION_MODEL = 'iau1980'
DEFAULT_MOON_PRECISION = 'precise'

NUTATION_MODEL_NAMES = ('iau1980', 'low', 'classic')
MOON_PRECISION_NAMES = ('precise', 'low')


def _choice_from_env(name: str, default: str, choices: tuple[str, ...]) -> str:
    """Return a lowercase env var value if it is one of choices, else default."""
    value = os.environ.get(name, '').strip().lower()
    if not value:
        return default
    if value not in choices:
        logger.warning(
            'Ignoring %s=%r; expected one of %s. Using %r.',
            name,
            value,
            ', '.join(choices),
            default,
        )
        return default
    return value


def get_nutation_model_name() -> str:
    """Return the default nutation series name (ALMANAC_NUTATION_MODEL or 'iau1980').

    Returns:
        One of 'iau1980', 'low', 'classic'.
    """
    return _choice_from_env('ALMANAC_NUTATION_MODEL', DEFAULT_NUTATION_MODEL, NUTATION_MODEL_NAMES)


def get_moon_precision_name() -> str:
    """Return the default lunar series name (ALMANAC_MOON_PRECISION or 'precise').

    Returns:
        One of 'precise', 'low'.
    """
    return _choice_from_env('ALMANAC_MOON_PRECISION', DEFAULT_MOON_PRECISION, MOON_PRECISION_NAMES)


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian, if configured.

    Returns:
        Path string from JULIAN_LEAPSECS, or None to use the bundled LSK.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None
