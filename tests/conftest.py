"""Shared pytest configuration: Hypothesis profiles for local and CI runs."""

from __future__ import annotations

import os

from hypothesis import HealthCheck, settings

settings.register_profile(
    'dev',
    settings(deadline=None, max_examples=60, suppress_health_check=[HealthCheck.too_slow]),
)
settings.register_profile(
    'ci',
    settings(deadline=None, max_examples=200, suppress_health_check=[HealthCheck.too_slow]),
)
settings.load_profile('ci' if os.getenv('CI') else os.getenv('HYPOTHESIS_PROFILE', 'dev'))


def circular_difference(a: float, b: float, period: float = 360.0) -> float:
    """Smallest absolute difference between two angles on a circle."""
    d = (a - b) % period
    return min(d, period - d)
