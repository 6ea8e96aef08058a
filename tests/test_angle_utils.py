"""Tests for angle normalization, degree trig and sexagesimal helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from almanac_tools import angle_utils
from conftest import circular_difference


@pytest.mark.parametrize(
    ('value', 'expected'),
    [(0.0, 0.0), (370.0, 10.0), (-10.0, 350.0), (-360.0, 0.0), (720.5, 0.5), (359.5, 359.5)],
)
def test_limit_angle_known_values(value: float, expected: float) -> None:
    """Angles wrap into [0, 360), negatives upward."""

    assert angle_utils.limit_angle(value) == pytest.approx(expected, abs=1e-12)


def test_limit_hour_known_values() -> None:
    """Hours wrap into [0, 24)."""

    assert angle_utils.limit_hour(25.0) == pytest.approx(1.0)
    assert angle_utils.limit_hour(-1.0) == pytest.approx(23.0)
    assert angle_utils.limit_hour(-24.0) == 0.0


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_limit_angle_range_and_equivalence(value: float) -> None:
    """Normalized angle is in range and congruent to the input modulo 360."""

    result = angle_utils.limit_angle(value)
    assert 0.0 <= result < 360.0
    assert circular_difference(result, value) < 1e-6


@given(st.floats(min_value=-1e5, max_value=1e5, allow_nan=False))
def test_limit_hour_range_and_equivalence(value: float) -> None:
    """Normalized hour is in range and congruent to the input modulo 24."""

    result = angle_utils.limit_hour(value)
    assert 0.0 <= result < 24.0
    assert circular_difference(result, value, 24.0) < 1e-7


def test_degree_trig() -> None:
    """Degree trig helpers agree with textbook values."""

    assert angle_utils.dsin(30.0) == pytest.approx(0.5)
    assert angle_utils.dcos(60.0) == pytest.approx(0.5)
    assert angle_utils.dtan(45.0) == pytest.approx(1.0)
    assert angle_utils.dasin(0.5) == pytest.approx(30.0)
    assert angle_utils.dacos(0.5) == pytest.approx(60.0)
    assert angle_utils.datan(1.0) == pytest.approx(45.0)
    assert angle_utils.datan2(-1.0, -1.0) == pytest.approx(-135.0)


def test_hms_to_hours_sign_on_any_field() -> None:
    """A minus sign on the first non-zero field makes the value negative."""

    assert angle_utils.hms_to_hours(7, 45, 18.946) == pytest.approx(7.7552628, abs=1e-7)
    assert angle_utils.hms_to_hours(-6, 43, 11.61) == pytest.approx(-6.7198917, abs=1e-7)
    assert angle_utils.hms_to_hours(0, -30, 0) == pytest.approx(-0.5)


def test_hours_to_hms_carries_sign_on_first_nonzero_field() -> None:
    """Negative values put the sign on hours, else minutes, else seconds."""

    assert angle_utils.hours_to_hms(12.5) == (12, 30, pytest.approx(0.0, abs=1e-6))
    h, m, s = angle_utils.hours_to_hms(-0.5)
    assert (h, m) == (0, -30)
    assert s == pytest.approx(0.0, abs=1e-6)
    h, m, s = angle_utils.hours_to_hms(-2.0 / 3600.0)
    assert (h, m) == (0, 0)
    assert s == pytest.approx(-2.0)


@given(st.floats(min_value=-1000.0, max_value=1000.0, allow_nan=False))
def test_hms_round_trip(value: float) -> None:
    """Splitting into h, m, s and joining again gives the input back."""

    assert angle_utils.hms_to_hours(*angle_utils.hours_to_hms(value)) == pytest.approx(value, abs=1e-9)


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('7 45 18.946', 7.7552628),
        ('-6:43:11.61', -6.7198917),
        ('23.5', 23.5),
        ('-0 30', -0.5),
        ('  12  30  ', 12.5),
    ],
)
def test_parse_angle_accepts_sexagesimal(text: str, expected: float) -> None:
    """Whitespace or colon separated fields parse to decimal."""

    result = angle_utils.parse_angle(text)
    assert result is not None
    assert result == pytest.approx(expected, abs=1e-7)


@pytest.mark.parametrize('text', ['', '   ', 'abc', '1 -2 3', '1 2 3 4'])
def test_parse_angle_rejects_malformed_input(text: str) -> None:
    """Malformed strings return None rather than raising."""

    assert angle_utils.parse_angle(text) is None
