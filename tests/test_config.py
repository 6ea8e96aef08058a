"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from almanac_tools import config


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without environment overrides the precise series are used."""

    monkeypatch.delenv('ALMANAC_NUTATION_MODEL', raising=False)
    monkeypatch.delenv('ALMANAC_MOON_PRECISION', raising=False)
    monkeypatch.delenv('JULIAN_LEAPSECS', raising=False)
    assert config.get_nutation_model_name() == 'iau1980'
    assert config.get_moon_precision_name() == 'precise'
    assert config.get_leapsecs_path() is None


def test_overrides_are_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    """Values are stripped and lowercased."""

    monkeypatch.setenv('ALMANAC_NUTATION_MODEL', ' Classic ')
    monkeypatch.setenv('ALMANAC_MOON_PRECISION', 'LOW')
    assert config.get_nutation_model_name() == 'classic'
    assert config.get_moon_precision_name() == 'low'


def test_invalid_value_falls_back(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    """An unknown value is ignored with a warning."""

    monkeypatch.setenv('ALMANAC_NUTATION_MODEL', 'iau2000')
    with caplog.at_level(logging.WARNING, logger='almanac_tools.config'):
        assert config.get_nutation_model_name() == 'iau1980'
    assert 'ALMANAC_NUTATION_MODEL' in caplog.text


def test_leapsecs_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """JULIAN_LEAPSECS is passed through when set."""

    monkeypatch.setenv('JULIAN_LEAPSECS', '/data/naif0012.tls')
    assert config.get_leapsecs_path() == '/data/naif0012.tls'
    monkeypatch.setenv('JULIAN_LEAPSECS', '   ')
    assert config.get_leapsecs_path() is None
