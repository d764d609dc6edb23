"""Odds conversion tests."""

from __future__ import annotations

import pytest

from netprophet.odds import conversions


def test_american_to_decimal() -> None:
    assert conversions.american_to_decimal(150) == pytest.approx(2.5)
    assert conversions.american_to_decimal(-200) == pytest.approx(1.5)
    with pytest.raises(ValueError):
        conversions.american_to_decimal(0)


def test_format_american() -> None:
    assert conversions.format_american(2.5) == "+150"
    assert conversions.format_american(2.0) == "+100"
    assert conversions.format_american(1.5) == "-200"
    with pytest.raises(ValueError):
        conversions.format_american(1.0)


def test_implied_probability_and_expected_value() -> None:
    assert conversions.implied_probability(2.0) == pytest.approx(0.5)
    assert conversions.expected_value(2.0, stake=10, probability=0.5) == pytest.approx(0.0)
    assert conversions.expected_value(3.0, stake=10, probability=0.5) == pytest.approx(5.0)
