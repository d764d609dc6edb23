"""Settings and tuning tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from netprophet.config import Settings, get_settings
from netprophet.odds.tuning import OddsTuning
from netprophet.parlays.types import ParlayRules


def test_defaults_match_engine_constants() -> None:
    settings = Settings()
    assert OddsTuning.from_settings(settings) == OddsTuning()
    assert ParlayRules.from_settings(settings) == ParlayRules()


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ODDS_MARGIN", "0.1")
    monkeypatch.setenv("PARLAY_BONUS_THRESHOLD", "4")
    settings = Settings()
    assert OddsTuning.from_settings(settings).margin == 0.1
    assert ParlayRules.from_settings(settings).bonus_threshold == 4


def test_out_of_range_setting_rejected(monkeypatch) -> None:
    monkeypatch.setenv("ODDS_MARGIN", "2")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
