"""Environment-driven configuration helpers for the NetProphet engine."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or .env files."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    odds_margin: float = Field(default=0.05, ge=0.0, le=0.5)
    odds_perturbation: float = Field(default=0.05, ge=0.0, le=0.2)

    min_parlay_legs: int = Field(default=2, ge=1)
    parlay_bonus_threshold: int = Field(default=3, ge=1)
    parlay_bonus_percentage: float = Field(default=0.05, ge=0.0, le=1.0)
    streak_booster_threshold: int = Field(default=3, ge=1)
    streak_booster_percentage: float = Field(default=0.02, ge=0.0, le=1.0)
    max_streak_booster: float = Field(default=0.20, ge=0.0, le=1.0)
    safe_wager_cost: int = Field(default=50, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]
