"""Dataclasses for wager legs and parlay results."""

from __future__ import annotations

from dataclasses import dataclass

from netprophet.config import Settings, get_settings


@dataclass
class WagerLeg:
    match_id: str
    selection: str
    decimal_odds: float
    points: int = 0
    is_locked: bool = False

    def __post_init__(self) -> None:
        if self.decimal_odds <= 1:
            raise ValueError(f"Decimal odds must be greater than 1, got {self.decimal_odds}")


@dataclass
class ParlayCalculation:
    base_odds: float
    bonus_multiplier: float
    streak_booster: float
    final_odds: float
    potential_payout: float
    bonus_percentage: float
    is_eligible_for_bonus: bool
    safe_wager_cost: int = 0


@dataclass
class WagerValidation:
    is_valid: bool
    reason: str | None = None


@dataclass(frozen=True)
class ParlayRules:
    min_legs: int = 2
    bonus_threshold: int = 3
    bonus_percentage: float = 0.05
    streak_threshold: int = 3
    streak_percentage: float = 0.02
    max_streak_booster: float = 0.20
    safe_wager_cost: int = 50

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ParlayRules:
        settings = settings or get_settings()
        return cls(
            min_legs=settings.min_parlay_legs,
            bonus_threshold=settings.parlay_bonus_threshold,
            bonus_percentage=settings.parlay_bonus_percentage,
            streak_threshold=settings.streak_booster_threshold,
            streak_percentage=settings.streak_booster_percentage,
            max_streak_booster=settings.max_streak_booster,
            safe_wager_cost=settings.safe_wager_cost,
        )
